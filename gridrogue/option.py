"""An explicit optional value for component lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Option(Generic[T]):
    """A value that may or may not be present."""

    value: Any = None
    present: bool = False

    @classmethod
    def some(cls, value: T) -> Option[T]:
        return cls(value=value, present=True)

    @classmethod
    def none(cls) -> Option[T]:
        return cls(value=None, present=False)

    def is_some(self) -> bool:
        return self.present

    def is_none(self) -> bool:
        return not self.present

    def unwrap(self) -> T:
        """Return the value; raise ValueError if there is none."""
        if not self.present:
            raise ValueError("called unwrap() on a None value")
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value if self.present else default

    def map(self, func: Callable[[T], U]) -> Option[U]:
        """Apply ``func`` to the value if present."""
        if self.present:
            return Option.some(func(self.value))
        return Option.none()