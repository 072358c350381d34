"""Turn-taking actor component with a FIFO of pending actions."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any


@dataclass
class TurnActor:
    """An entity that takes turns, with speed, schedule and queued actions."""

    speed: int = 0
    alive: bool = True
    next_turn_time: int = 0
    actions: deque = field(default_factory=deque, repr=False, compare=False)

    def queue_action(self, action: Any) -> TurnActor:
        """Append an action and return the actor, for chaining."""
        self.actions.append(action)
        return self

    def add_action(self, action: Any) -> None:
        self.actions.append(action)

    def next_action(self) -> Any:
        """Remove and return the oldest action, or None if there is none."""
        return self.actions.popleft() if self.actions else None

    def peek_next_action(self) -> Any:
        """Return the oldest action without removing it, or None."""
        return self.actions[0] if self.actions else None