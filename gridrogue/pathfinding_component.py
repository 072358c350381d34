"""Per-entity pathfinding state: the current path, its target and recompute policy."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

from gridrogue.components import Point

_STRATEGY_NAMES = {
    0: "Direct",
    1: "Avoid Entities",
    2: "Prefer Open",
    3: "Stealthy",
}


@dataclass
class PathfindingComponent:
    """The path an entity follows and when it should be recomputed.

    A ``recompute_frequency`` of 0 means the path is only recomputed when it
    is missing or invalid; a ``max_path_length`` of 0 means no limit.
    """

    current_path: list[Point] = field(default_factory=list)
    target_pos: Point = field(default_factory=Point)
    path_valid: bool = False
    last_recompute: int = 0
    strategy: int = 0
    recompute_frequency: int = 0
    max_path_length: int = 50
    use_pathfinding: bool = True

    @classmethod
    def with_strategy(cls, strategy: int) -> PathfindingComponent:
        """A default component using the given strategy."""
        return cls(strategy=strategy)

    def has_path(self) -> bool:
        return self.path_valid and bool(self.current_path)

    def next_position(self, current_pos: Point) -> Point:
        """The step after ``current_pos`` on the path.

        If ``current_pos`` is not on the path, or is its last point, the first
        point of the path is returned; with no path, the origin.
        """
        if not self.has_path():
            return Point()
        try:
            index = self.current_path.index(current_pos)
        except ValueError:
            index = None
        if index is not None and index + 1 < len(self.current_path):
            return self.current_path[index + 1]
        return self.current_path[0]

    def advance_path(self, current_pos: Point) -> None:
        """Drop every point up to and including ``current_pos``."""
        try:
            index = self.current_path.index(current_pos)
        except ValueError:
            return
        self.current_path = self.current_path[index + 1:]

    def clear_path(self) -> None:
        """Forget the path and target and mark the path invalid."""
        self.current_path.clear()
        self.path_valid = False
        self.target_pos = Point()

    def set_path(self, path: Iterable[Point], target: Point) -> None:
        """Store a copy of ``path``, truncated to the maximum length."""
        points = list(path)
        if self.max_path_length > 0:
            points = points[: self.max_path_length]
        self.current_path = points
        self.target_pos = target
        self.path_valid = True

    def needs_recompute(self, current_turn: int) -> bool:
        if not self.use_pathfinding:
            return False
        if not self.path_valid or not self.current_path:
            return True
        if self.recompute_frequency > 0:
            return current_turn - self.last_recompute >= self.recompute_frequency
        return False

    def mark_recomputed(self, current_turn: int) -> None:
        self.last_recompute = current_turn

    def path_length(self) -> int:
        return len(self.current_path)

    def is_at_target(self, current_pos: Point) -> bool:
        return current_pos == self.target_pos

    def remaining_distance(self, current_pos: Point) -> int:
        """Steps left after ``current_pos``; the full length if it is off the
        path, and -1 when there is no path."""
        if not self.has_path():
            return -1
        try:
            index = self.current_path.index(current_pos)
        except ValueError:
            return len(self.current_path)
        return len(self.current_path) - index - 1

    def set_strategy(self, strategy: int) -> None:
        """Change strategy; a real change invalidates the current path."""
        if self.strategy != strategy:
            self.strategy = strategy
            self.path_valid = False

    def set_max_path_length(self, max_length: int) -> None:
        """Change the length limit, truncating the current path to it."""
        self.max_path_length = max_length
        if max_length > 0:
            del self.current_path[max_length:]

    def enable_pathfinding(self) -> None:
        self.use_pathfinding = True

    def disable_pathfinding(self) -> None:
        self.use_pathfinding = False
        self.clear_path()

    def strategy_name(self) -> str:
        return _STRATEGY_NAMES.get(self.strategy, "Unknown")

    def clone(self) -> PathfindingComponent:
        """A copy whose path list is independent of this one."""
        return replace(self, current_path=list(self.current_path))