"""AI behaviour and state component."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from gridrogue.components import Point


class AIBehavior(IntEnum):
    PASSIVE = 0  # does not move unless attacked
    WANDER = 1
    GUARD = 2
    HUNTER = 3
    FLEEING = 4
    PACK = 5


class AIState(IntEnum):
    IDLE = 0
    PATROLLING = 1
    CHASING = 2
    FLEEING = 3
    ATTACKING = 4
    SEARCHING = 5  # lost sight of the player, heading to the last known spot


def manhattan_distance(a: Point, b: Point) -> int:
    """Sum of the absolute coordinate differences."""
    return abs(a.x - b.x) + abs(a.y - b.y)


@dataclass
class AIComponent:
    """Behaviour, current state and tuning of an AI-controlled entity."""

    behavior: AIBehavior = AIBehavior.PASSIVE
    state: AIState = AIState.IDLE
    last_known_player_pos: Point = field(default_factory=Point)
    home_position: Point = field(default_factory=Point)
    patrol_radius: int = 0
    aggro_range: int = 0
    flee_threshold: float = 0.0
    search_turns: int = 0
    max_search_turns: int = 0

    @classmethod
    def create(cls, behavior: AIBehavior, home_position: Point) -> AIComponent:
        """An idle AI with the standard tuning."""
        return cls(
            behavior=behavior,
            state=AIState.IDLE,
            home_position=home_position,
            patrol_radius=5,
            aggro_range=8,
            flee_threshold=0.3,
            max_search_turns=10,
        )

    def is_aggressive(self) -> bool:
        return self.state in (AIState.CHASING, AIState.ATTACKING)

    def is_fleeing(self) -> bool:
        return self.state == AIState.FLEEING

    def is_searching(self) -> bool:
        return self.state == AIState.SEARCHING

    def should_flee(self, current_hp: int, max_hp: int) -> bool:
        """True when health has fallen to the flee threshold."""
        if self.flee_threshold <= 0 or max_hp <= 0:
            return False
        return current_hp / max_hp <= self.flee_threshold

    def increment_search_turns(self) -> None:
        self.search_turns += 1

    def reset_search_turns(self) -> None:
        self.search_turns = 0

    def has_exceeded_max_search_turns(self) -> bool:
        return self.search_turns >= self.max_search_turns

    def distance_from_home(self, current_pos: Point) -> int:
        return manhattan_distance(current_pos, self.home_position)

    def is_outside_patrol_area(self, current_pos: Point) -> bool:
        return self.distance_from_home(current_pos) > self.patrol_radius