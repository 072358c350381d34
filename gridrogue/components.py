"""Core component types: grid points, names, rendering, health and tags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Point:
    """A position on the map grid."""

    x: int = 0
    y: int = 0

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __mul__(self, factor: object) -> Point:
        if not isinstance(factor, int):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)


class ComponentType(str, Enum):
    """Identifiers of every component kind an entity can carry."""

    AI_COMPONENT = "AIComponent"
    AI_TAG = "AITag"
    BLOCKS_MOVEMENT = "BlocksMovement"
    CORPSE_TAG = "CorpseTag"
    EQUIPMENT = "Equipment"
    FOV = "FOV"
    HEALTH = "Health"
    INVENTORY = "Inventory"
    ITEM_PICKUP = "ItemPickup"
    NAME = "Name"
    PLAYER_TAG = "PlayerTag"
    POSITION = "Position"
    RENDERABLE = "Renderable"
    STATS = "Stats"
    EXPERIENCE = "Experience"
    SKILLS = "Skills"
    COMBAT = "Combat"
    MANA = "Mana"
    STAMINA = "Stamina"
    STATUS_EFFECTS = "StatusEffects"
    TURN_ACTOR = "TurnActor"
    PATHFINDING = "PathfindingComponent"

    def __str__(self) -> str:
        return self.value


@dataclass
class Name:
    """An entity's display name."""

    name: str = ""


@dataclass
class Renderable:
    """How an entity is drawn: glyph, colour and an optional tile override."""

    glyph: str = ""
    color: int = 0
    tile_name: str = ""


@dataclass
class Health:
    """Current and maximum hit points."""

    current_hp: int = 0
    max_hp: int = 0

    @classmethod
    def full(cls, max_hp: int) -> Health:
        """Health at its maximum."""
        return cls(current_hp=max_hp, max_hp=max_hp)

    def is_dead(self) -> bool:
        return self.current_hp <= 0


@dataclass(frozen=True)
class BlocksMovement:
    """Marks an entity that other entities cannot walk through."""


@dataclass(frozen=True)
class PlayerTag:
    """Marks the player entity."""


@dataclass(frozen=True)
class AITag:
    """Marks an entity controlled by AI."""


@dataclass(frozen=True)
class CorpseTag:
    """Marks a corpse."""