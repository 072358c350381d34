"""Entity store: entity ids and the components attached to them."""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Callable, Optional

from gridrogue.ai import AIComponent
from gridrogue.character import (
    Combat,
    Experience,
    Mana,
    Skills,
    Stamina,
    Stats,
    StatusEffects,
)
from gridrogue.components import (
    AITag,
    BlocksMovement,
    ComponentType,
    CorpseTag,
    Health,
    Name,
    PlayerTag,
    Point,
    Renderable,
)
from gridrogue.fov import FOV
from gridrogue.inventory import Equipment, Inventory, ItemPickup
from gridrogue.option import Option
from gridrogue.pathfinding_component import PathfindingComponent
from gridrogue.turn import TurnActor

logger = logging.getLogger(__name__)

EntityID = int


class EntityNotFoundError(LookupError):
    """Raised when an operation names an entity that does not exist."""


class ComponentMissingError(LookupError):
    """Raised when an entity lacks a component an operation needs."""


_COMPONENT_CLASSES: dict[ComponentType, type] = {
    ComponentType.AI_COMPONENT: AIComponent,
    ComponentType.AI_TAG: AITag,
    ComponentType.BLOCKS_MOVEMENT: BlocksMovement,
    ComponentType.CORPSE_TAG: CorpseTag,
    ComponentType.EQUIPMENT: Equipment,
    ComponentType.FOV: FOV,
    ComponentType.HEALTH: Health,
    ComponentType.INVENTORY: Inventory,
    ComponentType.ITEM_PICKUP: ItemPickup,
    ComponentType.NAME: Name,
    ComponentType.PLAYER_TAG: PlayerTag,
    ComponentType.POSITION: Point,
    ComponentType.RENDERABLE: Renderable,
    ComponentType.STATS: Stats,
    ComponentType.EXPERIENCE: Experience,
    ComponentType.SKILLS: Skills,
    ComponentType.COMBAT: Combat,
    ComponentType.MANA: Mana,
    ComponentType.STAMINA: Stamina,
    ComponentType.STATUS_EFFECTS: StatusEffects,
    ComponentType.TURN_ACTOR: TurnActor,
    ComponentType.PATHFINDING: PathfindingComponent,
}

_CLASS_TO_TYPE: dict[type, ComponentType] = {
    cls: ctype for ctype, cls in _COMPONENT_CLASSES.items()
}

# Values returned for absent components: every number zero, every flag off.
_ZEROS: dict[ComponentType, Callable[[], Any]] = {
    ComponentType.AI_COMPONENT: AIComponent,
    ComponentType.AI_TAG: AITag,
    ComponentType.BLOCKS_MOVEMENT: BlocksMovement,
    ComponentType.CORPSE_TAG: CorpseTag,
    ComponentType.EQUIPMENT: Equipment,
    ComponentType.FOV: lambda: None,
    ComponentType.HEALTH: Health,
    ComponentType.INVENTORY: Inventory,
    ComponentType.ITEM_PICKUP: ItemPickup,
    ComponentType.NAME: Name,
    ComponentType.PLAYER_TAG: PlayerTag,
    ComponentType.POSITION: Point,
    ComponentType.RENDERABLE: Renderable,
    ComponentType.STATS: lambda: Stats(0, 0, 0, 0, 0, 0),
    ComponentType.EXPERIENCE: lambda: Experience(0, 0, 0, 0, 0, 0),
    ComponentType.SKILLS: lambda: Skills(0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    ComponentType.COMBAT: lambda: Combat(0, 0, 0, 0, 0, 0),
    ComponentType.MANA: lambda: Mana(0, 0, 0),
    ComponentType.STAMINA: lambda: Stamina(0, 0, 0),
    ComponentType.STATUS_EFFECTS: StatusEffects,
    ComponentType.TURN_ACTOR: lambda: TurnActor(speed=0, alive=False),
    ComponentType.PATHFINDING: lambda: None,
}

_MISSING = object()


def component_class(ctype: ComponentType | str) -> Optional[type]:
    """The class stored under ``ctype``, or None for an unknown type."""
    try:
        return _COMPONENT_CLASSES[ComponentType(ctype)]
    except ValueError:
        return None


def component_type_of(component: Any) -> Optional[ComponentType]:
    """The component type a value is stored under, or None if unknown."""
    return _CLASS_TO_TYPE.get(type(component))


class World:
    """Thread-safe store of entities and their components.

    Components are held by reference: mutating a returned component changes
    the stored one.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._next_id: EntityID = 1
        self._entities: dict[EntityID, None] = {}
        self._components: dict[ComponentType | str, dict[EntityID, Any]] = {}

    # --- entities -------------------------------------------------------

    def add_entity(self) -> EntityID:
        """Create a new entity and return its id."""
        with self._lock:
            entity_id = self._next_id
            self._entities[entity_id] = None
            self._next_id += 1
            return entity_id

    def add_entity_with_id(self, entity_id: EntityID) -> None:
        """Create an entity with a chosen id; ValueError if it is taken."""
        with self._lock:
            if entity_id in self._entities:
                raise ValueError(f"entity with ID {entity_id} already exists")
            self._entities[entity_id] = None
            if entity_id >= self._next_id:
                self._next_id = entity_id + 1

    def remove_entity(self, entity_id: EntityID) -> None:
        """Remove an entity and all of its components."""
        with self._lock:
            self._entities.pop(entity_id, None)
            for store in self._components.values():
                store.pop(entity_id, None)

    def entity_exists(self, entity_id: EntityID) -> bool:
        with self._lock:
            return entity_id in self._entities

    def __contains__(self, entity_id: object) -> bool:
        return self.entity_exists(entity_id)  # type: ignore[arg-type]

    def all_entities(self) -> list[EntityID]:
        with self._lock:
            return list(self._entities)

    def entities_with_component(self, ctype: ComponentType | str) -> list[EntityID]:
        with self._lock:
            return list(self._components.get(ctype, {}))

    # --- components -----------------------------------------------------

    def has_component(self, entity_id: EntityID, ctype: ComponentType | str) -> bool:
        with self._lock:
            return entity_id in self._components.get(ctype, {})

    def add_component(
        self, entity_id: EntityID, ctype: ComponentType | str, component: Any
    ) -> None:
        """Attach or replace a component; ignored for unknown entities."""
        with self._lock:
            if entity_id not in self._entities:
                logger.debug(
                    "Attempted to add component %s to non-existent entity %d",
                    ctype,
                    entity_id,
                )
                return
            self._components.setdefault(ctype, {})[entity_id] = component

    def add_components(self, entity_id: EntityID, *args: Any) -> None:
        """Attach several components, each stored under the type of its class."""
        if not self.entity_exists(entity_id):
            logger.debug(
                "Attempted to add components to non-existent entity %d", entity_id
            )
            return
        for component in args:
            ctype = component_type_of(component)
            if ctype is None:
                logger.warning(
                    "Unknown component type %s for entity %d",
                    type(component).__name__,
                    entity_id,
                )
                continue
            self.add_component(entity_id, ctype, component)

    def remove_component(self, entity_id: EntityID, ctype: ComponentType | str) -> None:
        with self._lock:
            store = self._components.get(ctype)
            if store is not None:
                store.pop(entity_id, None)

    def remove_components(self, entity_id: EntityID, *args: ComponentType | str) -> None:
        for ctype in args:
            self.remove_component(entity_id, ctype)

    def _stored(self, entity_id: EntityID, ctype: ComponentType | str) -> Any:
        if entity_id not in self._entities:
            raise EntityNotFoundError(f"entity {entity_id} does not exist")
        store = self._components.get(ctype)
        if store is None:
            raise ComponentMissingError(f"component type {ctype} not registered")
        if entity_id not in store:
            raise ComponentMissingError(
                f"entity {entity_id} does not have component {ctype}"
            )
        return store[entity_id]

    def update_component(
        self,
        entity_id: EntityID,
        ctype: ComponentType | str,
        update: Callable[[Any], Any],
    ) -> None:
        """Apply ``update`` to a copy of a component and store the result.

        If ``update`` returns a value other than None, that value replaces the
        component; otherwise the mutated copy is stored. If ``update`` raises,
        the stored component is left unchanged and the exception propagates.
        """
        with self._lock:
            working = copy.deepcopy(self._stored(entity_id, ctype))
            replacement = update(working)
            self._components[ctype][entity_id] = (
                working if replacement is None else replacement
            )

    def update_ai_component(
        self, entity_id: EntityID, update: Callable[[AIComponent], Any]
    ) -> None:
        """Mutate an entity's AI component under the lock and store it back."""
        with self._lock:
            current = self._stored(entity_id, ComponentType.AI_COMPONENT)
            if not isinstance(current, AIComponent):
                raise TypeError("component is not an AIComponent")
            working = copy.deepcopy(current)
            update(working)
            self._components[ComponentType.AI_COMPONENT][entity_id] = working

    # --- lookups --------------------------------------------------------

    def get(
        self,
        entity_id: EntityID,
        ctype: ComponentType | str,
        default: Any = None,
    ) -> Any:
        """The component, or ``default`` if absent or not of the expected class."""
        with self._lock:
            component = self._components.get(ctype, {}).get(entity_id, _MISSING)
        if component is _MISSING:
            return default
        expected = component_class(ctype)
        if expected is not None and not isinstance(component, expected):
            return default
        return component

    def get_or_zero(self, entity_id: EntityID, ctype: ComponentType | str) -> Any:
        """The component, or an all-zero value of its kind when absent.

        FOV and pathfinding components have no zero value; None is returned.
        """
        component = self.get(entity_id, ctype, _MISSING)
        if component is not _MISSING:
            return component
        try:
            factory = _ZEROS.get(ComponentType(ctype))
        except ValueError:
            return None
        return factory() if factory is not None else None

    def get_option(self, entity_id: EntityID, ctype: ComponentType | str) -> Option:
        component = self.get(entity_id, ctype, _MISSING)
        if component is _MISSING:
            return Option.none()
        return Option.some(component)

    def name(self, entity_id: EntityID) -> str:
        """The entity's name, or an empty string if it has none."""
        component = self.get(entity_id, ComponentType.NAME)
        return component.name if component is not None else ""

    # --- actions --------------------------------------------------------

    def move_entity(self, entity_id: EntityID, point: Point) -> None:
        """Set an entity's position; EntityNotFoundError if it does not exist."""
        if not self.entity_exists(entity_id):
            raise EntityNotFoundError(f"entity {entity_id} not found")
        self.add_component(entity_id, ComponentType.POSITION, point)