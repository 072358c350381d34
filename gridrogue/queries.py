"""Queries over a World: entities by position and by component combination."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from gridrogue.components import ComponentType, Point, Renderable
from gridrogue.fov import FOV
from gridrogue.world import EntityID, World

logger = logging.getLogger(__name__)


@dataclass
class PositionedRenderable:
    """An entity together with its position and how it is drawn."""

    entity_id: EntityID
    position: Point
    renderable: Renderable


@dataclass
class PositionedFOV:
    """An entity together with its position and field of view."""

    entity_id: EntityID
    position: Point
    fov: Optional[FOV]


def entities_at(world: World, point: Point) -> list[EntityID]:
    """Entities whose position is ``point``."""
    return [
        entity_id
        for entity_id in world.entities_with_component(ComponentType.POSITION)
        if world.get(entity_id, ComponentType.POSITION) == point
    ]


def entities_at_with(
    world: World, point: Point, ctype: ComponentType | str
) -> list[EntityID]:
    """Entities at ``point`` that also carry a component of type ``ctype``."""
    return [
        entity_id
        for entity_id in entities_at(world, point)
        if world.has_component(entity_id, ctype)
    ]


def entities_with(world: World, *args: ComponentType | str) -> list[EntityID]:
    """Entities carrying every one of the given component types."""
    if not args:
        return []
    first, *rest = args
    return [
        entity_id
        for entity_id in world.entities_with_component(first)
        if all(world.has_component(entity_id, ctype) for ctype in rest)
    ]


def positioned_renderables(world: World) -> list[PositionedRenderable]:
    """Every entity that has both a position and a renderable."""
    result = []
    for entity_id in entities_with(
        world, ComponentType.POSITION, ComponentType.RENDERABLE
    ):
        position = world.get(entity_id, ComponentType.POSITION)
        renderable = world.get(entity_id, ComponentType.RENDERABLE)
        if position is None:
            logger.error("Entity %d has Position component but no position", entity_id)
            position = Point()
        if renderable is None:
            logger.error(
                "Entity %d has Renderable component but no renderable", entity_id
            )
            renderable = Renderable()
        result.append(PositionedRenderable(entity_id, position, renderable))
    return result


def positioned_fovs(world: World) -> list[PositionedFOV]:
    """Every entity that has both a position and a field of view."""
    result = []
    for entity_id in entities_with(world, ComponentType.POSITION, ComponentType.FOV):
        position = world.get(entity_id, ComponentType.POSITION)
        fov = world.get(entity_id, ComponentType.FOV)
        if position is None:
            logger.error("Entity %d has Position component but no position", entity_id)
            position = Point()
        if fov is None:
            logger.error("Entity %d has FOV component but no FOV", entity_id)
        result.append(PositionedFOV(entity_id, position, fov))
    return result