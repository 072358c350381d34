# gridrogue

The building blocks of a turn-based, grid-based roguelike, kept free of any
rendering or terminal code. Nothing outside the standard library is needed.

## Modules

- **components** – `Point` (with `+` and integer `*`), `Name`, `Renderable`,
  `Health` and the marker tags `PlayerTag`, `AITag`, `CorpseTag` and
  `BlocksMovement`, plus the `ComponentType` enumeration that names every kind
  of component.
- **world** – `World`, a thread-safe entity store: create and remove entities
  (`add_entity`, `add_entity_with_id`, `remove_entity`), attach, replace,
  update and remove components, and read them back with `get` (with a
  default), `get_or_zero` (an all-zero value of the component's kind) or
  `get_option`. `move_entity` raises `EntityNotFoundError` for an unknown
  entity; `update_component` and `update_ai_component` raise
  `EntityNotFoundError` or `ComponentMissingError`. `component_class` and
  `component_type_of` map between component types and classes.
- **queries** – `entities_at`, `entities_at_with`, `entities_with`, and the
  paired views `positioned_renderables` and `positioned_fovs`.
- **ai** – `AIBehavior`, `AIState`, `AIComponent` with flee, search and patrol
  bookkeeping, and `manhattan_distance`.
- **inventory** – `ItemType`, `Item`, `ItemStack`, `Inventory` with stacking
  and a stack capacity, `Equipment` slots and `ItemPickup` for items lying on
  the floor.
- **character** – `Stats`, `Experience` with levelling (`xp_for_level`),
  `Skills`, `Combat`, `Mana`, `Stamina`, and timed `StatusEffect`s collected
  in `StatusEffects`.
- **fov** – `FOV`, a per-entity visibility bitset over the map.
- **pathfinding_component** – `PathfindingComponent`, which stores a path and
  decides when it must be recomputed.
- **turn** – `TurnActor`, an actor with speed and a FIFO of pending actions.
- **option** – `Option`, a small type for values that may be absent.
- **text** – `is_common_text_char`, a test for characters usual in UI text.
- **tiles** – `TileConfig` and its JSON file: `tile_config_path`,
  `load_tile_config`, `save_tile_config`, `toggle_tiles` and
  `validate_tileset_path`.

## A short tour

```python
from gridrogue.components import ComponentType, Health, Name, Point
from gridrogue.world import World
from gridrogue.queries import entities_at
from gridrogue.ai import manhattan_distance
from gridrogue.option import Option
from gridrogue.character import xp_for_level
from gridrogue.text import is_common_text_char

start = Point(2, 3)
print(start + Point(1, 0) * 5)                  # Point(x=7, y=3)
print(manhattan_distance(start, Point(5, 7)))   # 7

world = World()
orc = world.add_entity()
world.add_components(orc, Point(1, 1), Name("Orc"), Health.full(5))
print(entities_at(world, Point(1, 1)) == [orc]) # True
print(world.name(orc))                          # Orc
print(world.get_or_zero(orc, ComponentType.MANA))   # Mana(current_mp=0, max_mp=0, regen_rate=0)
print(world.get_option(orc, ComponentType.MANA).is_none())  # True

print(Option.some(4).map(lambda n: n * 10).unwrap_or(0))    # 40
print(xp_for_level(3))                          # 450
print(is_common_text_char("?"))                 # True
```

## Tile settings

`tile_config_path()` gives the default location of the tile settings file
(`~/.config/roguelike-gruid/tile_config.json`, or `tile_config.json` in the
working directory when there is no home directory). `load_tile_config` reads
it and falls back to the defaults when the file is missing, unreadable or
malformed, replacing non-positive sizes and an empty tileset path with
defaults. `save_tile_config` writes it as indented JSON, creating the
directory, and `toggle_tiles` flips `enabled` and saves. Each takes an
optional path to use instead.

## What this package does not do

It is a library of game-state pieces only. There is no game loop, map
generation, combat or turn scheduling, no screen or input handling, no
command to start a game, no save games, and no general game configuration
file beyond the tile settings above.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.