"""Settings for tile-based rendering, stored as JSON in the user's config directory."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

PathLike = Union[str, Path]


@dataclass
class TileConfig:
    """How tiles are drawn and where the tileset lives."""

    enabled: bool = False
    tile_size: int = 16
    scale_factor: float = 1.0
    tileset_path: str = "assets/tiles/"
    use_smoothing: bool = True
    cache_size: int = 1000


_DEFAULTS = TileConfig()


def tile_config_path() -> Path:
    """Where the tile settings file lives; the working directory if there is
    no home directory."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return Path("tile_config.json")
    return home / ".config" / "roguelike-gruid" / "tile_config.json"


def _field(data: dict, key: str, kind: type, zero: Any) -> Any:
    value = data.get(key)
    if value is None:
        return zero
    if kind is float:
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
        return float(value) if ok else _bad(key)
    if kind is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
        return value if ok else _bad(key)
    return value if isinstance(value, kind) else _bad(key)


def _bad(key: str) -> Any:
    raise ValueError(f"invalid value for {key}")


def _from_json(document: Any) -> TileConfig:
    if not isinstance(document, dict):
        raise ValueError("tile configuration must be an object")
    tiles = document.get("tiles") or {}
    if not isinstance(tiles, dict):
        raise ValueError("tiles section must be an object")
    return TileConfig(
        enabled=_field(tiles, "tiles_enabled", bool, False),
        tile_size=_field(tiles, "tile_size", int, 0),
        scale_factor=_field(tiles, "scale_factor", float, 0.0),
        tileset_path=_field(tiles, "tileset_path", str, ""),
        use_smoothing=_field(tiles, "use_smoothing", bool, False),
        cache_size=_field(tiles, "cache_size", int, 0),
    )


def _to_json(config: TileConfig) -> dict:
    return {
        "tiles": {
            "tiles_enabled": config.enabled,
            "tile_size": config.tile_size,
            "scale_factor": config.scale_factor,
            "tileset_path": config.tileset_path,
            "use_smoothing": config.use_smoothing,
            "cache_size": config.cache_size,
        }
    }


def load_tile_config(path: Optional[PathLike] = None) -> TileConfig:
    """Read the tile settings, falling back to defaults.

    A missing, unreadable or malformed file yields the defaults; missing or
    non-positive sizes and an empty tileset path are replaced by defaults.
    """
    target = Path(path) if path is not None else tile_config_path()
    try:
        config = _from_json(json.loads(target.read_text(encoding="utf-8")))
    except (OSError, ValueError, UnicodeDecodeError):
        return TileConfig()

    if config.tile_size <= 0:
        config.tile_size = _DEFAULTS.tile_size
    if config.scale_factor <= 0:
        config.scale_factor = _DEFAULTS.scale_factor
    if not config.tileset_path:
        config.tileset_path = _DEFAULTS.tileset_path
    if config.cache_size <= 0:
        config.cache_size = _DEFAULTS.cache_size
    return config


def save_tile_config(config: TileConfig, path: Optional[PathLike] = None) -> None:
    """Write the tile settings, creating the directory if needed."""
    target = Path(path) if path is not None else tile_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(_to_json(config), indent=2), encoding="utf-8")


def toggle_tiles(config: TileConfig, path: Optional[PathLike] = None) -> None:
    """Flip tile rendering on or off and save the result."""
    config.enabled = not config.enabled
    save_tile_config(config, path)


def validate_tileset_path(path: Optional[PathLike]) -> bool:
    """True if ``path`` names an existing directory."""
    if not path:
        return False
    try:
        return Path(path).is_dir()
    except OSError:
        return False