"""Field-of-view component holding a visibility bitset over the map."""

from __future__ import annotations

from gridrogue.components import Point

_WORD_BITS = 64


class FOV:
    """An entity's sight range and the set of map cells it currently sees."""

    def __init__(self, fov_range: int, map_width: int, map_height: int) -> None:
        self.fov_range = fov_range
        self.map_width = map_width
        self.map_height = map_height
        self.visible: list[int] = [0] * (
            (map_width * map_height + _WORD_BITS - 1) // _WORD_BITS
        )

    def __repr__(self) -> str:
        return (
            f"FOV(fov_range={self.fov_range}, map_width={self.map_width}, "
            f"map_height={self.map_height})"
        )

    def _locate(self, p: Point, map_width: int) -> tuple[int, int] | None:
        if p.x < 0 or p.y < 0 or p.x >= map_width:
            return None
        index = p.y * map_width + p.x
        word, bit = divmod(index, _WORD_BITS)
        if word >= len(self.visible):
            return None
        return word, bit

    def is_visible(self, p: Point, map_width: int) -> bool:
        """True if ``p`` is marked visible."""
        loc = self._locate(p, map_width)
        if loc is None:
            return False
        word, bit = loc
        return bool(self.visible[word] >> bit & 1)

    def clear_visible(self) -> None:
        """Mark every cell as not visible."""
        self.visible = [0] * len(self.visible)

    def set_visible(self, p: Point, map_width: int) -> None:
        """Mark ``p`` visible; points outside the map are ignored."""
        loc = self._locate(p, map_width)
        if loc is not None:
            word, bit = loc
            self.visible[word] |= 1 << bit

    def visible_points(self, map_width: int) -> list[Point]:
        """All visible points in row-major order."""
        height = len(self.visible) * _WORD_BITS // map_width
        return [
            Point(x, y)
            for y in range(height)
            for x in range(map_width)
            if self.is_visible(Point(x, y), map_width)
        ]