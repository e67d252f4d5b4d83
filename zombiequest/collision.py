"""Rectangle and tile-map collision tests."""

from __future__ import annotations

from typing import Sequence

from .camera import TILE_SIZE
from .physics import Rect


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def check_collision(a: Rect, b: Rect) -> bool:
    """Return True if the two rectangles overlap."""
    return a.x < b.x + b.w and a.x + a.w > b.x and a.y < b.y + b.h and a.y + a.h > b.y


class CollisionHandler:
    """Tests rectangles against the solid tiles of a map."""

    def __init__(self, tiles: Sequence[Sequence[int]], tile_size: int = TILE_SIZE) -> None:
        self.tiles = [list(row) for row in tiles]
        self.tile_size = tile_size

    def map_collision(self, rect: Rect) -> bool:
        """Return True if ``rect`` touches any solid tile."""
        size = self.tile_size
        rows = len(self.tiles)
        cols = len(self.tiles[0]) if rows else 0

        left = max(_trunc_div(rect.x, size), 0)
        right = min(_trunc_div(rect.x + rect.w - 1, size), cols - 1)
        top = max(_trunc_div(rect.y, size), 0)
        bottom = min(_trunc_div(rect.y + rect.h - 1, size), rows - 1)

        return any(
            self.tiles[row][col] > 0
            for col in range(left, right + 1)
            for row in range(top, bottom + 1)
        )