"""The camera that follows a target across the level."""

from __future__ import annotations

from .physics import SCREEN_HEIGHT, SCREEN_WIDTH, Point, Rect, Vector2D

TILE_SIZE = 32
MAP_ROWS = 20
MAP_COLS = 100
MAP_WIDTH = MAP_COLS * TILE_SIZE
MAP_HEIGHT = MAP_ROWS * TILE_SIZE


class Camera:
    """Keeps a view box centred on its target, clamped to the map."""

    def __init__(
        self,
        view_width: int = SCREEN_WIDTH,
        view_height: int = SCREEN_HEIGHT,
        map_width: int = MAP_WIDTH,
        map_height: int = MAP_HEIGHT,
    ) -> None:
        self.view_box = Rect(0, 0, view_width, view_height)
        self.map_width = map_width
        self.map_height = map_height
        self.position = Vector2D()
        self.target: Point | None = None

    def update(self, dt: float) -> None:
        """Move the view box to centre the target."""
        if self.target is None:
            return
        box = self.view_box
        x = int(self.target.x - box.w // 2)
        y = int(self.target.y - box.h // 2)
        x = max(x, 0)
        y = max(y, 0)
        if x > self.map_width - box.w:
            x = self.map_width - box.w
        if y > self.map_height - box.h:
            y = self.map_height - box.h
        self.view_box = Rect(x, y, box.w, box.h)
        self.position = Vector2D(x, y)