"""The tile map of the level: loading, lookup and drawing."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

import pygame

from .camera import TILE_SIZE

log = logging.getLogger(__name__)


def parse_tile_map(text: str) -> TileMap:
    """Parse "width height" followed by width*height tile ids.

    Missing tile values are left as empty (0) tiles.
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("tile map has no width and height")
    try:
        width, height = int(tokens[0]), int(tokens[1])
        values = [int(token) for token in tokens[2:]]
    except ValueError as exc:
        raise ValueError(f"tile map holds a non-integer value: {exc}") from None
    if width < 0 or height < 0:
        raise ValueError("tile map dimensions must not be negative")
    needed = width * height
    if len(values) < needed:
        log.warning("tile map data is incomplete: %d of %d tiles", len(values), needed)
        values.extend([0] * (needed - len(values)))
    tiles = [values[row * width:(row + 1) * width] for row in range(height)]
    return TileMap(width=width, height=height, tiles=tiles)


@dataclass
class TileMap:
    """A grid of tile ids; 0 is empty, anything above is solid."""

    width: int
    height: int
    tiles: list[list[int]]
    tile_size: int = TILE_SIZE
    tileset: pygame.Surface | None = field(default=None, repr=False)

    @classmethod
    def from_file(cls, path: str | Path) -> TileMap:
        return parse_tile_map(Path(path).read_text())

    def tile_id(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.tiles[y][x]
        return 0

    def visible_tiles(
        self, camera_x: float, camera_y: float, view_width: int, view_height: int
    ) -> Iterator[tuple[int, int, int]]:
        """Yield (column, row, tile id) for every non-empty tile in view."""
        size = self.tile_size
        start_x = max(0, int(camera_x / size))
        start_y = max(0, int(camera_y / size))
        end_x = min(self.width, int((camera_x + view_width) / size) + 1)
        end_y = min(self.height, int((camera_y + view_height) / size) + 1)
        for y in range(start_y, end_y):
            for x in range(start_x, end_x):
                tile = self.tiles[y][x]
                if tile:
                    yield x, y, tile

    def load_tileset(self, path: str | Path) -> None:
        self.tileset = pygame.image.load(str(path))

    def render(self, surface: pygame.Surface, camera) -> None:
        """Draw every visible tile onto ``surface``."""
        if self.tileset is None:
            return
        size = self.tile_size
        cam_x, cam_y = camera.position.x, camera.position.y
        view = camera.view_box
        area = pygame.Rect(0, 0, size, size)
        for x, y, _ in self.visible_tiles(cam_x, cam_y, view.w, view.h):
            surface.blit(self.tileset, (x * size - int(cam_x), y * size - int(cam_y)), area)

    def update(self) -> None:
        """Tiles are static, so a frame changes nothing here."""

    def clean(self) -> None:
        self.tileset = None