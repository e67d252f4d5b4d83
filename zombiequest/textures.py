"""Loaded images and the ways they are drawn to the screen."""

from __future__ import annotations

import enum
import logging
from pathlib import Path

import pygame

log = logging.getLogger(__name__)


class Flip(enum.IntFlag):
    """Mirroring applied when drawing."""

    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2


class TextureManager:
    """Holds textures by id and draws them relative to the camera."""

    def __init__(self, target: pygame.Surface | None = None, camera=None) -> None:
        self.target = target
        self.camera = camera
        self._textures: dict[str, pygame.Surface] = {}

    def __contains__(self, texture_id: str) -> bool:
        return texture_id in self._textures

    def load(self, texture_id: str, filename: str | Path) -> pygame.Surface:
        """Load an image file and store it under ``texture_id``."""
        try:
            texture = pygame.image.load(str(filename))
        except pygame.error as exc:
            raise OSError(f"failed to load texture {filename}: {exc}") from exc
        self._textures[texture_id] = texture
        return texture

    def add(self, texture_id: str, texture: pygame.Surface) -> None:
        self._textures[texture_id] = texture

    def get(self, texture_id: str) -> pygame.Surface | None:
        texture = self._textures.get(texture_id)
        if texture is None:
            log.warning("texture id %s not found", texture_id)
        return texture

    def drop(self, texture_id: str) -> None:
        self._textures.pop(texture_id, None)

    def clean(self) -> None:
        self._textures.clear()

    def draw(self, texture_id: str, x: int, y: int, width: int, height: int,
             flip: Flip = Flip.NONE) -> None:
        """Draw the top-left part of a texture with half-speed camera scroll."""
        cam_x, cam_y = self._camera_offset(0.5)
        texture = self._textures.get(texture_id)
        if texture is None:
            log.warning("texture id %s not found", texture_id)
            return
        self._blit(texture, pygame.Rect(0, 0, width, height),
                   (int(int(x) - cam_x), int(int(y) - cam_y)), flip)

    def draw_frame(self, texture_id: str, x: int, y: int, width: int, height: int,
                   row: int, frame: int, flip: Flip = Flip.NONE) -> None:
        """Draw one frame of a sprite sheet."""
        texture = self._textures.get(texture_id)
        if texture is None:
            return
        cam_x, cam_y = self._camera_offset(1.0)
        src = pygame.Rect(width * frame, height * row, width, height)
        self._blit(texture, src, (int(int(x) - cam_x), int(int(y) - cam_y)), flip)

    def draw_tile(self, tileset_id: str, tile_size: int, x: int, y: int,
                  row: int, frame: int, flip: Flip = Flip.NONE) -> None:
        """Draw one tile of a tileset."""
        texture = self._textures.get(tileset_id)
        if texture is None:
            return
        cam_x, cam_y = self._camera_offset(1.0)
        src = pygame.Rect(tile_size * frame, tile_size * row, tile_size, tile_size)
        self._blit(texture, src, (int(int(x) - cam_x), int(int(y) - cam_y)), flip)

    def _camera_offset(self, scale: float) -> tuple[float, float]:
        if self.camera is None:
            return 0.0, 0.0
        position = self.camera.position
        return position.x * scale, position.y * scale

    def _blit(self, texture: pygame.Surface, src: pygame.Rect,
              dest: tuple[int, int], flip: Flip) -> None:
        if self.target is None:
            raise RuntimeError("no render target set")
        area = src.clip(texture.get_rect())
        if area.width <= 0 or area.height <= 0:
            return
        image = texture.subsurface(area)
        if flip:
            image = pygame.transform.flip(
                image, bool(flip & Flip.HORIZONTAL), bool(flip & Flip.VERTICAL)
            )
        self.target.blit(image, dest)