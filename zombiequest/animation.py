"""Sprite-sheet animation."""

from __future__ import annotations

from dataclasses import dataclass

from .textures import Flip, TextureManager


@dataclass
class Animation:
    """Cycles through the frames of one sprite-sheet row over time."""

    texture_id: str = ""
    sprite_row: int = 0
    frame_count: int = 1
    speed: int = 100
    current_frame: int = 0

    def set_props(self, texture_id: str, sprite_row: int, frame_count: int, speed: int) -> None:
        """Choose the sheet, row, number of frames and milliseconds per frame."""
        if frame_count <= 0:
            raise ValueError("frame_count must be positive")
        if speed <= 0:
            raise ValueError("speed must be positive")
        self.texture_id = texture_id
        self.sprite_row = sprite_row
        self.frame_count = frame_count
        self.speed = speed

    def update(self, ticks: int) -> None:
        """Pick the frame for the given time in milliseconds."""
        self.current_frame = (int(ticks) // self.speed) % self.frame_count

    def draw(self, textures: TextureManager, x: float, y: float, sprite_width: int,
             sprite_height: int, flip: Flip = Flip.NONE) -> None:
        textures.draw_frame(self.texture_id, x, y, sprite_width, sprite_height,
                            self.sprite_row, self.current_frame, flip)