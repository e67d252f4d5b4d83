"""Glowing projectiles and the circle drawing they use."""

from __future__ import annotations

from typing import Sequence

import pygame

from .physics import SCREEN_HEIGHT, SCREEN_WIDTH, Collider, Vector2D

BULLET_SIZE = 26

Color = tuple[int, int, int, int]


def circle_points(center_x: int, center_y: int, radius: int) -> list[tuple[int, int]]:
    """Return the outline points of a circle, in the order they are plotted."""
    points: list[tuple[int, int]] = []
    x, y, err = radius, 0, 0
    while x >= y:
        points.extend([
            (center_x + x, center_y + y),
            (center_x + y, center_y + x),
            (center_x - y, center_y + x),
            (center_x - x, center_y + y),
            (center_x - x, center_y - y),
            (center_x - y, center_y - x),
            (center_x + y, center_y - x),
            (center_x + x, center_y - y),
        ])
        if err <= 0:
            y += 1
            err += 2 * y + 1
        if err > 0:
            x -= 1
            err -= 2 * x + 1
    return points


def gradient_colors(radius: int, center_color: Sequence[int],
                    edge_color: Sequence[int]) -> list[Color]:
    """Return the colour of each ring from radius 1 out to ``radius``."""
    return [
        tuple(int(c + (e - c) * (r / radius)) for c, e in zip(center_color, edge_color))
        for r in range(1, radius + 1)
    ]


def draw_circle(surface: pygame.Surface, center_x: int, center_y: int, radius: int,
                color: Sequence[int]) -> None:
    for point in circle_points(center_x, center_y, radius):
        surface.set_at(point, color)


def draw_gradient_circle(surface: pygame.Surface, center_x: int, center_y: int,
                         radius: int, center_color: Sequence[int],
                         edge_color: Sequence[int]) -> None:
    """Draw concentric rings blending from the centre colour to the edge colour."""
    for ring, color in enumerate(gradient_colors(radius, center_color, edge_color), start=1):
        draw_circle(surface, center_x, center_y, ring, color)


class Bullet:
    """A projectile moving in a straight line."""

    def __init__(self, x: float, y: float, velocity: Vector2D,
                 texture_id: str = "bullet") -> None:
        self.position = Vector2D(x, y)
        self.velocity = velocity
        self.collider = Collider()
        self.collider.set(int(x), int(y), BULLET_SIZE, BULLET_SIZE)
        self.active = True
        self.texture_id = texture_id

    def update(self, dt: float) -> None:
        if not self.active:
            return
        self.position = self.position + self.velocity * dt
        self.collider.set(int(self.position.x), int(self.position.y),
                          BULLET_SIZE, BULLET_SIZE)

    def draw(self, surface: pygame.Surface, camera_position: Vector2D) -> None:
        """Draw the glow and the core if the bullet is on screen."""
        if not self.active:
            return
        render_x = self.position.x - camera_position.x
        render_y = self.position.y - camera_position.y
        if -30 <= render_x <= SCREEN_WIDTH and -30 <= render_y <= SCREEN_HEIGHT:
            cx, cy = int(render_x + 10), int(render_y + 10)
            draw_gradient_circle(surface, cx, cy, 15, (255, 100, 0, 80), (255, 50, 0, 0))
            draw_gradient_circle(surface, cx, cy, 10, (255, 255, 100, 255), (255, 100, 0, 255))