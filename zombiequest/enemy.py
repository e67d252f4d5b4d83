"""The flying enemy that patrols and shoots at the player."""

from __future__ import annotations

import math

import pygame

from .animation import Animation
from .bullet import Bullet
from .collision import check_collision
from .objects import Character, Properties, World
from .physics import DEAD_TIME, Collider, Vector2D
from .textures import Flip

COLLIDER_WIDTH = 35
COLLIDER_HEIGHT = 45
BULLET_SPEED = 150.0
SHOOT_COOLDOWN = 1.0


class Enemy(Character):
    """Flies back and forth and fires at the player when in range."""

    def __init__(self, props: Properties, world: World | None = None) -> None:
        super().__init__(props, world)
        self.collider = Collider()
        self.animation = Animation()
        self.animation.set_props(self.texture_id, 1, 4, 100)
        self.bullets: list[Bullet] = []
        self.shoot_cooldown = 0.0
        self.is_dead = False
        self.death_time = 0.0
        self.health = 3
        self.max_health = 3
        self.detection_range = 300.0
        self.flying_speed = 120.0
        self.flying_range = 400.0
        self.origin_point = Vector2D(props.x, props.y)
        self.moving_right = True
        self.is_attacking = False
        self.transform.x = props.x
        self.transform.y = props.y
        self.collider.set(self.transform.x, self.transform.y, COLLIDER_WIDTH, COLLIDER_HEIGHT)

    def draw(self) -> None:
        """Draw the sprite, its health bar and its bullets."""
        surface = self.world.surface
        camera_position = self.world.camera.position
        if not self.is_dead or self.death_time > 0:
            self.animation.draw(self.world.textures, self.transform.x, self.transform.y,
                                self.width, self.height, self.flip)
            if surface is not None:
                self._draw_health_bar(surface, camera_position)
        if surface is None:
            return
        for bullet in self.bullets:
            if bullet.active:
                bullet.draw(surface, camera_position)

    def _draw_health_bar(self, surface: pygame.Surface, camera_position: Vector2D) -> None:
        bar_width, bar_height, padding = 70, 10, 10
        screen_x = int(self.transform.x - camera_position.x)
        screen_y = int(self.transform.y - camera_position.y)
        bar_x = screen_x + int((self.width - bar_width) / 2)
        bar_y = screen_y - bar_height - padding
        ratio = max(0.0, min(1.0, self.health / self.max_health))
        pygame.draw.rect(surface, (100, 100, 100, 255),
                         pygame.Rect(bar_x, bar_y, bar_width, bar_height))
        filled = int(bar_width * ratio)
        if filled > 0:
            pygame.draw.rect(surface, (255, 0, 0, 255),
                             pygame.Rect(bar_x, bar_y, filled, bar_height))

    def _update_bullets(self, dt: float) -> None:
        player = self.world.player
        kept = []
        for bullet in self.bullets:
            if not bullet.active:
                continue
            bullet.update(dt)
            if player is not None and check_collision(bullet.collider.box, player.collider.box):
                bullet.active = False
                player.take_damage(1)
            kept.append(bullet)
        self.bullets = kept

    def update(self, dt: float) -> None:
        """Patrol, or face and shoot at a player within range."""
        if self.is_dead:
            self.death_time -= dt
            if self.death_time <= 0:
                return
            self._animation_state()
            self.animation.update(self.world.clock())
            return

        self.origin.x = self.transform.x + self.width // 2
        self.origin.y = self.transform.y + self.height // 2

        player = self.world.player
        self.is_attacking = False
        if player is not None:
            distance = math.hypot(player.origin.x - self.origin.x,
                                  player.origin.y - self.origin.y)
            self.is_attacking = distance < self.detection_range

        if not self.is_attacking:
            if abs(self.transform.x - self.origin_point.x) >= self.flying_range:
                self.moving_right = not self.moving_right
            speed = self.flying_speed * dt
            self.transform.x += speed if self.moving_right else -speed
            self.flip = Flip.HORIZONTAL if self.moving_right else Flip.NONE
        elif player is not None:
            self.flip = Flip.NONE if player.origin.x < self.origin.x else Flip.HORIZONTAL
            if self.shoot_cooldown <= 0:
                self.shoot()
                self.shoot_cooldown = SHOOT_COOLDOWN

        self.collider.set(self.transform.x, self.transform.y, COLLIDER_WIDTH, COLLIDER_HEIGHT)
        self._update_bullets(dt)
        if self.shoot_cooldown > 0:
            self.shoot_cooldown -= dt

        self._animation_state()
        self.animation.update(self.world.clock())

    def shoot(self) -> None:
        """Fire a bullet at the centre of the player's collision box."""
        player = self.world.player
        if player is None:
            return
        box = player.collider.box
        dx = box.x + box.w / 2.0 - self.origin.x
        dy = box.y + box.h / 2.0 - self.origin.y
        magnitude = math.hypot(dx, dy)
        if magnitude > 0:
            dx /= magnitude
            dy /= magnitude
        velocity = Vector2D(dx, dy) * BULLET_SPEED
        start_x = self.origin.x + (-10.0 if self.flip == Flip.NONE else 10.0)
        self.bullets.append(Bullet(start_x, self.origin.y, velocity, "bullet"))

    def take_damage(self, damage: int) -> None:
        if self.is_dead:
            return
        self.health -= damage
        if self.health <= 0:
            self.is_dead = True
            self.death_time = DEAD_TIME

    def _animation_state(self) -> None:
        if self.is_dead:
            self.animation.set_props("enemy_death", 0, 7, 100)
        elif self.is_attacking:
            self.animation.set_props("enemy_attack", 0, 8, 100)
        else:
            self.animation.set_props("enemy_fly", 0, 4, 100)

    def clean(self) -> None:
        self.world.textures.drop(self.texture_id)
        self.bullets.clear()