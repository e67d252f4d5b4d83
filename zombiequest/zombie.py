"""The walking zombie that patrols, chases and strikes the player."""

from __future__ import annotations

import math

import pygame

from .animation import Animation
from .objects import Character, Properties, World
from .physics import Collider, RigidBody, Vector2D
from .textures import Flip

ATTACK_COOLDOWN = 1.5
DEATH_TIME = 0.7
STRIKE_REACH = 40.0
DEATH_SOUND = "zombie_death"


class Zombie(Character):
    """Walks the ground, chases a nearby player and attacks at close range."""

    def __init__(self, props: Properties, world: World | None = None) -> None:
        super().__init__(props, world)
        self.rigid_body = RigidBody(gravity=100.0)
        self.collider = Collider()
        self.collider.set_buffer(0, 18, 0, 0)
        self.animation = Animation()

        self.walking_speed = 80.0
        self.detection_range = 150.0
        self.attack_range = 50.0
        self.attack_cooldown = ATTACK_COOLDOWN
        self.health = 3
        self.max_health = 3
        self.is_dead = False
        self.death_time = 0.0
        self.moving_right = True
        self.is_attacking = False
        self.is_grounded = False
        self.origin_point = Vector2D(self.transform.x, self.transform.y)

        self.transform.x = props.x
        self.transform.y = props.y
        self.last_safe_position = Vector2D(self.transform.x, self.transform.y)

    def take_damage(self, damage: int) -> None:
        """Lose health; at zero, stop, start dying and play the death sound."""
        if self.is_dead:
            return
        self.health -= damage
        if self.health <= 0:
            self.is_dead = True
            self.death_time = DEATH_TIME
            self.rigid_body.velocity.x = 0.0
            self.rigid_body.velocity.y = 0.0
            self._animation_state()
            self.world.play_sound(DEATH_SOUND)

    def update(self, dt: float) -> None:
        """Fall under gravity, then patrol, chase or attack once on the ground."""
        if self.is_dead:
            self.death_time -= dt
            if self.death_time > 0:
                self._animation_state()
                self.animation.update(self.world.clock())
            return

        player = self.world.player
        self.is_attacking = False

        self.rigid_body.update(dt)
        velocity = Vector2D(self.rigid_body.velocity.x, self.rigid_body.velocity.y)
        self._fall(velocity, dt)

        if self.is_grounded:
            if player is not None:
                self._act(player, dt)
            if self.attack_cooldown > 0:
                self.attack_cooldown -= dt

        self.origin.x = self.transform.x + self.width // 2
        self.origin.y = self.transform.y + self.height // 2

        self._animation_state()
        self.animation.update(self.world.clock())

    def _fall(self, velocity: Vector2D, dt: float) -> None:
        new_y = self.transform.y + velocity.y * dt
        self.collider.set(self.transform.x, new_y, self.width, self.height)
        if self.world.collisions.map_collision(self.collider.box):
            if velocity.y > 0:
                self.transform.y = self.last_safe_position.y
                self.rigid_body.velocity.y = 0.0
                self.is_grounded = True
        else:
            self.transform.y = new_y
            self.last_safe_position.y = self.transform.y
            self.is_grounded = False

    def _act(self, player, dt: float) -> None:
        distance = math.hypot(player.origin.x - self.origin.x, player.origin.y - self.origin.y)
        if distance < self.detection_range:
            if distance < self.attack_range:
                self.is_attacking = True
                self.rigid_body.velocity.x = 0.0
                self.flip = Flip.HORIZONTAL if player.origin.x < self.origin.x else Flip.NONE
                if self.attack_cooldown <= 0:
                    self._attack(player)
                    self.attack_cooldown = ATTACK_COOLDOWN
            else:
                self.moving_right = player.origin.x > self.origin.x
                self._walk(dt)
        else:
            self._walk(dt)

    def _walk(self, dt: float) -> None:
        speed = self.walking_speed * dt
        new_x = self.transform.x + (speed if self.moving_right else -speed)
        self.collider.set(new_x, self.transform.y, self.width, self.height)
        if self.world.collisions.map_collision(self.collider.box):
            self.transform.x = self.last_safe_position.x
            self.moving_right = not self.moving_right
        else:
            self.transform.x = new_x
            self.last_safe_position.x = self.transform.x
        self.flip = Flip.NONE if self.moving_right else Flip.HORIZONTAL

    def _attack(self, player) -> None:
        distance = math.hypot(player.origin.x - self.origin.x, player.origin.y - self.origin.y)
        if distance < STRIKE_REACH:
            player.take_damage(1)

    def draw(self) -> None:
        """Draw the sprite and its health bar while alive or dying."""
        if self.is_dead and self.death_time <= 0:
            return
        self.animation.draw(self.world.textures, self.transform.x, self.transform.y,
                            self.width, self.height, self.flip)
        surface = self.world.surface
        if surface is not None:
            self._draw_health_bar(surface, self.world.camera.position)

    def _draw_health_bar(self, surface: pygame.Surface, camera_position: Vector2D) -> None:
        bar_width, bar_height, padding = 70, 8, -70
        screen_x = int(self.transform.x - camera_position.x)
        screen_y = int(self.transform.y - camera_position.y - 60)
        bar_x = screen_x + int((self.width - bar_width) / 2)
        bar_y = screen_y - bar_height - padding
        ratio = max(0.0, min(1.0, self.health / self.max_health))
        pygame.draw.rect(surface, (100, 100, 100, 255),
                         pygame.Rect(bar_x, bar_y, bar_width, bar_height))
        filled = int(bar_width * ratio)
        if filled > 0:
            pygame.draw.rect(surface, (255, 0, 0, 255),
                             pygame.Rect(bar_x, bar_y, filled, bar_height))

    def _animation_state(self) -> None:
        if self.is_dead:
            self.animation.set_props("zombie_die", 0, 15, 120)
        elif self.is_attacking:
            self.animation.set_props("zombie_chem", 0, 12, 100)
        else:
            self.animation.set_props("zombie_dibo", 0, 12, 100)

    def clean(self) -> None:
        """A zombie holds nothing that needs releasing."""