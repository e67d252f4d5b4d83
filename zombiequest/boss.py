"""The boss that guards the end of the level."""

from __future__ import annotations

import math

import pygame

from .animation import Animation
from .objects import Character, Properties, World
from .physics import Collider, RigidBody, Vector2D
from .textures import Flip

ATTACK_COOLDOWN = 2.0
DEATH_TIME = 0.5
PATROL_RADIUS = 200.0
SPRITE_OFFSET_Y = 60
DEATH_SOUND = "boss_death"


class Boss(Character):
    """Patrols around its starting point and strikes a player in range."""

    def __init__(self, props: Properties, world: World | None = None) -> None:
        super().__init__(props, world)
        self.rigid_body = RigidBody(gravity=100.0)
        self.collider = Collider()
        self.animation = Animation()

        self.walking_speed = 60.0
        self.detection_range = 200.0
        self.attack_range = 100.0
        self.attack_cooldown = ATTACK_COOLDOWN
        self.is_dead = False
        self.death_time = 0.0
        self.moving_right = True
        self.is_attacking = False
        self.is_grounded = False
        self.origin_point = Vector2D(props.x, props.y)

        self.transform.x = props.x
        self.transform.y = props.y
        self.last_safe_position = Vector2D(self.transform.x, self.transform.y)

        self.health = 20
        self.max_health = 20

        self.collider.set(self.transform.x, self.transform.y, self.width, self.height)

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
        """Fall under gravity, patrol on the ground and attack a close player."""
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
            self._patrol(dt)
            if player is not None:
                distance = self._distance_to(player)
                if distance < self.attack_range:
                    self.is_attacking = True
                    self.flip = (Flip.HORIZONTAL if player.origin.x < self.origin.x
                                 else Flip.NONE)
                    if self.attack_cooldown <= 0:
                        self._attack(player)
                        self.attack_cooldown = ATTACK_COOLDOWN

        if self.attack_cooldown > 0:
            self.attack_cooldown -= dt

        self.origin.x = self.transform.x + self.width // 2
        self.origin.y = self.transform.y + self.height // 2

        self._animation_state()
        self.animation.update(self.world.clock())

    def _fall(self, velocity: Vector2D, dt: float) -> None:
        half_height = self.height * 0.5
        new_y = self.transform.y + velocity.y * dt
        self.collider.set(self.transform.x, new_y, self.width, half_height)
        if self.world.collisions.map_collision(self.collider.box):
            if velocity.y > 0:
                self.transform.y = self.last_safe_position.y
                self.rigid_body.velocity.y = 0.0
                self.is_grounded = True
                self.collider.set(self.transform.x, self.transform.y, self.width, half_height)
        else:
            self.transform.y = new_y
            self.last_safe_position.y = self.transform.y
            self.is_grounded = False

    def _patrol(self, dt: float) -> None:
        speed = self.walking_speed * dt
        new_x = self.transform.x + (speed if self.moving_right else -speed)
        left = self.origin_point.x - PATROL_RADIUS
        right = self.origin_point.x + PATROL_RADIUS
        if new_x < left:
            new_x = left
            self.moving_right = True
        elif new_x > right:
            new_x = right
            self.moving_right = False

        self.collider.set(new_x, self.transform.y, self.width, self.height * 0.5)
        if self.world.collisions.map_collision(self.collider.box):
            self.transform.x = self.last_safe_position.x
            self.moving_right = not self.moving_right
        else:
            self.transform.x = new_x
            self.last_safe_position.x = self.transform.x
        self.flip = Flip.NONE if self.moving_right else Flip.HORIZONTAL

    def _distance_to(self, player) -> float:
        return math.hypot(player.origin.x - self.origin.x, player.origin.y - self.origin.y)

    def _attack(self, player) -> None:
        if self._distance_to(player) < self.attack_range:
            player.take_damage(2)

    def draw(self) -> None:
        """Draw the sprite and its health bar while alive or dying."""
        if self.is_dead and self.death_time <= 0:
            return
        self.animation.draw(self.world.textures, self.transform.x,
                            self.transform.y - SPRITE_OFFSET_Y,
                            self.width, self.height, self.flip)
        surface = self.world.surface
        if surface is not None:
            self._draw_health_bar(surface, self.world.camera.position)

    def _draw_health_bar(self, surface: pygame.Surface, camera_position: Vector2D) -> None:
        bar_width, bar_height, padding = 180, 17, -110
        screen_x = int(self.transform.x - camera_position.x)
        screen_y = int(self.transform.y - camera_position.y - SPRITE_OFFSET_Y)
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
            self.animation.set_props("boss_death", 0, 5, 120)
        elif self.is_attacking:
            self.animation.set_props("boss_attack", 0, 8, 100)
        else:
            self.animation.set_props("boss_run", 0, 8, 100)

    def clean(self) -> None:
        """The boss holds nothing that needs releasing."""