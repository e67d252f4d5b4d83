"""The player's knight: movement, jumping, attacking, health and mana."""

from __future__ import annotations

import dataclasses
import logging
import math
from pathlib import Path
from typing import Any

import pygame

from .animation import Animation
from .collision import check_collision
from .controls import Axis
from .objects import Character, Properties, World
from .physics import BACKWARD, FORWARD, Collider, Point, RigidBody, Vector2D
from .textures import Flip

log = logging.getLogger(__name__)

JUMP_TIME = 15.0
JUMP_FORCE = 10.0
RUN_FORCE = 4.0
ATTRACK_TIME = 10.0

RUN_PUSH = 300.0
STOP_FRICTION = 200.0
JUMP_PUSH = -1500.0
ATTACK_DURATION = 0.5
ATTACK_REACH = 20
COLLIDER_WIDTH = 30
COLLIDER_HEIGHT = 50

BAR_WIDTH = 200
BAR_HEIGHT = 20
BAR_X = 47
HP_Y = 10
MP_Y = HP_Y + BAR_HEIGHT + 5

RUN_SOUND = "sound/knight_run.wav"
ATTACK_SOUND = "sound/knight_chem.wav"
JUMP_SOUND = "sound/knight_jump.wav"


def _load_sound(path: str | Path, volume: int) -> Any:
    """Load a sound effect with a volume on the 0-128 scale, or None if unavailable."""
    if not pygame.mixer.get_init():
        return None
    try:
        sound = pygame.mixer.Sound(str(path))
    except (pygame.error, FileNotFoundError) as exc:
        log.warning("failed to load sound %s: %s", path, exc)
        return None
    sound.set_volume(volume / 128)
    return sound


def _play(sound: Any) -> None:
    if sound is not None:
        sound.play()


class Knight(Character):
    """The character the player controls."""

    def __init__(self, props: Properties, world: World | None = None) -> None:
        super().__init__(props, world)
        self.jump_time = JUMP_TIME
        self.jump_force = JUMP_FORCE
        self.attack_time = 0.0
        self.is_attacking = False
        self.is_jumping = False
        self.is_falling = False
        self.is_grounded = False
        self.is_running = False
        self.is_crouching = False
        self.was_running = False

        self.collider = Collider()
        self.collider.set_buffer(-53, -23, 0, 0)

        self.rigid_body = RigidBody()
        self.rigid_body.gravity = 80.0

        self.animation = Animation()
        self.animation.set_props(self.texture_id, 1, 6, 100)

        self.origin = Point()
        self.last_safe_position = Vector2D()

        self.health = 100
        self.max_health = 100
        self.mana = 5
        self.max_mana = 5
        self.mana_regen_time = 0.0
        self.mana_regen_rate = 3.0

        self.run_sound = _load_sound(RUN_SOUND, 110)
        self.attack_sound = _load_sound(ATTACK_SOUND, 20)
        self.jump_sound = _load_sound(JUMP_SOUND, 100)

    def take_damage(self, damage: int) -> None:
        """Lose health, and one point of mana, never going below zero."""
        self.health = max(self.health - damage, 0)
        self.mana = max(self.mana - 1, 0)

    def draw(self) -> None:
        """Draw the sprite and the health and mana bars of the HUD."""
        self.animation.draw(self.world.textures, self.transform.x, self.transform.y,
                            self.width, self.height, self.flip)
        surface = self.world.surface
        if surface is None:
            return
        font = self.world.font
        hp_ratio = self.health / self.max_health
        mp_ratio = self.mana / self.max_mana

        if font is not None:
            surface.blit(font.render("HP", False, (255, 0, 0)), (11, HP_Y))
        self._draw_bar(surface, HP_Y, hp_ratio, (255, 0, 0))

        if font is not None:
            surface.blit(font.render("MP", False, (0, 0, 255)), (10, MP_Y))
        self._draw_bar(surface, MP_Y, mp_ratio, (0, 0, 255))

    @staticmethod
    def _draw_bar(surface: pygame.Surface, y: int, ratio: float,
                  color: tuple[int, int, int]) -> None:
        pygame.draw.rect(surface, (100, 100, 100), pygame.Rect(BAR_X, y, BAR_WIDTH, BAR_HEIGHT))
        filled = int(BAR_WIDTH * ratio)
        if filled > 0:
            pygame.draw.rect(surface, color, pygame.Rect(BAR_X, y, filled, BAR_HEIGHT))

    def update(self, dt: float) -> None:
        """Advance one frame; the frame time is read from the world's timer."""
        world = self.world
        controls = world.input
        body = self.rigid_body
        dt = world.timer.delta_time

        self.is_running = False
        self.is_crouching = False
        body.unset_force()
        body.unset_friction()

        if not self.is_attacking:
            self._move_horizontally(controls.axis_key(Axis.HORIZONTAL))

        if self.is_running and not self.was_running:
            _play(self.run_sound)
        self.was_running = self.is_running

        if controls.key_down(pygame.K_s) and self.is_grounded:
            self.is_crouching = True

        if controls.key_down(pygame.K_j) and not self.is_attacking:
            self._attack()

        if self.is_attacking:
            self.attack_time -= dt
            if self.attack_time <= 0:
                self.is_attacking = False

        if (controls.axis_key(Axis.VERTICAL) == 1 and self.is_grounded
                and not self.is_attacking):
            self.is_jumping = True
            self.is_grounded = False
            body.apply_force_y(JUMP_PUSH)
            _play(self.jump_sound)

        body.update(dt)
        self._move_and_collide(dt)

        self.mana_regen_time += dt
        if self.mana_regen_time >= self.mana_regen_rate:
            self.mana_regen_time = 0.0
            if self.mana < self.max_mana:
                self.mana += 1

        self.origin.x = self.transform.x + self.width // 2
        self.origin.y = self.transform.y + self.height // 2

        self._animation_state()
        self.animation.update(world.clock())

    def _move_horizontally(self, direction: int) -> None:
        body = self.rigid_body
        if direction == FORWARD:
            body.apply_force_x(RUN_PUSH)
            self.flip = Flip.NONE
            self.is_running = True
        elif direction == BACKWARD:
            body.apply_force_x(-RUN_PUSH)
            self.flip = Flip.HORIZONTAL
            self.is_running = True
        elif body.velocity.x != 0:
            push = -STOP_FRICTION if body.velocity.x > 0 else STOP_FRICTION
            body.apply_friction(Vector2D(push, 0))
            if -5.0 < body.velocity.x < 5.0:
                body.velocity.x = 0.0

    def _attack(self) -> None:
        world = self.world
        self.is_attacking = True
        self.attack_time = ATTACK_DURATION
        _play(self.attack_sound)

        box = self.collider.box
        box = dataclasses.replace(
            box,
            w=box.w + ATTACK_REACH,
            x=box.x - ATTACK_REACH if self.flip == Flip.HORIZONTAL else box.x,
        )
        for enemy in list(world.enemies):
            if enemy is not None and check_collision(box, enemy.collider.box):
                enemy.take_damage(2)
        for zombie in list(world.zombies):
            if zombie is not None and check_collision(box, zombie.collider.box):
                zombie.take_damage(1)
        boss = world.boss
        if boss is not None and check_collision(box, boss.collider.box):
            boss.take_damage(2)

    def _move_and_collide(self, dt: float) -> None:
        body = self.rigid_body
        collisions = self.world.collisions

        self.last_safe_position.x = self.transform.x
        self.transform.x += body.velocity.x * dt
        self.collider.set(self.transform.x, self.transform.y, COLLIDER_WIDTH, COLLIDER_HEIGHT)
        if collisions.map_collision(self.collider.box):
            self.transform.x = self.last_safe_position.x
            body.velocity.x = 0.0

        self.last_safe_position.y = self.transform.y
        self.transform.y += body.velocity.y * dt
        self.collider.set(self.transform.x, self.transform.y, COLLIDER_WIDTH, COLLIDER_HEIGHT)
        if collisions.map_collision(self.collider.box):
            self.transform.y = self.last_safe_position.y
            if body.velocity.y > 0:
                body.velocity.y = 0.0
                self.is_grounded = True
                self.is_jumping = False
            elif body.velocity.y < 0:
                body.velocity.y = 0.0
        else:
            self.is_grounded = False

    def _animation_state(self) -> None:
        animation = self.animation
        velocity_y = self.rigid_body.velocity.y
        animation.set_props("player_idle", 0, 6, 100)
        if self.is_running:
            animation.set_props("player_run", 0, 8, 100)
        if self.is_crouching:
            animation.set_props("player_crouch", 0, 6, 200)
        if self.is_jumping and velocity_y < 0:
            animation.set_props("player_jump", 0, 2, 200)
        if not self.is_grounded and velocity_y > 0:
            animation.set_props("player_fall", 0, 2, 350)
        if self.is_attacking:
            animation.set_props("player_attrack", 0, 14, 80)

    def clean(self) -> None:
        """Drop the knight's texture and release its sounds."""
        self.world.textures.drop(self.texture_id)
        self.run_sound = None
        self.attack_sound = None
        self.jump_sound = None

    @property
    def distance_fallen(self) -> float:
        """Vertical distance between the current and last safe positions."""
        return math.fabs(self.transform.y - self.last_safe_position.y)