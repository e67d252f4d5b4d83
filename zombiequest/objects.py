"""Base classes for everything that lives in the level, and the shared world."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Any, Callable

import pygame

from .camera import Camera
from .collision import CollisionHandler
from .controls import Input
from .physics import Point, Transform
from .textures import Flip, TextureManager
from .timer import Timer


@dataclass
class Properties:
    """How a game object starts: texture, position, size and mirroring."""

    texture_id: str
    x: float
    y: float
    width: int
    height: int
    flip: Flip = Flip.NONE


@dataclass
class World:
    """The services and objects that game objects share during play."""

    textures: TextureManager = field(default_factory=TextureManager)
    camera: Camera = field(default_factory=Camera)
    collisions: CollisionHandler = field(default_factory=lambda: CollisionHandler([]))
    input: Input = field(default_factory=Input)
    timer: Timer = field(default_factory=Timer)
    clock: Callable[[], int] = field(default=pygame.time.get_ticks)
    surface: pygame.Surface | None = None
    font: Any = None
    player: Any = None
    boss: Any = None
    enemies: list = field(default_factory=list)
    zombies: list = field(default_factory=list)
    sounds: dict[str, Any] = field(default_factory=dict)

    def play_sound(self, name: str) -> bool:
        """Play the named sound if it is loaded; return whether it played."""
        sound = self.sounds.get(name)
        if sound is None:
            return False
        sound.play()
        return True


class GameObject(abc.ABC):
    """Something with a texture, a position, a size and a centre point."""

    def __init__(self, props: Properties, world: World | None = None) -> None:
        self.world = world if world is not None else World()
        self.texture_id = props.texture_id
        self.width = props.width
        self.height = props.height
        self.flip = props.flip
        self.transform = Transform(props.x, props.y)
        self.origin = Point(props.x + props.width // 2, props.y + props.height // 2)

    @abc.abstractmethod
    def draw(self) -> None:
        """Draw the object for the current frame."""

    @abc.abstractmethod
    def update(self, dt: float) -> None:
        """Advance the object by ``dt`` seconds."""

    @abc.abstractmethod
    def clean(self) -> None:
        """Release what the object holds."""


class Character(GameObject, abc.ABC):
    """A game object that acts: the player and the monsters."""

    def __init__(self, props: Properties, world: World | None = None) -> None:
        super().__init__(props, world)
        self.name = ""