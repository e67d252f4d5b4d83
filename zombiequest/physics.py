"""Vectors, points, rectangles and the simple rigid-body physics of the game."""

from __future__ import annotations

from dataclasses import dataclass, field

UNI_MASS = 1.0
GRAVITY = 9.8
FORWARD = 1
BACKWARD = -1
UPWARD = -1
DOWNWARD = 1
ATTACK_TIME = 0.5
HIT_TIME = 0.3
DEAD_TIME = 1.0
ATTACK_RANGE = 50.0
MAX_VELOCITY_X = 150.0
SCREEN_WIDTH = 1200
SCREEN_HEIGHT = 640

MAX_VEL_X = 200.0
MAX_VEL_Y = 1000.0


@dataclass
class Vector2D:
    """A two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x * scalar, self.y * scalar)

    def __iadd__(self, other: Vector2D) -> Vector2D:
        self.x += other.x
        self.y += other.y
        return self


@dataclass
class Point:
    """A position in world space, shared by reference between objects."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def __iadd__(self, other: Point) -> Point:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Point) -> Point:
        self.x -= other.x
        self.y -= other.y
        return self


@dataclass
class Transform:
    """The top-left position of a game object."""

    x: float
    y: float

    def translate_x(self, x: float) -> None:
        self.x += x

    def translate_y(self, y: float) -> None:
        self.y += y

    def translate(self, v: Vector2D) -> None:
        self.x += v.x
        self.y += v.y


@dataclass(frozen=True)
class Rect:
    """An integer rectangle: position and size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.w, self.h)


@dataclass
class RigidBody:
    """Forces, velocity and position integrated once per frame."""

    mass: float = UNI_MASS
    gravity: float = GRAVITY
    friction_coefficient: float = 1.0
    force: Vector2D = field(default_factory=Vector2D)
    friction: Vector2D = field(default_factory=Vector2D)
    position: Vector2D = field(default_factory=Vector2D)
    velocity: Vector2D = field(default_factory=Vector2D)
    acceleration: Vector2D = field(default_factory=Vector2D)

    def apply_force(self, force: Vector2D) -> None:
        self.force = Vector2D(force.x, force.y)

    def apply_force_x(self, fx: float) -> None:
        self.force.x = fx

    def apply_force_y(self, fy: float) -> None:
        self.force.y = fy

    def unset_force(self) -> None:
        self.force = Vector2D()

    def apply_friction(self, friction: Vector2D) -> None:
        self.friction = Vector2D(friction.x, friction.y)

    def unset_friction(self) -> None:
        self.friction = Vector2D()

    def update(self, dt: float) -> None:
        """Advance velocity and position by ``dt`` seconds."""
        self.acceleration = Vector2D(
            (self.force.x - self.friction_coefficient * self.velocity.x) / self.mass,
            self.gravity + self.force.y / self.mass,
        )
        velocity = self.velocity + self.acceleration * (dt * 60.0)
        velocity.x = max(-MAX_VEL_X, min(MAX_VEL_X, velocity.x))
        velocity.y = max(-MAX_VEL_Y, min(MAX_VEL_Y, velocity.y))
        self.velocity = velocity
        self.position = self.position + self.velocity * dt


@dataclass
class Collider:
    """A collision box shrunk or grown by a buffer."""

    box: Rect = field(default_factory=Rect)
    buffer: Rect = field(default_factory=Rect)

    def set_buffer(self, x: int, y: int, w: int, h: int) -> None:
        self.buffer = Rect(int(x), int(y), int(w), int(h))

    def set(self, x: float, y: float, w: float, h: float) -> None:
        """Place the box at the given position, corrected by the buffer."""
        self.box = Rect(
            int(x) - self.buffer.x,
            int(y) - self.buffer.y,
            int(w) - self.buffer.w,
            int(h) - self.buffer.h,
        )