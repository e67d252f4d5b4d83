"""Keyboard state and movement axes."""

from __future__ import annotations

import enum
from typing import Callable, Iterable

import pygame

from .physics import BACKWARD, FORWARD


class Axis(enum.Enum):
    """A movement axis read from the keyboard."""

    HORIZONTAL = 0
    VERTICAL = 1


_AXIS_KEYS = {
    Axis.HORIZONTAL: ((pygame.K_d, pygame.K_RIGHT), (pygame.K_a, pygame.K_LEFT)),
    Axis.VERTICAL: ((pygame.K_w, pygame.K_UP), (pygame.K_s, pygame.K_DOWN)),
}


class Input:
    """Tracks which keys are held, fed by the event stream."""

    def __init__(self, on_quit: Callable[[], None] | None = None) -> None:
        self.on_quit = on_quit
        self._pressed: set[int] = set()

    def listen(self, events: Iterable[pygame.event.Event]) -> None:
        """Consume events, updating the held keys and reporting quit requests."""
        for event in events:
            if event.type == pygame.QUIT:
                if self.on_quit is not None:
                    self.on_quit()
            elif event.type == pygame.KEYDOWN:
                self._pressed.add(event.key)
            elif event.type == pygame.KEYUP:
                self._pressed.discard(event.key)

    def key_down(self, key: int) -> bool:
        return key in self._pressed

    def axis_key(self, axis: Axis) -> int:
        """Return 1, -1 or 0 for the direction held on ``axis``."""
        positive, negative = _AXIS_KEYS[axis]
        if any(self.key_down(key) for key in positive):
            return FORWARD
        if any(self.key_down(key) for key in negative):
            return BACKWARD
        return 0