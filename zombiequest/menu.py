"""The main menu, tutorial screen, in-game controls and game-over screen."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

import pygame

from .physics import SCREEN_HEIGHT, SCREEN_WIDTH, Rect

log = logging.getLogger(__name__)

FONT_PATH = "text/The Bomb Sound.ttf"
MENU_FONT_SIZE = 75
SCORE_FONT_SIZE = 50
HOME_IMAGE = "img/Menu/home.png"
PAUSE_IMAGE = "img/Menu/pause.png"
PLAY_IMAGE = "img/Menu/play.png"

WHITE = (255, 255, 255, 255)
YELLOW = (255, 255, 0, 255)
GRAY = (128, 128, 128, 255)
ORANGE = (255, 165, 0, 255)

MAIN_BUTTONS = ("Play", "Tutorial", "Exit")
BUTTON_SPACING = 100
HOVER_SCALE = 1.2
HOME_RECT = Rect(525, 20, 50, 50)
PAUSE_RECT = Rect(585, 20, 50, 50)


def is_mouse_over(rect: Rect | None, mouse_x: int, mouse_y: int) -> bool:
    """Return True if the mouse lies inside ``rect``, edges included."""
    if rect is None:
        return False
    return rect.x <= mouse_x <= rect.x + rect.w and rect.y <= mouse_y <= rect.y + rect.h


@dataclass
class Button:
    """A text button."""

    text: str
    rect: Rect
    hover: bool = False
    scale: float = 1.0


@dataclass
class ImageButton:
    """A button drawn with an image; the pause button swaps between two."""

    texture: Any = None
    pause_texture: Any = None
    play_texture: Any = None
    rect: Rect | None = None


def _load_font(path: str | Path, size: int) -> Any:
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        return pygame.font.Font(str(path), size)
    except (OSError, pygame.error) as exc:
        log.warning("failed to load font %s: %s", path, exc)
        return None


def _load_image(path: str | Path) -> Any:
    try:
        return pygame.image.load(str(path))
    except (OSError, pygame.error) as exc:
        log.warning("failed to load image %s: %s", path, exc)
        return None


class Menu:
    """Screens and buttons around the game, and the state they decide."""

    def __init__(
        self,
        surface: pygame.Surface | None = None,
        font: Any = None,
        score_font: Any = None,
        *,
        font_path: str | Path = FONT_PATH,
        home_texture: Any = None,
        pause_texture: Any = None,
        play_texture: Any = None,
    ) -> None:
        self.surface = surface
        self.font = font if font is not None else _load_font(font_path, MENU_FONT_SIZE)
        self.score_font = (score_font if score_font is not None
                           else _load_font(font_path, SCORE_FONT_SIZE))
        self.buttons: list[Button] = []
        self.back_button = Button("Back to Menu", Rect())
        self.play_again_button = Button("Play Again", Rect())
        self.home_button = ImageButton()
        self.pause_button = ImageButton()

        self.in_tutorial = False
        self.should_quit = False
        self.should_start = False
        self.paused = False
        self.in_game = False
        self.game_over = False
        self.should_restart = False
        self.score = 0

        self.background_texture: Any = None
        self.tutorial_texture: Any = None
        self.game_over_texture: Any = None

        if self.font is None or self.score_font is None:
            return

        y_offset = SCREEN_HEIGHT // 4 + 38
        for text in MAIN_BUTTONS:
            w, h = self.font.size(text)
            self.buttons.append(Button(text, Rect((SCREEN_WIDTH - w) // 2, y_offset, w, h)))
            y_offset += BUTTON_SPACING

        w, h = self.font.size(self.play_again_button.text)
        self.play_again_button.rect = Rect((SCREEN_WIDTH - w) // 2, SCREEN_HEIGHT // 2 + 50, w, h)

        w, h = self.font.size(self.back_button.text)
        self.back_button.rect = Rect(SCREEN_WIDTH - w - 20, SCREEN_HEIGHT - h - 20, w, h)

        home = home_texture if home_texture is not None else _load_image(HOME_IMAGE)
        if home is not None:
            self.home_button = ImageButton(texture=home, rect=HOME_RECT)

        pause = pause_texture if pause_texture is not None else _load_image(PAUSE_IMAGE)
        play = play_texture if play_texture is not None else _load_image(PLAY_IMAGE)
        if pause is not None and play is not None:
            self.pause_button = ImageButton(texture=pause, pause_texture=pause,
                                            play_texture=play, rect=PAUSE_RECT)

    def set_textures(self, background: Any, tutorial: Any, game_over: Any) -> None:
        """Set the full-screen images of the menu, tutorial and game-over screens."""
        self.background_texture = background
        self.tutorial_texture = tutorial
        self.game_over_texture = game_over

    def _on_main_menu(self) -> bool:
        return not self.in_tutorial and not self.in_game and not self.game_over

    @staticmethod
    def _update_hover(button: Button, mouse_x: int, mouse_y: int) -> None:
        button.hover = is_mouse_over(button.rect, mouse_x, mouse_y)
        button.scale = HOVER_SCALE if button.hover else 1.0

    def handle_event(self, event: pygame.event.Event, running: bool,
                     mouse_pos: tuple[int, int] | None = None) -> bool:
        """React to one event and return whether the game should keep running."""
        if event.type == pygame.QUIT:
            self.should_quit = True
            return False

        mouse_x, mouse_y = mouse_pos if mouse_pos is not None else pygame.mouse.get_pos()

        if event.type == pygame.MOUSEMOTION:
            if self._on_main_menu():
                for button in self.buttons:
                    self._update_hover(button, mouse_x, mouse_y)
            elif self.in_tutorial:
                self._update_hover(self.back_button, mouse_x, mouse_y)
            elif self.game_over:
                self._update_hover(self.play_again_button, mouse_x, mouse_y)
        elif event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", None) == 1:
            if self.game_over and is_mouse_over(self.play_again_button.rect, mouse_x, mouse_y):
                self.should_restart = True
            elif not self.in_tutorial and not self.in_game:
                for button in self.buttons:
                    if not is_mouse_over(button.rect, mouse_x, mouse_y):
                        continue
                    if button.text == "Play":
                        self.should_start = True
                    elif button.text == "Tutorial":
                        self.in_tutorial = True
                    elif button.text == "Exit":
                        running = False
                        self.should_quit = True
            elif self.in_tutorial and is_mouse_over(self.back_button.rect, mouse_x, mouse_y):
                self.in_tutorial = False
            elif self.in_game:
                if is_mouse_over(self.home_button.rect, mouse_x, mouse_y):
                    self.in_game = False
                    self.should_start = False
                    self.paused = False
                    self.pause_button.texture = self.pause_button.pause_texture
                if is_mouse_over(self.pause_button.rect, mouse_x, mouse_y):
                    self.paused = not self.paused
                    self.pause_button.texture = (self.pause_button.play_texture if self.paused
                                                 else self.pause_button.pause_texture)
        return running

    def _target(self) -> pygame.Surface:
        if self.surface is None:
            raise RuntimeError("no render target set")
        return self.surface

    def render_text(self, text: str, x: int, y: int, color: Sequence[int],
                    scale: float = 1.0, is_score: bool = False) -> pygame.Rect:
        """Draw ``text`` scaled about its unscaled box; return where it went."""
        target = self._target()
        font = self.score_font if is_score else self.font
        if font is None:
            raise RuntimeError("no font loaded")
        image = font.render(text, False, color)
        w, h = image.get_size()
        dst_w, dst_h = int(w * scale), int(h * scale)
        dst = pygame.Rect(x - int((dst_w - w) / 2), y - int((dst_h - h) / 2), dst_w, dst_h)
        if (dst_w, dst_h) != (w, h):
            image = pygame.transform.scale(image, (dst_w, dst_h))
        target.blit(image, dst.topleft)
        return dst

    def _draw_fullscreen(self, texture: Any) -> None:
        if texture is None:
            return
        image = texture
        if image.get_size() != (SCREEN_WIDTH, SCREEN_HEIGHT):
            image = pygame.transform.scale(image, (SCREEN_WIDTH, SCREEN_HEIGHT))
        self._target().blit(image, (0, 0))

    def _render_button(self, button: Button) -> None:
        self.render_text(button.text, button.rect.x, button.rect.y,
                         YELLOW if button.hover else WHITE, button.scale, False)

    def _render_image_button(self, button: ImageButton) -> None:
        if button.texture is None or button.rect is None:
            return
        rect = button.rect
        image = button.texture
        if image.get_size() != (rect.w, rect.h):
            image = pygame.transform.scale(image, (rect.w, rect.h))
        self._target().blit(image, (rect.x, rect.y))

    def render(self) -> None:
        """Draw the screen that matches the current state."""
        self._target()
        if self._on_main_menu():
            self._draw_fullscreen(self.background_texture)
            for button in self.buttons:
                self._render_button(button)
        elif self.in_tutorial:
            self._draw_fullscreen(self.tutorial_texture)
            self._render_button(self.back_button)
        elif self.in_game and not self.game_over:
            self._render_image_button(self.home_button)
            self._render_image_button(self.pause_button)
            self.render_text(f"Score: {self.score}", SCREEN_WIDTH - 200, 20, ORANGE, 1.0, True)
        elif self.game_over:
            self._draw_fullscreen(self.game_over_texture)
            self.render_text(f"SCORE {self.score}", SCREEN_WIDTH // 2 - 96,
                             SCREEN_HEIGHT // 2 - 85, ORANGE, 1.8, True)
            self._render_button(self.play_again_button)

    def reset_restart_state(self) -> None:
        self.should_restart = False