import pygame
import pytest

from zombiequest.menu import (
    HOME_RECT,
    PAUSE_RECT,
    Button,
    ImageButton,
    Menu,
    is_mouse_over,
)
from zombiequest.physics import SCREEN_HEIGHT, SCREEN_WIDTH, Rect


class FakeFont:
    def size(self, text):
        return (len(text) * 10, 20)

    def render(self, text, antialias, color):
        image = pygame.Surface(self.size(text))
        image.fill(color)
        return image


HOME_COLOR = (10, 200, 30, 255)
PAUSE_COLOR = (40, 50, 60, 255)
PLAY_COLOR = (70, 80, 90, 255)


def _solid(size, color):
    image = pygame.Surface(size)
    image.fill(color)
    return image


@pytest.fixture
def menu():
    return Menu(
        pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT)),
        FakeFont(),
        FakeFont(),
        home_texture=_solid((50, 50), HOME_COLOR),
        pause_texture=_solid((50, 50), PAUSE_COLOR),
        play_texture=_solid((50, 50), PLAY_COLOR),
    )


def click(menu, pos, running=True, button=1):
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos)
    return menu.handle_event(event, running, pos)


def centre(rect):
    return (rect.x + rect.w // 2, rect.y + rect.h // 2)


def button_named(menu, text):
    return next(b for b in menu.buttons if b.text == text)


def test_is_mouse_over_includes_edges():
    rect = Rect(10, 20, 30, 40)
    assert is_mouse_over(rect, 10, 20)
    assert is_mouse_over(rect, 40, 60)
    assert not is_mouse_over(rect, 41, 60)
    assert not is_mouse_over(rect, 10, 19)
    assert not is_mouse_over(None, 0, 0)


def test_main_buttons_are_stacked_and_centred(menu):
    assert [b.text for b in menu.buttons] == ["Play", "Tutorial", "Exit"]
    assert menu.buttons[0].rect.y == SCREEN_HEIGHT // 4 + 38
    for upper, lower in zip(menu.buttons, menu.buttons[1:]):
        assert lower.rect.y - upper.rect.y == 100
    for button in menu.buttons:
        assert abs(2 * button.rect.x + button.rect.w - SCREEN_WIDTH) <= 1


def test_back_button_sits_in_bottom_right(menu):
    rect = menu.back_button.rect
    assert rect.x + rect.w == SCREEN_WIDTH - 20
    assert rect.y + rect.h == SCREEN_HEIGHT - 20


def test_image_buttons_use_fixed_rects(menu):
    assert menu.home_button.rect == HOME_RECT
    assert menu.pause_button.rect == PAUSE_RECT
    assert menu.pause_button.texture is menu.pause_button.pause_texture


def test_missing_font_leaves_no_buttons(tmp_path):
    bare = Menu(None, font_path=tmp_path / "absent.ttf")
    assert bare.buttons == []
    assert bare.home_button == ImageButton()


def test_click_play_starts_game(menu):
    running = click(menu, centre(button_named(menu, "Play").rect))
    assert running is True
    assert menu.should_start is True
    assert menu.should_quit is False


def test_click_exit_stops_running(menu):
    running = click(menu, centre(button_named(menu, "Exit").rect))
    assert running is False
    assert menu.should_quit is True


def test_tutorial_and_back(menu):
    click(menu, centre(button_named(menu, "Tutorial").rect))
    assert menu.in_tutorial is True
    click(menu, centre(menu.back_button.rect))
    assert menu.in_tutorial is False


def test_right_click_is_ignored(menu):
    running = click(menu, centre(button_named(menu, "Exit").rect), button=3)
    assert running is True
    assert menu.should_quit is False


def test_quit_event_stops_running(menu):
    running = menu.handle_event(pygame.event.Event(pygame.QUIT), True, (0, 0))
    assert running is False
    assert menu.should_quit is True


def test_hover_enlarges_button(menu):
    play = button_named(menu, "Play")
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=centre(play.rect))
    menu.handle_event(event, True, centre(play.rect))
    assert play.hover is True
    assert play.scale == pytest.approx(1.2)
    assert button_named(menu, "Exit").scale == 1.0
    menu.handle_event(event, True, (0, 0))
    assert play.hover is False
    assert play.scale == 1.0


def test_pause_toggles_and_swaps_texture(menu):
    menu.in_game = True
    click(menu, centre(PAUSE_RECT))
    assert menu.paused is True
    assert menu.pause_button.texture is menu.pause_button.play_texture
    click(menu, centre(PAUSE_RECT))
    assert menu.paused is False
    assert menu.pause_button.texture is menu.pause_button.pause_texture


def test_home_returns_to_menu_and_unpauses(menu):
    menu.in_game = True
    menu.should_start = True
    click(menu, centre(PAUSE_RECT))
    click(menu, centre(HOME_RECT))
    assert menu.in_game is False
    assert menu.should_start is False
    assert menu.paused is False
    assert menu.pause_button.texture is menu.pause_button.pause_texture


def test_play_again_requests_restart(menu):
    menu.game_over = True
    click(menu, centre(menu.play_again_button.rect))
    assert menu.should_restart is True
    menu.reset_restart_state()
    assert menu.should_restart is False


def test_render_text_unscaled_lands_at_position(menu):
    rect = menu.render_text("Play", 100, 50, (255, 255, 255, 255), 1.0)
    assert (rect.x, rect.y) == (100, 50)
    assert rect.size == FakeFont().size("Play")
    assert menu.surface.get_at((101, 51)) == (255, 255, 255, 255)


def test_render_text_scaled_keeps_centre(menu):
    plain = menu.render_text("Exit", 200, 100, (1, 2, 3, 255), 1.0)
    scaled = menu.render_text("Exit", 200, 100, (1, 2, 3, 255), 2.0, True)
    assert scaled.w == 2 * plain.w
    assert scaled.h == 2 * plain.h
    assert abs(scaled.centerx - plain.centerx) <= 1
    assert abs(scaled.centery - plain.centery) <= 1


def test_render_in_game_draws_image_buttons(menu):
    menu.in_game = True
    menu.render()
    assert menu.surface.get_at(centre(HOME_RECT)) == HOME_COLOR
    assert menu.surface.get_at(centre(PAUSE_RECT)) == PAUSE_COLOR


def test_render_main_menu_draws_background(menu):
    background = _solid((SCREEN_WIDTH, SCREEN_HEIGHT), (5, 6, 7, 255))
    menu.set_textures(background, None, None)
    menu.render()
    assert menu.surface.get_at((2, 2)) == (5, 6, 7, 255)
    assert menu.background_texture is background


def test_render_without_surface_raises():
    menu = Menu(None, FakeFont(), FakeFont())
    with pytest.raises(RuntimeError):
        menu.render()


def test_button_defaults():
    button = Button("Play", Rect(1, 2, 3, 4))
    assert button.hover is False
    assert button.scale == 1.0