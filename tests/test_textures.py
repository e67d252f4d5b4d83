import pygame
import pytest

from zombiequest.camera import Camera
from zombiequest.physics import Vector2D
from zombiequest.textures import Flip, TextureManager

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
BLACK = (0, 0, 0, 255)


def _sheet():
    """Two 2x2 frames in a row: frame 0 red, frame 1 blue."""
    sheet = pygame.Surface((4, 2))
    sheet.fill(RED[:3], pygame.Rect(0, 0, 2, 2))
    sheet.fill(BLUE[:3], pygame.Rect(2, 0, 2, 2))
    return sheet


def _target(size=(4, 4)):
    target = pygame.Surface(size)
    target.fill(BLACK[:3])
    return target


def test_add_get_drop_clean():
    tm = TextureManager()
    sheet = _sheet()
    tm.add("a", sheet)
    tm.add("b", sheet)
    assert tm.get("a") is sheet
    tm.drop("a")
    assert tm.get("a") is None
    assert "b" in tm
    tm.clean()
    assert "b" not in tm


def test_drop_unknown_is_harmless():
    tm = TextureManager()
    tm.add("a", _sheet())
    tm.drop("zzz")
    assert "a" in tm


def test_load_from_file(tmp_path):
    path = tmp_path / "sheet.bmp"
    pygame.image.save(_sheet(), str(path))
    tm = TextureManager()
    texture = tm.load("sheet", path)
    assert texture.get_size() == (4, 2)
    assert tm.get("sheet") is texture


def test_load_missing_file(tmp_path):
    tm = TextureManager()
    with pytest.raises(OSError):
        tm.load("x", tmp_path / "none.png")
    assert "x" not in tm


def test_draw_frame_picks_frame():
    target = _target()
    tm = TextureManager(target)
    tm.add("s", _sheet())
    tm.draw_frame("s", 0, 0, 2, 2, 0, 1)
    assert target.get_at((0, 0)) == BLUE
    tm.draw_frame("s", 2, 0, 2, 2, 0, 0)
    assert target.get_at((2, 0)) == RED


def test_draw_frame_follows_camera():
    target = _target()
    cam = Camera()
    cam.position = Vector2D(10, 4)
    tm = TextureManager(target, cam)
    tm.add("s", _sheet())
    tm.draw_frame("s", 10, 4, 2, 2, 0, 0)
    assert target.get_at((0, 0)) == RED


def test_draw_uses_half_camera():
    target = _target()
    cam = Camera()
    cam.position = Vector2D(20, 8)
    tm = TextureManager(target, cam)
    tm.add("s", _sheet())
    tm.draw("s", 10, 4, 4, 2)
    assert target.get_at((0, 0)) == RED
    assert target.get_at((3, 0)) == BLUE


def test_horizontal_flip_mirrors():
    target = _target()
    tm = TextureManager(target)
    tm.add("s", _sheet())
    tm.draw("s", 0, 0, 4, 2, Flip.HORIZONTAL)
    assert target.get_at((0, 0)) == BLUE
    assert target.get_at((3, 0)) == RED


def test_no_flip_keeps_orientation():
    target = _target()
    tm = TextureManager(target)
    tm.add("s", _sheet())
    tm.draw("s", 0, 0, 4, 2, Flip.NONE)
    assert target.get_at((0, 0)) == RED
    assert target.get_at((3, 0)) == BLUE


def test_draw_tile():
    target = _target()
    tm = TextureManager(target)
    tm.add("tiles", _sheet())
    tm.draw_tile("tiles", 2, 1, 1, 0, 1)
    assert target.get_at((1, 1)) == BLUE
    assert target.get_at((0, 0)) == BLACK


def test_draw_missing_texture_draws_nothing():
    target = _target()
    tm = TextureManager(target)
    tm.draw("nope", 0, 0, 2, 2)
    tm.draw_frame("nope", 0, 0, 2, 2, 0, 0)
    assert target.get_at((0, 0)) == BLACK


def test_draw_without_target_raises():
    tm = TextureManager()
    tm.add("s", _sheet())
    with pytest.raises(RuntimeError):
        tm.draw_frame("s", 0, 0, 2, 2, 0, 0)