import pygame
import pytest

from zombiequest.camera import TILE_SIZE, Camera
from zombiequest.physics import Vector2D
from zombiequest.tilemap import TileMap, parse_tile_map

SAMPLE = "3 2\n0 1 0\n2 0 0\n"


def test_parse_dimensions_and_rows():
    tm = parse_tile_map(SAMPLE)
    assert (tm.width, tm.height) == (3, 2)
    assert tm.tiles == [[0, 1, 0], [2, 0, 0]]
    assert tm.tile_size == TILE_SIZE


def test_parse_incomplete_fills_with_empty():
    tm = parse_tile_map("2 2 5")
    assert tm.tiles == [[5, 0], [0, 0]]


@pytest.mark.parametrize("text", ["", "3", "a b", "2 1 x 1", "-1 2"])
def test_parse_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_tile_map(text)


def test_tile_id_bounds():
    tm = parse_tile_map(SAMPLE)
    assert tm.tile_id(1, 0) == 1
    assert tm.tile_id(0, 1) == 2
    assert tm.tile_id(-1, 0) == 0
    assert tm.tile_id(3, 0) == 0
    assert tm.tile_id(0, 2) == 0


def test_from_file(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text(SAMPLE)
    assert TileMap.from_file(path).tiles == parse_tile_map(SAMPLE).tiles


def test_from_missing_file(tmp_path):
    with pytest.raises(OSError):
        TileMap.from_file(tmp_path / "missing.txt")


def test_visible_tiles_skips_empty():
    tm = parse_tile_map(SAMPLE)
    assert sorted(tm.visible_tiles(0, 0, 1200, 640)) == [(0, 1, 2), (1, 0, 1)]


def test_visible_tiles_respects_camera():
    tm = parse_tile_map("4 1 1 1 1 1")
    seen = {x for x, _, _ in tm.visible_tiles(2 * TILE_SIZE, 0, TILE_SIZE - 1, TILE_SIZE)}
    assert seen == {2}


def test_render_draws_tiles():
    tm = parse_tile_map("2 2 0 1 0 0")
    tileset = pygame.Surface((TILE_SIZE, TILE_SIZE))
    tileset.fill((255, 0, 0))
    tm.tileset = tileset
    target = pygame.Surface((2 * TILE_SIZE, 2 * TILE_SIZE))
    target.fill((0, 0, 0))
    tm.render(target, Camera())
    assert target.get_at((TILE_SIZE + 5, 5)) == (255, 0, 0, 255)
    assert target.get_at((5, 5)) == (0, 0, 0, 255)
    assert target.get_at((TILE_SIZE + 5, TILE_SIZE + 5)) == (0, 0, 0, 255)


def test_render_offsets_by_camera():
    tm = parse_tile_map("2 1 0 1")
    tileset = pygame.Surface((TILE_SIZE, TILE_SIZE))
    tileset.fill((0, 255, 0))
    tm.tileset = tileset
    cam = Camera()
    cam.position = Vector2D(TILE_SIZE, 0)
    target = pygame.Surface((TILE_SIZE, TILE_SIZE))
    target.fill((0, 0, 0))
    tm.render(target, cam)
    assert target.get_at((0, 0)) == (0, 255, 0, 255)


def test_load_tileset_and_clean(tmp_path):
    image = pygame.Surface((TILE_SIZE, TILE_SIZE))
    image.fill((0, 0, 255))
    path = tmp_path / "tiles.bmp"
    pygame.image.save(image, str(path))
    tm = parse_tile_map(SAMPLE)
    tm.load_tileset(path)
    assert tm.tileset.get_size() == (TILE_SIZE, TILE_SIZE)
    tm.update()
    assert tm.tiles == [[0, 1, 0], [2, 0, 0]]
    tm.clean()
    assert tm.tileset is None