import pygame
import pytest

from zombiequest.collision import CollisionHandler
from zombiequest.objects import Properties, World
from zombiequest.physics import Point
from zombiequest.textures import Flip
from zombiequest.zombie import ATTACK_COOLDOWN, DEATH_SOUND, DEATH_TIME, Zombie

DT = 1 / 60


class _Player:
    def __init__(self, x, y):
        self.origin = Point(x, y)
        self.damage = []

    def take_damage(self, amount):
        self.damage.append(amount)


class _Sound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


def _ground_world():
    tiles = [[0] * 40 for _ in range(9)] + [[1] * 40]
    return World(collisions=CollisionHandler(tiles), clock=lambda: 0)


def _zombie(world):
    return Zombie(Properties("zombie", 200, 100, 90, 90), world)


def _land(zombie):
    for _ in range(300):
        zombie.update(DT)
        if zombie.is_grounded:
            break
    assert zombie.is_grounded
    return zombie


def _red_pixels(surface):
    return pygame.mask.from_threshold(surface, (255, 0, 0, 255), (1, 1, 1, 255)).count()


def test_starts_alive_with_full_health():
    zombie = _zombie(_ground_world())
    assert zombie.health == zombie.max_health == 3
    assert not zombie.is_dead
    assert zombie.attack_cooldown == ATTACK_COOLDOWN


def test_lethal_damage_kills_and_plays_sound():
    world = _ground_world()
    sound = _Sound()
    world.sounds[DEATH_SOUND] = sound
    zombie = _zombie(world)
    zombie.rigid_body.velocity.x = 30.0
    zombie.take_damage(3)
    assert zombie.is_dead
    assert zombie.death_time == DEATH_TIME
    assert zombie.rigid_body.velocity.x == 0.0
    assert zombie.animation.texture_id == "zombie_die"
    assert sound.plays == 1


def test_damage_after_death_is_ignored():
    zombie = _zombie(_ground_world())
    zombie.take_damage(5)
    health = zombie.health
    zombie.take_damage(1)
    assert zombie.health == health


def test_partial_damage_keeps_alive():
    zombie = _zombie(_ground_world())
    zombie.take_damage(1)
    assert zombie.health == zombie.max_health - 1
    assert not zombie.is_dead


def test_dead_zombie_counts_down_and_stays_put():
    zombie = _zombie(_ground_world())
    zombie.take_damage(3)
    before = zombie.death_time
    y = zombie.transform.y
    zombie.update(0.1)
    assert zombie.death_time == pytest.approx(before - 0.1)
    assert zombie.transform.y == y


def test_falls_without_ground():
    zombie = _zombie(World(clock=lambda: 0))
    y = zombie.transform.y
    zombie.update(DT)
    assert zombie.transform.y > y
    assert not zombie.is_grounded


def test_lands_and_stays_on_ground():
    zombie = _land(_zombie(_ground_world()))
    y = zombie.transform.y
    for _ in range(10):
        zombie.update(DT)
    assert zombie.transform.y == y
    assert zombie.is_grounded


def test_without_player_does_not_walk():
    zombie = _land(_zombie(_ground_world()))
    x = zombie.transform.x
    zombie.update(DT)
    assert zombie.transform.x == x


def test_patrols_when_player_is_far():
    world = _ground_world()
    zombie = _land(_zombie(world))
    world.player = _Player(5000, 0)
    x = zombie.transform.x
    zombie.update(DT)
    assert zombie.transform.x > x
    assert zombie.flip == Flip.NONE
    assert zombie.animation.texture_id == "zombie_dibo"


def test_chases_player_in_detection_range():
    world = _ground_world()
    zombie = _land(_zombie(world))
    world.player = _Player(zombie.origin.x - 100, zombie.origin.y)
    x = zombie.transform.x
    zombie.update(DT)
    assert zombie.transform.x < x
    assert not zombie.moving_right
    assert zombie.flip == Flip.HORIZONTAL
    assert not zombie.is_attacking


def test_attacks_player_in_reach():
    world = _ground_world()
    zombie = _land(_zombie(world))
    player = _Player(zombie.origin.x, zombie.origin.y)
    world.player = player
    zombie.attack_cooldown = 0
    x = zombie.transform.x
    zombie.update(DT)
    assert player.damage == [1]
    assert zombie.is_attacking
    assert zombie.transform.x == x
    assert zombie.animation.texture_id == "zombie_chem"
    assert zombie.attack_cooldown == pytest.approx(ATTACK_COOLDOWN - DT)


def test_attack_range_but_beyond_strike_reach_does_no_damage():
    world = _ground_world()
    zombie = _land(_zombie(world))
    player = _Player(zombie.origin.x + 45, zombie.origin.y)
    world.player = player
    zombie.attack_cooldown = 0
    zombie.update(DT)
    assert zombie.is_attacking
    assert player.damage == []


def test_cooldown_prevents_attack():
    world = _ground_world()
    zombie = _land(_zombie(world))
    player = _Player(zombie.origin.x, zombie.origin.y)
    world.player = player
    zombie.update(DT)
    assert zombie.is_attacking
    assert player.damage == []


def test_health_bar_shrinks_and_disappears():
    surfaces = []
    for damage in (0, 2):
        world = _ground_world()
        world.surface = pygame.Surface((1200, 640), 0, 32)
        zombie = _zombie(world)
        zombie.take_damage(damage)
        zombie.draw()
        surfaces.append(_red_pixels(world.surface))
    full, hurt = surfaces
    assert full > hurt > 0

    world = _ground_world()
    world.surface = pygame.Surface((1200, 640), 0, 32)
    zombie = _zombie(world)
    zombie.take_damage(3)
    zombie.update(1.0)
    zombie.draw()
    assert _red_pixels(world.surface) == 0