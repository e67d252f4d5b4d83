"""The game engine: start-up, the frame loop, level set-up and tear-down."""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Sequence

import pygame

from .boss import Boss
from .collision import CollisionHandler
from .enemy import Enemy
from .knight import Knight
from .menu import Menu
from .objects import Properties, World
from .physics import SCREEN_HEIGHT, SCREEN_WIDTH
from .textures import Flip
from .tilemap import TileMap
from .timer import TARGET_FPS
from .zombie import Zombie

log = logging.getLogger(__name__)

WINDOW_TITLE = "Zombie"
HUD_FONT_PATH = "text/The Bomb Sound.ttf"
HUD_FONT_SIZE = 25
MAP_PATH = "img/Map/Map_Dark.txt"
TILESET_PATH = "img/Map/0909.png"
MUSIC_PATH = "sound/nhac_chinh.wav"
SOUND_PATHS = {
    "zombie_death": "sound/zombie_death.wav",
    "boss_death": "sound/boss_death.wav",
}
TEXTURE_PATHS = {
    "menu_background": "img/Menu/menugame.png",
    "tutorial": "img/Menu/tutorial.png",
    "game_over": "img/Menu/gameover.png",
    "player_idle": "img/Knight/Dung.png",
    "player_run": "img/Knight/Chay.png",
    "player_jump": "img/Knight/Jumpp.png",
    "player_fall": "img/Knight/Fall.png",
    "player_crouch": "img/Knight/Crouch.png",
    "player_attrack": "img/Knight/Attrack.png",
    "enemy_fly": "img/Enemy/FLY.png",
    "enemy_death": "img/Enemy/DEATH.png",
    "enemy_attack": "img/Enemy/ATTACK.png",
    "zombie_die": "img/Zombie/die.png",
    "zombie_dibo": "img/Zombie/dibo.png",
    "zombie_chem": "img/Zombie/chem.png",
    "boss_death": "img/Boss/Death.png",
    "boss_attack": "img/Boss/Attack.png",
    "boss_run": "img/Boss/Run.png",
    "background1": "img/Background/background1.png",
}

BACKGROUND_WIDTH = 1280
MENU_INPUT_DELAY = 1200
GAME_OVER_DELAY = 3000

PLAYER_PROPS = ("player", 100, 200, 136, 96)
BOSS_PROPS = ("boss", 2600, 100, 400, 400)
ENEMY_SIZE = (81, 71)
ZOMBIE_SIZE = (90, 90)

INITIAL_ENEMIES = ((100, 230), (400, 140), (800, 200), (1200, 160),
                   (1600, 170), (2000, 140), (2600, 200))
INITIAL_ZOMBIES = ((260, 200), (500, 200), (1000, 200), (1200, 200),
                   (700, 200), (1900, 200), (2200, 250))
RESTART_ENEMIES = ((800, 200), (1200, 200), (2000, 170), (2600, 200))
RESTART_ZOMBIES = ((500, 200), (1000, 200), (1200, 200), (1900, 200), (2200, 250))


def _background_positions(camera_x: float, width: int) -> list[int]:
    """Return the x positions at which the repeating background is drawn."""
    start = int(math.fmod(-int(camera_x), width))
    if start > 0:
        start -= width
    return list(range(start, SCREEN_WIDTH + width, width))


def _mouse_position(event: pygame.event.Event) -> tuple[int, int]:
    pos = getattr(event, "pos", None)
    if pos is not None:
        return int(pos[0]), int(pos[1])
    if pygame.display.get_init():
        return pygame.mouse.get_pos()
    return (0, 0)


class Engine:
    """Owns the world, the menu and the game state, and runs each frame."""

    def __init__(self, world: World | None = None, menu: Menu | None = None) -> None:
        self.world = world if world is not None else World()
        self.menu = menu
        self.running = False
        self.in_menu = True
        self.game_over = False
        self.game_over_triggered = False
        self.game_over_trigger_time = 0
        self.score = 0
        self.menu_start_time = 0
        self.level_map: TileMap | None = None
        self.background_width = BACKGROUND_WIDTH
        self.music_loaded = False
        self._music_paused = False
        self._initialized = False

    @property
    def player(self) -> Knight | None:
        return self.world.player

    @player.setter
    def player(self, knight: Knight | None) -> None:
        self.world.player = knight

    @property
    def boss(self) -> Boss | None:
        return self.world.boss

    @boss.setter
    def boss(self, boss: Boss | None) -> None:
        self.world.boss = boss

    @property
    def enemies(self) -> list:
        return self.world.enemies

    @property
    def zombies(self) -> list:
        return self.world.zombies

    def init(self) -> bool:
        """Open the window, load every asset, build the level and start running."""
        pygame.init()
        self._initialized = True
        try:
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error as exc:
            log.error("could not open audio: %s", exc)

        surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        world = self.world
        world.surface = surface

        try:
            world.font = pygame.font.Font(HUD_FONT_PATH, HUD_FONT_SIZE)
        except (OSError, pygame.error) as exc:
            log.error("could not load font %s: %s", HUD_FONT_PATH, exc)
            world.font = None

        textures = world.textures
        for texture_id in ("menu_background", "tutorial", "game_over"):
            textures.load(texture_id, TEXTURE_PATHS[texture_id])
        self.menu = Menu(surface)
        self.menu.set_textures(textures.get("menu_background"), textures.get("tutorial"),
                               textures.get("game_over"))
        for texture_id, path in TEXTURE_PATHS.items():
            if texture_id not in ("menu_background", "tutorial", "game_over"):
                textures.load(texture_id, path)

        self._load_audio()
        self._load_map()
        self._start_level(INITIAL_ENEMIES, INITIAL_ZOMBIES)
        self.menu_start_time = world.clock()
        self.running = True
        return True

    def _load_audio(self) -> None:
        if not pygame.mixer.get_init():
            return
        try:
            pygame.mixer.music.load(MUSIC_PATH)
        except (pygame.error, FileNotFoundError) as exc:
            log.error("could not load music %s: %s", MUSIC_PATH, exc)
        else:
            self.music_loaded = True
            pygame.mixer.music.play(-1)
        for name, path in SOUND_PATHS.items():
            try:
                self.world.sounds[name] = pygame.mixer.Sound(path)
            except (pygame.error, FileNotFoundError) as exc:
                log.error("could not load sound %s: %s", path, exc)

    def _load_map(self) -> None:
        try:
            tile_map = TileMap.from_file(MAP_PATH)
        except OSError:
            log.error("could not open the map file %s", MAP_PATH)
            tile_map = TileMap(width=0, height=0, tiles=[])
        try:
            tile_map.load_tileset(TILESET_PATH)
        except (pygame.error, FileNotFoundError) as exc:
            log.error("could not load tileset %s: %s", TILESET_PATH, exc)
        self.level_map = tile_map
        self.world.collisions = CollisionHandler(tile_map.tiles, tile_map.tile_size)

    def _start_level(self, enemy_positions: Iterable[Sequence[float]],
                     zombie_positions: Iterable[Sequence[float]]) -> None:
        world = self.world
        self.player = Knight(Properties(*PLAYER_PROPS), world)
        self.boss = Boss(Properties(*BOSS_PROPS), world)
        world.enemies.clear()
        world.zombies.clear()
        for x, y in enemy_positions:
            self.add_enemy(Enemy(Properties("enemy", x, y, *ENEMY_SIZE), world))
        for x, y in zombie_positions:
            self.add_zombie(Zombie(Properties("zombie", x, y, *ZOMBIE_SIZE), world))
        world.camera.target = self.player.origin

    def add_enemy(self, enemy: Enemy) -> None:
        self.world.enemies.append(enemy)

    def add_zombie(self, zombie: Zombie) -> None:
        self.world.zombies.append(zombie)

    def _pause_music(self) -> None:
        if self.music_loaded:
            pygame.mixer.music.pause()
            self._music_paused = True

    def _resume_music(self) -> None:
        if self.music_loaded and self._music_paused:
            pygame.mixer.music.unpause()
            self._music_paused = False

    def update(self) -> None:
        """Advance every character one frame and settle game over and score."""
        if self.menu is not None and self.menu.paused:
            self._pause_music()
            return
        if not self.game_over:
            self._resume_music()

        world = self.world
        dt = world.timer.delta_time
        world.camera.update(dt)
        if self.player is not None:
            self.player.update(dt)
        if self.boss is not None:
            self.boss.update(dt)
        for enemy in list(world.enemies):
            if enemy is not None:
                enemy.update(dt)
        for zombie in list(world.zombies):
            if zombie is not None:
                zombie.update(dt)

        if not self.game_over_triggered:
            player_down = self.player is not None and self.player.health <= 0
            boss_down = self.boss is not None and self.boss.is_dead
            if player_down or boss_down:
                self.game_over_triggered = True
                self.game_over_trigger_time = world.clock()
                self._pause_music()
        elif world.clock() - self.game_over_trigger_time >= GAME_OVER_DELAY:
            self.game_over = True

        world.enemies[:] = self._remove_finished(world.enemies)
        world.zombies[:] = self._remove_finished(world.zombies)

        if self.level_map is not None:
            self.level_map.update()

    def _remove_finished(self, characters: list) -> list:
        kept = []
        for character in characters:
            if character.is_dead and character.death_time <= 0:
                self.score += 1
            else:
                kept.append(character)
        return kept

    def render(self) -> None:
        """Draw the menu, the game-over screen or the level with its HUD."""
        menu = self.menu
        if self.in_menu:
            if menu is not None:
                menu.render()
        elif self.game_over:
            if menu is not None:
                menu.score = self.score
                menu.game_over = True
                menu.render()
        else:
            self._render_level()
            if menu is not None:
                menu.score = self.score
                menu.render()
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            pygame.display.flip()

    def _render_level(self) -> None:
        world = self.world
        camera_x = world.camera.position.x
        for x in _background_positions(camera_x, self.background_width):
            world.textures.draw("background1", x, 0, self.background_width,
                                SCREEN_HEIGHT, Flip.NONE)
        if self.level_map is not None and world.surface is not None:
            self.level_map.render(world.surface, world.camera)
        if self.player is not None:
            self.player.draw()
        if self.boss is not None:
            self.boss.draw()
        for enemy in world.enemies:
            if enemy is not None:
                enemy.draw()
        for zombie in world.zombies:
            if zombie is not None:
                zombie.draw()

    def events(self) -> None:
        """Handle every pending window event."""
        for event in pygame.event.get():
            self._handle_event(event)

    def _handle_event(self, event: pygame.event.Event) -> None:
        menu = self.menu
        if menu is None:
            if event.type == pygame.QUIT:
                self.running = False
            return
        now = self.world.clock()
        mouse = _mouse_position(event)

        if self.in_menu:
            if now - self.menu_start_time < MENU_INPUT_DELAY:
                return
            self.running = menu.handle_event(event, self.running, mouse)
            if menu.should_start:
                self.in_menu = False
                menu.in_game = True
            if menu.should_quit:
                self.running = False
        elif self.game_over:
            menu.game_over = True
            menu.in_game = False
            self.running = menu.handle_event(event, self.running, mouse)
            if menu.should_restart:
                self._restart()
            if menu.should_quit:
                self.running = False
        else:
            self.running = menu.handle_event(event, self.running, mouse)
            if menu.should_quit:
                self.running = False
                return
            if not menu.in_game:
                self.in_menu = True
                return
            if not menu.paused:
                self.world.input.listen([event])
                if event.type == pygame.QUIT:
                    self.running = False

    def _restart(self) -> None:
        menu = self.menu
        self.game_over = False
        self.game_over_triggered = False
        self.game_over_trigger_time = 0
        self.score = 0
        self.in_menu = True
        if menu is not None:
            menu.in_game = False
            menu.game_over = False
            menu.reset_restart_state()
        self._start_level(RESTART_ENEMIES, RESTART_ZOMBIES)

    def clean(self) -> bool:
        """Release every character and asset and shut the window down."""
        world = self.world
        if self.player is not None:
            self.player.clean()
            self.player = None
        if self.boss is not None:
            self.boss.clean()
            self.boss = None
        for enemy in world.enemies:
            enemy.clean()
        world.enemies.clear()
        for zombie in world.zombies:
            zombie.clean()
        world.zombies.clear()
        if self.level_map is not None:
            self.level_map.clean()
            self.level_map = None
        world.textures.clean()
        self.menu = None
        if self.music_loaded and pygame.mixer.get_init():
            pygame.mixer.music.stop()
        self.music_loaded = False
        world.sounds.clear()
        world.font = None
        world.surface = None
        if self._initialized:
            pygame.quit()
            self._initialized = False
        return True

    def quit(self) -> None:
        self.running = False


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game until the window is closed."""
    logging.basicConfig(level=logging.INFO)
    engine = Engine()
    try:
        engine.init()
    except pygame.error as exc:
        log.error("could not start the game: %s", exc)
        engine.clean()
        return 1
    frame_clock = pygame.time.Clock()
    while engine.running:
        engine.events()
        engine.update()
        engine.render()
        engine.world.timer.tick()
        frame_clock.tick(TARGET_FPS)
    engine.clean()
    return 0