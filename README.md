# zombiequest

A side-scrolling action platformer built on pygame. You play a knight crossing
a dark tile map. Flying enemies patrol and shoot at you. Zombies walk the
ground and chase you when you come close. A boss patrols near the far end of
the level.

Each flying enemy or zombie you defeat adds one point to your score. Once the
knight's health reaches zero or the boss dies, the game-over screen appears
three seconds later.

## Installation

```
pip install .
```

This also installs `pygame`.

## Running

Start the game from the directory that holds its assets:

```
zombiequest
```

The game finds its assets through paths relative to the current directory:

- images under `img/`, including the tile map `img/Map/Map_Dark.txt` and the
  tileset `img/Map/0909.png`;
- sounds and music under `sound/`;
- the font `text/The Bomb Sound.ttf`.

The package does not include any of these assets. You must supply them.

- If one of the images is missing, start-up fails with an error.
- If the map file is missing, the game logs the problem and starts with an
  empty map.
- If the music, the sounds or the font are missing, the game logs the problem
  and plays without them.

## Controls

| Key                    | Action           |
|------------------------|------------------|
| `D` / Right arrow      | Run right        |
| `A` / Left arrow       | Run left         |
| `W` / Up arrow         | Jump             |
| `S`                    | Crouch           |
| `J`                    | Attack           |

You cannot move or jump while an attack is in progress.

The knight starts with 100 health and 5 mana. Each hit taken also costs one
point of mana, and one point of mana comes back every three seconds.

## Menus

The main menu has three buttons: **Play**, **Tutorial** and **Exit**.

During play, the home button returns to the main menu and the pause button
pauses or resumes the game. Your current score is shown at the top of the
screen.

On the game-over screen, **Play Again** rebuilds the level and returns you to
the main menu.

## Library use

You can also use the pieces of the game on their own:

- `zombiequest.physics` provides `Vector2D`, `Point`, `Transform`, `Rect`,
  `RigidBody` and `Collider`.
- `zombiequest.tilemap.parse_tile_map` reads the map text format. The text
  gives the width and height first, then the tile IDs row by row. Missing
  values become empty (0) tiles. `TileMap.tile_id` returns 0 outside the map.
- `zombiequest.collision.check_collision` tests whether two rectangles overlap.
  `CollisionHandler.map_collision` tests a rectangle against the solid
  (non-zero) tiles of a map.
- `zombiequest.timer.Timer` produces frame delta times, capped at 1/60 of a
  second.
- `zombiequest.animation.Animation` picks the sprite-sheet frame for a given
  time in milliseconds.

## Development

```
pip install -e .[test]
pytest
```