# sfsnake

A small snake arcade game built on pygame. Hold the left mouse button to
steer the snake toward the pointer, eat fruit to grow, and avoid running into
yourself. The playfield (640 × 480) wraps at the edges.

## Installing

```
pip install .
```

## Playing

```
sfsnake
```

or, without installing the command:

```
python -m sfsnake.game
```

The game reads its assets from the directory given with `--assets`, or from
the current directory when the option is left out:

```
sfsnake --assets path/to/assets
```

Below that directory it looks for:

- `Fonts/game_over.ttf`: the font for all text (pygame's default font is used if it cannot be loaded)
- `Music/bg_music.wav`: background music, restarted every 50 seconds
- `Sounds/pickup.aiff`: played when a fruit is eaten
- `Sounds/die.wav`: played when the snake hits itself; the game pauses for its length
- `Textures/snake_head.png`: the head image (a green disc is drawn instead if it is missing)

The game still runs when any of these are missing and reports each one it
could not load on standard error.

### Menu

- `SPACE`: start a game
- `S`: open the settings
- `A`: turn on AI mode, where the snake heads for the fruit on its own
  (it only turns toward the fruit when that does not mean reversing)
- `ESC`: quit

### In game

Hold the left mouse button to turn the snake toward the pointer. One fruit is
on the field at a time, placed at random with a random colour. Colours are
worth different lengths:

| Fruit | Growth |
|-------|--------|
| brown | 0      |
| green | 1      |
| blue  | 2      |
| red   | 3      |

When the head hits the body, the game ends and shows your score, which is the
snake's length. Press `SPACE` to retry, `S` for the settings, or `ESC` to
quit.

### Settings

- `P` / `B`: pink or black background
- `Y` / `N`: show or hide the grid
- `SPACE`: back to the menu

The settings last until the game is closed; they are not saved.

## Using it as a library

The game logic works without a window:

- `sfsnake.geometry`: `Vector` and `Rect`, with `Rect.intersection` and `Rect.intersects`.
- `sfsnake.snakenode`: `SnakeNode` and `NodeType`, one segment of the snake.
- `sfsnake.fruit`: `Fruit`, `FruitColor` and `to_rgb`.
- `sfsnake.snake`: `Snake`. `Snake.handle_input(mouse_pos, fruits)` takes a
  position (or `None` when the button is up) and the list of fruit;
  `Snake.update()` advances one step; `Snake.check_fruit_collisions(fruits)`
  removes and returns the eaten fruit; `Snake.hit_self()` reports a collision.
  Optional `on_pickup` and `on_die` callbacks are called on those events.
- `sfsnake.screens`: `MenuScreen`, `GameScreen`, `GameOverScreen` and
  `SettingScreen`, which share a `GameContext` (holding `Settings` and the
  active screen) and take an `InputState` of pressed key names and the mouse
  position. `GameScreen` accepts a `random.Random` for repeatable fruit placement.
- `sfsnake.game`: `Game`, which opens the window, loads the assets and runs
  the fixed ten-steps-per-second loop; `main()` is the command above.

## What it does not do

There are no saved high scores and no keyboard steering; the snake is steered
with the mouse or by AI mode only.

## Running the tests

```
pip install ".[test]"
pytest
```