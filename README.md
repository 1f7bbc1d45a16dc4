# pixeltoys

Two small graphical toys built on pygame: a starfield and a snake game.

## Installation

```
pip install .
```

## Starfield

A thousand stars fly towards you from the centre of a 640×640 window.
Each star is drawn as a white line from where it was in the previous
frame to where it is now. Once a star has come all the way in, it is
placed again at a random position and depth.

```
pixeltoys-starfield
pixeltoys-starfield --seed 42 --fps 30
```

| Option   | Meaning                                  |
|----------|------------------------------------------|
| `--seed` | seed for the random generator            |
| `--fps`  | frames per second to aim for (default 60) |

Close the window to quit.

## Snake

A snake game on an 11×11 grid drawn in a 650×650 window. The snake
starts as a single cell at (5, 5) and the game starts paused; press a
movement key to begin. The snake moves one cell every 200 ms.

```
pixeltoys-snake
pixeltoys-snake --seed 42
```

`--seed` seeds the random generator that places the food.

| Key    | Action      |
|--------|-------------|
| W      | move north  |
| A      | move west   |
| S      | move south  |
| D      | move east   |
| P      | pause       |
| Escape | quit        |

Eating the green food makes the snake grow by one cell, and new food
appears on a random free cell. The outermost row and column at the top
and left (index 0) count as wall, as do cells past the grid's edge.
Running into a wall or into the snake's own body ends the round: the
board resets and the game pauses until a movement key is pressed again.

There is no score, no speed-up and no record of past rounds.

## Using the game logic directly

The rules live in `pixeltoys.snake` and need no display:

```python
import random

from pixeltoys.snake import Board, Direction, GridCoords

board = Board(11, GridCoords(5, 5), rng=random.Random(1))
board.set_direction(Direction.EAST)
if not board.update():
    board.reset()
print(board.snake.body, board.food)
```

- `Board.update()` moves the snake one cell and returns `False` when
  the move would crash, leaving the board unchanged.
- `Board.is_collision(loc)` tells whether a cell is wall or snake.
- `Board.reset()` puts back a fresh snake and new food. Placing food
  raises `RuntimeError` when no free cell is left.
- `Snake.next_head()`, `Snake.move(has_eaten_food)` and
  `Snake.occupies(here)` work on the snake alone; its head is the last
  element of `Snake.body`.

`pixeltoys.snake_game` holds the screen side: `Layout` gives the grid
lines (`grid_lines()`) and cell rectangles (`cell_origin()`,
`cell_rect()`), and `GameState` takes key names through `handle_key()`
(returning `False` for `escape`) and advances play with `tick()`.

`pixeltoys.starfield.StarField.step()` advances the star simulation by
one frame and returns the line segments to draw; `map_range()` and
`center()` are the helpers it uses.

## Running the tests

```
pip install .[test]
pytest
```