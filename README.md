# pysnake

A snake game for the desktop. Steer the snake around a 650 × 650 window and
eat the cyan squares. An L-shaped hurdle stands somewhere on the field, and for
part of every cycle a red bonus dot shows up.

## Installing

```
pip install .
```

This also installs `pygame`, which draws the window.

## Playing

```
pysnake
```

Options:

- `--high-score-file PATH` – the file that keeps the best score
  (default: `highestScore.txt` in the current directory).
- `--seed N` – seed for the random placement of the hurdle, the food and the
  bonus, so that a game can be replayed.

Rules:

- Use the arrow keys to steer. The snake stands still until the first arrow
  key, and it cannot turn straight back on itself.
- A cyan square is worth 5 points and makes the snake one segment longer.
- The red bonus dot is worth 10 points and makes the snake two segments longer.
  It is shown only during the first part of each bonus cycle.
- The hurdle moves to a new place from time to time, and the food squares are
  laid out again now and then.
- The snake wraps round at the edges of the field.
- The game is over when the snake runs into the hurdle or into itself; the
  window then shows your score.
- Press Esc, or close the window, to quit.

The best score so far is shown at the top of the window and is written to the
high-score file whenever the current score beats it.

## Using it as a library

The game logic in `pysnake.game` does not depend on the drawing code:

```python
import random
from pysnake.game import SnakeGame, Direction

game = SnakeGame(random.Random(1))
game.steer(Direction.RIGHT)
game.tick()
print(game.score, game.snake, game.bonus_visible(), game.eye_position())
```

- `SnakeGame` holds the field: `snake`, `head`, `food`, `bonus`, `hurdle`,
  `score`, `snake_size`, `direction`, `frame` and `game_over`. `steer()` turns
  the snake and `tick()` advances one frame.
- `HighScoreFile(path)` reads the stored best score with `read()` and stores a
  better one with `update(score)`, which returns the score stored before.
- `pysnake.app` has `Canvas`, which draws on a pygame surface with the origin at
  the bottom left, `render(game, canvas, high_score)`, which draws one frame,
  and `key_direction(key)`, which maps pygame arrow keys to a `Direction`.
- `pysnake.colors` provides the named colour palette: `ColorName`, `rgb` (components
  in 0.0–1.0) and `rgb255` (components in 0–255). Colours can be given as a
  `ColorName`, its index, or its name as a string.
- `pysnake.geometry` provides vertex helpers: `deg2rad`, `rand_in_range`,
  `square_triangles`, `circle_vertices`, `torus_strip`, `round_rect_strip` and
  `round_rect_border`.

## Running the tests

```
pip install .[test]
pytest
```