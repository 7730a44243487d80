"""Game state and rules: the snake, its food, the bonus and the hurdle."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Callable, Optional, Union

Cell = tuple[int, int]

CELL = 10
FIELD_WIDTH = 640
FIELD_HEIGHT = 590
WRAP_WIDTH = 645
WRAP_HEIGHT = 595
START_X = 300
START_Y = 300
START_SIZE = 2
FOOD_COUNT = 5
FOOD_POINTS = 5
BONUS_POINTS = 10
FOOD_GROWTH = 1
BONUS_GROWTH = 2
HURDLE_ARM = 100
HURDLE_PERIOD = 225
FOOD_PERIOD = 112
BONUS_PERIOD = 450
BONUS_VISIBLE_FRAMES = 112
BONUS_HIDDEN_X = 740
RAND_MAX = 2**31 - 1
DEFAULT_HIGH_SCORE_PATH = "highestScore.txt"


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _cmod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _cdiv(a, b)


def _col(value: int) -> int:
    return _cdiv(value, CELL)


class Direction(IntEnum):
    """Heading of the snake; NONE until the first arrow key."""

    NONE = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3
    UP = 4

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.NONE: Direction.NONE,
    Direction.RIGHT: Direction.LEFT,
    Direction.LEFT: Direction.RIGHT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

# step in x, step in y, eye offset in x, eye offset in y
_MOTION = {
    Direction.RIGHT: (CELL, 0, 15, 5),
    Direction.DOWN: (0, -CELL, 5, -5),
    Direction.LEFT: (-CELL, 0, -5, 5),
    Direction.UP: (0, CELL, 5, 15),
}


@dataclass(frozen=True)
class Hurdle:
    """An L-shaped wall: down from (x, y), then right along the bottom."""

    x: int
    y: int

    @property
    def top(self) -> Cell:
        return (self.x, self.y)

    @property
    def elbow(self) -> Cell:
        return (self.x, self.y - HURDLE_ARM)

    @property
    def end(self) -> Cell:
        return (self.x + HURDLE_ARM, self.y - HURDLE_ARM)

    @property
    def segments(self) -> list[tuple[Cell, Cell]]:
        """The two wall segments as pairs of end points."""
        return [(self.top, self.elbow), (self.elbow, self.end)]

    def covers(self, cell: Cell) -> bool:
        """Whether a cell lies on the wall, as used when placing things."""
        cx, cy = _col(cell[0]), _col(cell[1])
        top_x, top_y = _col(self.x), _col(self.y)
        elbow_y = _col(self.y - HURDLE_ARM)
        end_x = _col(self.x + HURDLE_ARM)
        on_bottom = top_x <= cx <= end_x and cy == elbow_y
        on_side = top_y <= cy <= elbow_y and cx == top_x
        return on_bottom or on_side

    def hits(self, head: Cell) -> bool:
        """Whether the head touches the wall, allowing one cell of slack."""
        cx, cy = _col(head[0]), _col(head[1])
        top_x, top_y = _col(self.x), _col(self.y)
        elbow_y = _col(self.y - HURDLE_ARM)
        end_x = _col(self.x + HURDLE_ARM)
        bottom = top_x - 1 <= cx <= end_x + 1 and abs(cy - elbow_y) <= 1
        side = elbow_y - 1 <= cy <= top_y + 1 and abs(cx - top_x) <= 1
        return bottom or side


def _clashes(p: Cell, q: Cell) -> bool:
    """Whether two items share a row or a diagonal, cell-wise."""
    return (
        _col(p[1]) == _col(q[1])
        or _cdiv(q[0] - p[0], CELL) == _cdiv(q[1] - p[1], CELL)
        or _cdiv(p[0] - q[0], CELL) == _cdiv(p[1] - q[1], CELL)
        or _cdiv(p[0] + p[1], CELL) == _cdiv(q[0] + q[1], CELL)
    )


def _clamp_hurdle(value: int) -> int:
    if value >= 550:
        value = 150
    if value <= 100:
        value = 500
    return value


class HighScoreFile:
    """Best score kept as a single number in a text file."""

    def __init__(self, path: Union[str, Path] = DEFAULT_HIGH_SCORE_PATH) -> None:
        self.path = Path(path)

    def read(self) -> int:
        """Return the stored score, or 0 if the file is missing or unreadable."""
        try:
            text = self.path.read_text()
        except (OSError, UnicodeDecodeError):
            return 0
        match = re.match(r"\s*([+-]?\d+)", text)
        return int(match.group(1)) if match else 0

    def update(self, score: int) -> int:
        """Store score if it beats the stored one; return the previously stored score."""
        best = self.read()
        if score > best:
            self.path.write_text(str(score))
        return best


class SnakeGame:
    """The playing field, advanced one frame at a time by tick()."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.direction = Direction.NONE
        self.snake_size = START_SIZE
        self.score = 0
        self.game_over = False
        self.frame = 0
        self._x = START_X
        self._y = START_Y
        self._eye = _MOTION[Direction.RIGHT][2:]
        self._cells: list[Cell] = [(0, 0)] * max(START_SIZE, 3)
        self.hurdle = Hurdle(0, 0)
        self._place_hurdle()
        self.food: list[Cell] = []
        self._place_all_food()
        self.bonus: Cell = (0, 0)
        self._place_bonus()

    @property
    def snake(self) -> list[Cell]:
        """Segments of the snake, head first."""
        return list(self._cells[: self.snake_size])

    @property
    def head(self) -> Cell:
        return self._cells[0]

    def steer(self, direction: Direction) -> None:
        """Turn the snake, unless that would reverse it onto itself."""
        direction = Direction(direction)
        if direction is Direction.NONE:
            return
        if self.direction is not direction.opposite:
            self.direction = direction

    def bonus_visible(self) -> bool:
        """Whether the bonus is shown in the current frame."""
        return self.frame % BONUS_PERIOD <= BONUS_VISIBLE_FRAMES

    def eye_position(self) -> Cell:
        """Where the snake's eye is drawn, relative to its heading."""
        hx, hy = self.head
        return (hx + self._eye[0], hy + self._eye[1])

    def tick(self) -> None:
        """Advance the game by one frame."""
        heading = self.direction
        if heading is not Direction.NONE:
            dx, dy, ex, ey = _MOTION[heading]
            self._x += dx
            self._y += dy
            self._eye = (ex, ey)
        self.frame += 1

        if self.frame % HURDLE_PERIOD == 0:
            self._place_hurdle()
        if self.frame % FOOD_PERIOD == 0:
            self._place_all_food()
        if self.frame % BONUS_PERIOD == 0:
            self._place_bonus()

        self._ensure_length(max(self.snake_size, 3))
        hx, hy = self._cells[0]
        if heading is Direction.NONE:
            self._cells[1] = (hx - CELL, hy)
            self._cells[2] = (hx - 2 * CELL, hy)
        else:
            size = self.snake_size
            self._cells[1:size] = self._cells[: size - 1]

        head = (
            _cmod(_cmod(self._x, WRAP_WIDTH) + FIELD_WIDTH, WRAP_WIDTH),
            _cmod(_cmod(self._y, WRAP_HEIGHT) + FIELD_HEIGHT, WRAP_HEIGHT),
        )
        self._cells[0] = head

        if self.hurdle.hits(head):
            self.game_over = True
        if head in self._cells[1 : self.snake_size]:
            self.game_over = True

        self._eat_food(head)
        self._eat_bonus(head)

    def _ensure_length(self, size: int) -> None:
        if len(self._cells) < size:
            self._cells.extend([(0, 0)] * (size - len(self._cells)))

    def _grow(self, amount: int) -> None:
        self.snake_size += amount
        self._ensure_length(self.snake_size)

    def _eat_food(self, head: Cell) -> None:
        for index in range(len(self.food)):
            fx, fy = self.food[index]
            if _col(head[0]) == _col(fx) and _col(head[1]) == _col(fy):
                self._grow(FOOD_GROWTH)
                self.score += FOOD_POINTS
                others = self.food[:index] + self.food[index + 1 :]
                self.food[index] = self._pick_spot(
                    lambda: self.rng.randrange(FIELD_WIDTH), others
                )

    def _eat_bonus(self, head: Cell) -> None:
        bx, by = self.bonus
        near_x = abs(_col(head[0]) - _col(bx)) <= 1
        near_y = abs(_col(head[1]) - _col(by)) <= 1
        if near_x and near_y:
            self._grow(BONUS_GROWTH)
            self.score += BONUS_POINTS
            self.bonus = self._pick_spot(
                lambda: self.rng.randrange(RAND_MAX + 1) + BONUS_HIDDEN_X, self.food
            )

    def _place_hurdle(self) -> None:
        segments = self.snake
        while True:
            hx = _clamp_hurdle(self.rng.randrange(FIELD_WIDTH))
            hy = _clamp_hurdle(self.rng.randrange(FIELD_HEIGHT))
            candidate = Hurdle(hx, hy)
            if not any(candidate.covers(cell) for cell in segments):
                self.hurdle = candidate
                return

    def _place_all_food(self) -> None:
        placed: list[Cell] = []
        for index in range(FOOD_COUNT):
            if index == 0:
                x = self.rng.randrange(FIELD_WIDTH)
                y = self.rng.randrange(FIELD_HEIGHT)
                placed.append((x, y))
            else:
                placed.append(
                    self._pick_spot(lambda: self.rng.randrange(FIELD_WIDTH), placed)
                )
        self.food = placed

    def _place_bonus(self) -> None:
        self.bonus = self._pick_spot(
            lambda: self.rng.randrange(FIELD_WIDTH), self.food
        )

    def _pick_spot(self, draw_x: Callable[[], int], others: list[Cell]) -> Cell:
        """Pick a spot in its own column, off the others' rows and diagonals and off the wall."""
        while True:
            x = draw_x()
            if all(_col(x) != _col(ox) for ox, _ in others):
                break
        while True:
            y = self.rng.randrange(FIELD_HEIGHT)
            spot = (x, y)
            if not any(_clashes(spot, other) for other in others) and not self.hurdle.covers(spot):
                return spot