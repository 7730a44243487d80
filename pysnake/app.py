"""Drawing of the game on a pygame surface, and the window that runs it."""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import Optional, Sequence, Union

import pygame

from pysnake.colors import ColorLike, ColorName, rgb255
from pysnake.game import (
    DEFAULT_HIGH_SCORE_PATH,
    Direction,
    HighScoreFile,
    SnakeGame,
)
from pysnake.geometry import (
    circle_vertices,
    round_rect_strip,
    square_triangles,
)

WINDOW_WIDTH = 650
WINDOW_HEIGHT = 650
WINDOW_POSITION = (50, 50)
WINDOW_TITLE = "PF's Snake Game"
FPS = 5
FIRST_TICK_MS = 5.0 / FPS
TICK_MS = 750.0 / FPS
FONT_SIZE = 24
SNAKE_CELL = 10
EYE_RADIUS = 5
BONUS_RADIUS = 10
HURDLE_WIDTH = 10
BORDER_WIDTH = 50
DEFAULT_ROUND_RECT_COLOR = (156, 207, 255)
DEFAULT_DRAW_COLOR = (255, 255, 255)

ColorArg = Union[ColorLike, Sequence[int], None]

_KEY_DIRECTIONS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}


def _color(color: ColorArg, default: tuple[int, int, int] = DEFAULT_DRAW_COLOR) -> tuple[int, int, int]:
    if color is None:
        return default
    if isinstance(color, (tuple, list)):
        if len(color) not in (3, 4):
            raise ValueError(f"a colour needs three or four components: {color!r}")
        red, green, blue = (int(part) for part in color[:3])
        return (red, green, blue)
    return rgb255(color)


class Canvas:
    """A drawing area whose origin is the bottom-left corner, y growing upwards."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._font: Optional[pygame.font.Font] = None

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def to_screen(self, x: float, y: float) -> tuple[int, int]:
        """Convert canvas coordinates to surface pixel coordinates."""
        return (round(x), self.height - 1 - round(y))

    def _polygon(self, points, color: tuple[int, int, int]) -> None:
        pygame.draw.polygon(self.surface, color, [self.to_screen(px, py) for px, py in points])

    def draw_square(self, sx: int, sy: int, size: int, color: ColorArg) -> None:
        """Fill a square of the given size with its lower-left corner at (sx, sy)."""
        fill = _color(color)
        for triangle in square_triangles(sx, sy, size):
            self._polygon(triangle, fill)

    def draw_circle(self, sx: float, sy: float, radius: float, color: ColorArg) -> None:
        """Fill a circle centred at (sx, sy)."""
        rim = circle_vertices(sx, sy, radius)[1:]
        self._polygon(rim, _color(color))

    def draw_line(
        self, x1: int, y1: int, x2: int, y2: int, width: int = 3, color: ColorArg = None
    ) -> None:
        """Draw a straight line of the given width between two points."""
        pygame.draw.line(
            self.surface,
            _color(color),
            self.to_screen(x1, y1),
            self.to_screen(x2, y2),
            max(int(width), 1),
        )

    def draw_triangle(
        self, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int, color: ColorArg
    ) -> None:
        """Fill the triangle with the three given vertices."""
        self._polygon(((x1, y1), (x2, y2), (x3, y3)), _color(color))

    def draw_round_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: ColorArg = None,
        radius: float = 0.0,
    ) -> None:
        """Fill a rectangle with rounded corners; lower-left corner at (x, y)."""
        fill = _color(color, DEFAULT_ROUND_RECT_COLOR)
        strip = round_rect_strip(x, y, width, height, radius)
        for start in range(len(strip) - 2):
            self._polygon(strip[start : start + 3], fill)

    def draw_string(self, x: int, y: int, text: str, color: ColorArg = None) -> None:
        """Write text with its baseline starting at (x, y)."""
        font = self._get_font()
        image = font.render(text, False, _color(color))
        left, baseline = self.to_screen(x, y)
        self.surface.blit(image, (left, baseline - font.get_ascent()))

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
        return self._font


def render(
    game: SnakeGame, canvas: Canvas, high_score: Optional[HighScoreFile] = None
) -> Optional[int]:
    """Draw one frame of the game.

    While the game runs, the stored best score is read, replaced if the
    current score beats it, and the value read is shown and returned.
    On the game-over screen nothing is read and None is returned.
    """
    if game.game_over:
        _render_game_over(game, canvas)
        return None

    canvas.surface.fill(rgb255(ColorName.BLACK))

    for (x1, y1), (x2, y2) in game.hurdle.segments:
        canvas.draw_line(x1, y1, x2, y2, HURDLE_WIDTH, ColorName.YELLOW_GREEN)
    for fx, fy in game.food:
        canvas.draw_square(fx, fy, SNAKE_CELL, ColorName.CYAN)
    for sx, sy in game.snake:
        canvas.draw_square(sx, sy, SNAKE_CELL, ColorName.CYAN)
    if game.bonus_visible():
        bx, by = game.bonus
        canvas.draw_circle(bx, by, BONUS_RADIUS, ColorName.RED)

    canvas.draw_string(50, 620, "Snake", ColorName.MISTY_ROSE)
    canvas.draw_string(270, 620, "SCORE: ", ColorName.MISTY_ROSE)
    canvas.draw_string(310, 620, str(game.score), ColorName.MISTY_ROSE)
    ex, ey = game.eye_position()
    canvas.draw_circle(ex, ey, EYE_RADIUS, ColorName.RED)

    best = high_score.update(game.score) if high_score is not None else 0
    canvas.draw_string(450, 620, "Highest  SCORE: ", ColorName.MISTY_ROSE)
    canvas.draw_string(520, 620, str(best), ColorName.MISTY_ROSE)

    canvas.draw_line(0, 0, 650, 0, BORDER_WIDTH, ColorName.MISTY_ROSE)
    canvas.draw_line(650, 0, 650, 600, BORDER_WIDTH, ColorName.MISTY_ROSE)
    canvas.draw_line(0, 600, 650, 600, BORDER_WIDTH, ColorName.MISTY_ROSE)
    canvas.draw_line(0, 0, 0, 600, BORDER_WIDTH, ColorName.MISTY_ROSE)
    return best


def _render_game_over(game: SnakeGame, canvas: Canvas) -> None:
    black = rgb255(ColorName.BLACK)
    canvas._polygon(
        ((0, 0), (WINDOW_WIDTH, 0), (WINDOW_WIDTH, WINDOW_HEIGHT), (0, WINDOW_HEIGHT)),
        black,
    )
    canvas.draw_string(265, 390, "Game Over", ColorName.MISTY_ROSE)
    canvas.draw_string(260, 340, "Your Score is ", ColorName.DARK_CYAN)
    canvas.draw_string(310, 340, str(game.score), ColorName.DARK_CYAN)
    canvas.draw_string(250, 290, "(Press ESC key to exit)", ColorName.MISTY_ROSE)


def key_direction(key: int) -> Optional[Direction]:
    """Return the direction an arrow key stands for, or None for other keys."""
    return _KEY_DIRECTIONS.get(key)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and play until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="pysnake", description="Snake arcade game.")
    parser.add_argument(
        "--high-score-file",
        type=Path,
        default=Path(DEFAULT_HIGH_SCORE_PATH),
        help="file that keeps the best score",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random placement")
    args = parser.parse_args(argv)

    game = SnakeGame(random.Random(args.seed))
    high_score = HighScoreFile(args.high_score_file)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        canvas = Canvas(screen)
        clock = pygame.time.Clock()
        next_tick = pygame.time.get_ticks() + FIRST_TICK_MS
        dirty = True
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return 1
                    direction = key_direction(event.key)
                    if direction is not None:
                        game.steer(direction)
                    dirty = True
                elif event.type == pygame.VIDEOEXPOSE:
                    dirty = True

            now = pygame.time.get_ticks()
            while now >= next_tick:
                game.tick()
                next_tick += TICK_MS
                dirty = True

            if dirty:
                render(game, canvas, high_score)
                pygame.display.flip()
                dirty = False
            clock.tick(60)
    finally:
        pygame.quit()