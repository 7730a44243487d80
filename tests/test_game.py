import copy
import random

import pytest

from pysnake.game import (
    BONUS_HIDDEN_X,
    BONUS_POINTS,
    BONUS_VISIBLE_FRAMES,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    FOOD_COUNT,
    FOOD_POINTS,
    HURDLE_ARM,
    START_SIZE,
    Direction,
    HighScoreFile,
    Hurdle,
    SnakeGame,
)

FAR_HURDLE = Hurdle(500, 150)
FAR_FOOD = [(600, 100), (620, 140), (580, 180), (560, 220)]


def _columns(cells):
    return [x // 10 for x, _ in cells]


def _prepared(seed=3):
    game = SnakeGame(random.Random(seed))
    game.hurdle = FAR_HURDLE
    game.bonus = (1000, 1000)
    return game


def _next_head(game):
    preview = copy.deepcopy(game)
    preview.tick()
    return preview.head


def test_initial_state():
    game = SnakeGame(random.Random(1))
    assert game.score == 0
    assert game.snake_size == START_SIZE
    assert game.direction is Direction.NONE
    assert game.game_over is False
    assert game.bonus_visible() is True


def test_same_seed_same_layout():
    a = SnakeGame(random.Random(42))
    b = SnakeGame(random.Random(42))
    assert a.food == b.food
    assert a.hurdle == b.hurdle
    assert a.bonus == b.bonus


@pytest.mark.parametrize("seed", range(10))
def test_food_layout_invariants(seed):
    game = SnakeGame(random.Random(seed))
    assert len(game.food) == FOOD_COUNT
    assert len(set(_columns(game.food))) == FOOD_COUNT
    for x, y in game.food:
        assert 0 <= x < FIELD_WIDTH
        assert 0 <= y < FIELD_HEIGHT


@pytest.mark.parametrize("seed", range(10))
def test_hurdle_shape(seed):
    hurdle = SnakeGame(random.Random(seed)).hurdle
    assert 100 < hurdle.x < 550
    assert 100 < hurdle.y < 550
    assert hurdle.elbow[0] == hurdle.top[0]
    assert hurdle.top[1] - hurdle.elbow[1] == HURDLE_ARM
    assert hurdle.end[1] == hurdle.elbow[1]
    assert hurdle.end[0] - hurdle.elbow[0] == HURDLE_ARM
    assert hurdle.segments == [(hurdle.top, hurdle.elbow), (hurdle.elbow, hurdle.end)]


def test_steer_refuses_reversal():
    game = SnakeGame(random.Random(0))
    game.steer(Direction.LEFT)
    assert game.direction is Direction.LEFT
    game.steer(Direction.RIGHT)
    assert game.direction is Direction.LEFT
    game.steer(Direction.UP)
    assert game.direction is Direction.UP
    game.steer(Direction.DOWN)
    assert game.direction is Direction.UP


def test_moving_right_advances_one_cell():
    game = _prepared()
    game.steer(Direction.RIGHT)
    game.tick()
    first = game.head
    game.tick()
    second = game.head
    assert second[0] - first[0] == 10
    assert second[1] == first[1]
    assert game.snake[1] == first


def test_eye_follows_heading():
    game = _prepared()
    game.steer(Direction.UP)
    game.tick()
    hx, hy = game.head
    assert game.eye_position() == (hx + 5, hy + 15)


def test_eating_food_grows_and_scores():
    game = _prepared()
    game.steer(Direction.RIGHT)
    target = _next_head(game)
    game.food = [target, *FAR_FOOD]
    game.tick()
    assert game.score == FOOD_POINTS
    assert game.snake_size == START_SIZE + 1
    new_x, new_y = game.food[0]
    assert (new_x // 10, new_y // 10) != (target[0] // 10, target[1] // 10)
    assert len(set(_columns(game.food))) == FOOD_COUNT


def test_eating_bonus_grows_twice_and_hides_it():
    game = _prepared()
    game.food = list(FAR_FOOD) + [(540, 260)]
    game.steer(Direction.RIGHT)
    target = _next_head(game)
    game.bonus = (target[0] + 10, target[1])
    game.tick()
    assert game.score == BONUS_POINTS
    assert game.snake_size == START_SIZE + 2
    assert game.bonus[0] >= BONUS_HIDDEN_X


def test_running_into_hurdle_ends_game():
    game = _prepared()
    game.steer(Direction.RIGHT)
    target = _next_head(game)
    game.hurdle = Hurdle(target[0], target[1] + 50)
    game.tick()
    assert game.game_over is True


def test_far_hurdle_keeps_game_running():
    game = _prepared()
    game.food = list(FAR_FOOD) + [(540, 260)]
    game.steer(Direction.RIGHT)
    for _ in range(3):
        game.tick()
    assert game.game_over is False


def test_biting_own_tail_ends_game():
    game = _prepared()
    game.food = list(FAR_FOOD) + [(540, 260)]
    game.steer(Direction.RIGHT)
    game.tick()
    start = game.head
    game.snake_size = 5
    for heading in (Direction.RIGHT, Direction.DOWN, Direction.LEFT):
        game.steer(heading)
        game.tick()
    assert game.game_over is False
    game.steer(Direction.UP)
    game.tick()
    assert game.head == start
    assert game.game_over is True


def test_bonus_visibility_window():
    game = SnakeGame(random.Random(5))
    for _ in range(BONUS_VISIBLE_FRAMES):
        game.tick()
    assert game.bonus_visible() is True
    game.tick()
    assert game.bonus_visible() is False


def test_high_score_missing_file_reads_zero(tmp_path):
    assert HighScoreFile(tmp_path / "best.txt").read() == 0


def test_high_score_update_round_trip(tmp_path):
    store = HighScoreFile(tmp_path / "best.txt")
    assert store.update(15) == 0
    assert store.read() == 15
    assert store.update(10) == 15
    assert store.read() == 15
    assert store.update(20) == 15
    assert store.read() == 20


def test_high_score_reads_leading_number(tmp_path):
    path = tmp_path / "best.txt"
    path.write_text("  42\n")
    assert HighScoreFile(path).read() == 42


def test_high_score_garbage_reads_zero(tmp_path):
    path = tmp_path / "best.txt"
    path.write_text("not a number")
    assert HighScoreFile(path).read() == 0