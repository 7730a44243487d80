import math
import random

import pytest

from pysnake.geometry import (
    circle_vertices,
    deg2rad,
    rand_in_range,
    round_rect_border,
    round_rect_strip,
    square_triangles,
    torus_strip,
)


def test_deg2rad_known_angles():
    assert deg2rad(180) == pytest.approx(math.pi)
    assert deg2rad(0) == 0
    assert deg2rad(-360) == pytest.approx(-2 * math.pi)


def test_rand_in_range_bounds():
    rng = random.Random(7)
    values = {rand_in_range(10, 20, rng) for _ in range(2000)}
    assert min(values) >= 10
    assert max(values) < 20
    assert len(values) == 10


def test_rand_in_range_is_reproducible():
    a = [rand_in_range(0, 640, random.Random(42)) for _ in range(5)]
    b = [rand_in_range(0, 640, random.Random(42)) for _ in range(5)]
    assert a == b


def test_rand_in_range_empty_raises():
    with pytest.raises(ValueError):
        rand_in_range(5, 5, random.Random(1))


def test_square_triangles_cover_square():
    tris = square_triangles(100, 200, 10)
    assert len(tris) == 2
    points = {p for tri in tris for p in tri}
    xs = {p[0] for p in points}
    ys = {p[1] for p in points}
    assert min(xs) == 100 and min(ys) == 200
    assert max(xs) - min(xs) == max(ys) - min(ys)
    assert len(points) == 4
    # both triangles share the diagonal
    assert tris[0][0] == tris[1][0] and tris[0][2] == tris[1][1]


def test_circle_vertices_lie_on_circle():
    verts = circle_vertices(50.0, 60.0, 5.0)
    assert verts[0] == (50.0, 60.0)
    assert len(verts) == 723
    for px, py in verts[1:]:
        assert math.hypot(px - 50.0, py - 60.0) == pytest.approx(5.0)
    assert verts[1] == pytest.approx((55.0, 60.0))


def test_torus_strip_clamps_samples():
    points = torus_strip(0, 0, 0, 90, 10, 5, 1)
    assert len(points) == 2 * (3 + 1)


def test_torus_strip_radii_and_endpoints():
    points = torus_strip(3, 4, 0, 90, 10, 5, 8)
    inner = points[0::2]
    outer = points[1::2]
    for px, py in inner:
        assert math.hypot(px - 3, py - 4) == pytest.approx(10)
    for px, py in outer:
        assert math.hypot(px - 3, py - 4) == pytest.approx(15)
    assert inner[0] == pytest.approx((13, 4))
    assert inner[-1] == pytest.approx((3, 14))


def test_round_rect_strip_within_bounds():
    strip = round_rect_strip(10.0, 20.0, 100.0, 50.0, 8.0)
    assert len(strip) == 70
    xs = [p[0] for p in strip]
    ys = [p[1] for p in strip]
    assert min(xs) == pytest.approx(10.0)
    assert max(xs) == pytest.approx(110.0)
    assert max(ys) <= 70.0 + 1e-9
    assert min(ys) >= 20.0 - 1e-9


def test_round_rect_strip_default_radius_matches_explicit():
    default = round_rect_strip(0.0, 0.0, 100.0, 50.0)
    explicit = round_rect_strip(0.0, 0.0, 100.0, 50.0, 5.0)
    assert default == pytest.approx(explicit)


def test_round_rect_border_is_closed_integer_outline():
    border = round_rect_border(10, 100, 80, 40, 6, 64)
    assert len(border) == 4 * 16 + 1
    assert border[0] == border[-1]
    for px, py in border:
        assert isinstance(px, int) and isinstance(py, int)
        assert 10 <= px <= 90
        assert 60 <= py <= 100


def test_round_rect_border_small_resolution_raises():
    with pytest.raises(ValueError):
        round_rect_border(0, 0, 10, 10, 2, 3)