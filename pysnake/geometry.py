"""Vertex generation for the shapes the game draws."""

from __future__ import annotations

import math
import random
from typing import Optional

Point = tuple[float, float]

CIRCLE_VERTEX_COUNT = 722
ROUNDING_POINT_COUNT = 16


def deg2rad(degree: float) -> float:
    """Convert an angle from degrees to radians."""
    return (degree / 180.0) * math.pi


def rand_in_range(rmin: int, rmax: int, rng: Optional[random.Random] = None) -> int:
    """Return a random integer in [rmin, rmax) using the given generator."""
    span = rmax - rmin
    if span == 0:
        raise ValueError("empty range: rmin and rmax are equal")
    source = rng if rng is not None else random
    return source.randrange(abs(span)) + rmin


def square_triangles(sx: int, sy: int, size: int) -> list[tuple[Point, Point, Point]]:
    """Return the two triangles that fill a square with its lower-left corner at (sx, sy)."""
    far_x = sx + size - 1
    far_y = sy + size - 1
    return [
        ((sx, sy), (far_x, sy), (far_x, far_y)),
        ((sx, sy), (far_x, far_y), (sx, far_y)),
    ]


def circle_vertices(sx: float, sy: float, radius: float) -> list[Point]:
    """Return a triangle fan for a filled circle: the centre, then the rim."""
    step = math.pi / 360.0
    rim = [
        (sx + radius * math.cos(i * step), sy + radius * math.sin(i * step))
        for i in range(CIRCLE_VERTEX_COUNT)
    ]
    return [(sx, sy), *rim]


def torus_strip(
    x: float,
    y: float,
    angle: float,
    length: float,
    radius: float,
    width: float,
    samples: int,
) -> list[Point]:
    """Return a quad strip for an arc of a ring; angles are in degrees."""
    start = deg2rad(angle)
    sweep = deg2rad(length)
    samples = max(samples, 3)
    outer = radius + width
    points: list[Point] = []
    for i in range(samples + 1):
        a = start + (i / samples) * sweep
        cos_a, sin_a = math.cos(a), math.sin(a)
        points.append((x + radius * cos_a, y + radius * sin_a))
        points.append((x + outer * cos_a, y + outer * sin_a))
    return points


def _corners(
    left: float,
    bottom: float,
    width: float,
    height: float,
    radius: float,
    segments: int,
    step: float,
) -> tuple[list[Point], list[Point], list[Point], list[Point]]:
    """Corner arcs (top-left, top-right, bottom-right, bottom-left) of a rounded rectangle."""
    cx = left + radius
    cy = bottom + radius
    inner_w = width - 2.0 * radius
    inner_h = height - 2.0 * radius
    top_left, top_right, bottom_right, bottom_left = [], [], [], []
    for i in range(segments):
        a = -i * step
        dx = math.cos(a) * radius
        dy = math.sin(a) * radius
        top_left.append((cx - dx, inner_h + cy - dy))
        top_right.append((inner_w + cx + dx, inner_h + cy - dy))
        bottom_right.append((inner_w + cx + dx, cy + dy))
        bottom_left.append((cx - dx, cy + dy))
    return top_left, top_right, bottom_right, bottom_left


def round_rect_strip(
    x: float, y: float, width: float, height: float, radius: float = 0.0
) -> list[Point]:
    """Return a triangle strip filling a rounded rectangle with lower-left corner (x, y).

    A radius of zero means ten percent of the shorter side.
    """
    if radius == 0.0:
        radius = min(width, height) * 0.10
    step = (2.0 * math.pi) / (ROUNDING_POINT_COUNT * 4)
    top_left, top_right, bottom_right, bottom_left = _corners(
        x, y, width, height, radius, ROUNDING_POINT_COUNT, step
    )
    strip: list[Point] = []
    for tl, tr in zip(reversed(top_left), reversed(top_right)):
        strip.extend((tl, tr))
    strip.extend((top_right[0], top_right[0]))
    strip.extend((top_right[0], top_left[0], bottom_right[0], bottom_left[0]))
    for br, bl in zip(bottom_right, bottom_left):
        strip.extend((br, bl))
    return strip


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def round_rect_border(
    x: int, y: int, width: int, height: int, radius: int, resolution: int
) -> list[tuple[int, int]]:
    """Return the closed outline of a rounded rectangle whose top-left corner is (x, y).

    Each corner gets resolution // 4 points; coordinates are rounded to integers.
    """
    segments = int(resolution / 4)
    if segments <= 0:
        raise ValueError("resolution must be at least 4")
    step = (2.0 * math.pi) / resolution
    arcs = _corners(x, y - height, width, height, radius, segments, step)
    top_left, top_right, bottom_right, bottom_left = (
        [(_round_half_away(px), _round_half_away(py)) for px, py in arc] for arc in arcs
    )
    return [
        *reversed(top_left),
        *bottom_left,
        *reversed(bottom_right),
        *top_right,
        top_left[-1],
    ]