"""Leaf-node geometry helpers. No engine imports.

Angles are in degrees, measured clockwise from "up" (12 o'clock). Every
helper that turns an angle into a point goes through polar_to_cartesian so
that rotation_offset = 0 orients the first segment upward.
"""

from __future__ import annotations

import math
from typing import NamedTuple

GOLDEN_RATIO = 1.618033988749895

# Petal counts for successive lotus rings (Fibonacci tail).
_LOTUS_PETALS = [8, 13, 21, 34, 55, 89]

# Path data precision: 1/1000 of an output unit is well below one device pixel.
_DECIMALS = 3


class Point(NamedTuple):
    x: float
    y: float


def fmt(value: float) -> str:
    """Format a number for path data: 3 decimals, no trailing zeros, no -0."""
    text = f"{value:.{_DECIMALS}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def pt(p: Point) -> str:
    return f"{fmt(p.x)},{fmt(p.y)}"


def fibonacci(n: int) -> int:
    if n <= 2:
        return 1
    a, b = 1, 1
    for _ in range(3, n + 1):
        a, b = b, a + b
    return b


def golden_angle() -> float:
    """≈137.5°, the divergence angle of phyllotaxis."""
    return 360 / (GOLDEN_RATIO * GOLDEN_RATIO)


def golden_ratio(value: float) -> float:
    return value * GOLDEN_RATIO


def inverse_golden_ratio(value: float) -> float:
    return value / GOLDEN_RATIO


def lotus_petal_count(ring: int) -> int:
    """Petal count for a lotus ring (1-based), saturating at the last entry."""
    idx = min(ring - 1, len(_LOTUS_PETALS) - 1)
    if idx < 0:
        return _LOTUS_PETALS[0]
    return _LOTUS_PETALS[idx]


def sacred_proportions(base_size: float) -> dict[str, float]:
    """Concentric radii in golden proportion: φ⁻², φ⁻¹, 1."""
    return {
        "inner_circle": base_size / GOLDEN_RATIO / GOLDEN_RATIO,
        "middle_circle": base_size / GOLDEN_RATIO,
        "outer_circle": base_size,
    }


def symmetry_order(segments: int) -> int:
    """Middle divisor (≥2) of the segment count; the count itself if prime."""
    divisors = [i for i in range(2, segments + 1) if segments % i == 0]
    if not divisors:
        return segments
    return divisors[len(divisors) // 2]


def polar_to_cartesian(cx: float, cy: float, radius: float, angle: float) -> Point:
    rad = math.radians(angle - 90)
    return Point(cx + radius * math.cos(rad), cy + radius * math.sin(rad))


def rotate_point(point: Point, center: Point, angle_deg: float) -> Point:
    rad = math.radians(angle_deg)
    cos = math.cos(rad)
    sin = math.sin(rad)
    dx = point.x - center.x
    dy = point.y - center.y
    return Point(center.x + dx * cos - dy * sin, center.y + dx * sin + dy * cos)


def circle_path(cx: float, cy: float, r: float) -> str:
    """Closed circle as two half arcs, usable as a sub-path in a compound path."""
    return (
        f"M {fmt(cx)},{fmt(cy)} m {fmt(-r)},0 "
        f"a {fmt(r)},{fmt(r)} 0 1,0 {fmt(r * 2)},0 "
        f"a {fmt(r)},{fmt(r)} 0 1,0 {fmt(-r * 2)},0"
    )


def create_star_polygon(
    cx: float,
    cy: float,
    outer_radius: float,
    inner_radius: float,
    points: int,
    rotation: float = 0.0,
) -> str:
    """n-pointed star: 2n vertices alternating outer/inner radius, closed."""
    if points <= 0:
        return ""
    angle_step = 360 / points
    parts: list[str] = []
    for i in range(points * 2 + 1):
        angle = i * angle_step / 2 + rotation
        r = outer_radius if i % 2 == 0 else inner_radius
        cmd = "M" if i == 0 else "L"
        parts.append(f"{cmd} {pt(polar_to_cartesian(cx, cy, r, angle))}")
    return " ".join(parts) + " Z"


def fibonacci_spiral(cx: float, cy: float, scale: float, rotations: int) -> str:
    """Polyline through Fibonacci-radius points spaced by the golden angle.

    Uses plain trigonometric angles (not clock angles): the spiral has no
    preferred orientation.
    """
    parts: list[str] = []
    angle = 0.0
    step = golden_angle()
    for i in range(rotations):
        r = fibonacci(i + 1) * scale
        x = cx + r * math.cos(math.radians(angle))
        y = cy + r * math.sin(math.radians(angle))
        cmd = "M" if i == 0 else "L"
        parts.append(f"{cmd} {fmt(x)},{fmt(y)}")
        angle += step
    return " ".join(parts)


def smooth_curve(points: list[Point]) -> str:
    """Quadratic spline through the midpoints of consecutive points."""
    if len(points) < 2:
        return ""
    parts = [f"M {pt(points[0])}"]
    for i in range(1, len(points) - 1):
        mid = Point((points[i].x + points[i + 1].x) / 2, (points[i].y + points[i + 1].y) / 2)
        parts.append(f"Q {pt(points[i])} {pt(mid)}")
    parts.append(f"T {pt(points[-1])}")
    return " ".join(parts)
