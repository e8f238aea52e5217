"""Motif library — standalone shape builders.

Every builder takes a center, a radius, an angle and explicit intensity
parameters, and returns SVG path data (one string or a list of strings).
Builders never see a settings record, so each can be exercised on its own.
"""

from __future__ import annotations

import math

from mandala_studio.utils.geometry import (
    GOLDEN_RATIO,
    Point,
    circle_path,
    fmt,
    polar_to_cartesian,
    pt,
    smooth_curve,
)

# Above this detail density rangoli stars carry beads on their edges.
_RANGOLI_BEAD_DETAIL = 0.6
# Above this detail density ribbons carry a bead at mid radius.
_RIBBON_BEAD_DETAIL = 0.35
# Above this complexity peacock feathers end in an eye.
_PEACOCK_EYE_COMPLEXITY = 0.5
_PEACOCK_SPREAD_DEG = 60


def lotus_petal(
    cx: float,
    cy: float,
    radius: float,
    angle: float,
    size: float,
    curvature: float,
    rotation: float = 0.0,
) -> str:
    """Closed teardrop petal from the golden-section point to ``radius``.

    ``curvature * size`` is the angular half-width (degrees) of the outer
    control points; the inner control points sit at half that width.
    """
    a = angle + rotation
    golden_base = radius / GOLDEN_RATIO
    base = polar_to_cartesian(cx, cy, golden_base, a)
    tip = polar_to_cartesian(cx, cy, radius, a)

    curve = curvature * size
    control_r = golden_base + (radius - golden_base) * 0.7
    left_ctl = polar_to_cartesian(cx, cy, control_r, a - curve)
    right_ctl = polar_to_cartesian(cx, cy, control_r, a + curve)
    left_mid = polar_to_cartesian(cx, cy, control_r * 0.85, a - curve * 0.5)
    right_mid = polar_to_cartesian(cx, cy, control_r * 0.85, a + curve * 0.5)

    return (
        f"M {pt(base)} C {pt(left_mid)} {pt(left_ctl)} {pt(tip)} "
        f"C {pt(right_ctl)} {pt(right_mid)} {pt(base)} Z"
    )


def rangoli_shape(
    cx: float,
    cy: float,
    radius: float,
    angle: float,
    points: int,
    complexity: float,
    detail: float,
    line_weight: float,
    rotation: float = 0.0,
) -> str:
    """Zig-zag star outline, optionally beaded at each edge midpoint.

    Beads are extra sub-paths inside the same path string.
    """
    if points <= 0:
        return ""
    step = 360 / points
    a = angle + rotation
    inner_ratio = 0.5 + complexity * 0.3

    parts: list[str] = []
    for i in range(points + 1):
        r = radius if i % 2 == 0 else radius * inner_ratio
        cmd = "M" if i == 0 else "L"
        parts.append(f"{cmd} {pt(polar_to_cartesian(cx, cy, r, a + i * step))}")

    if detail > _RANGOLI_BEAD_DETAIL:
        bead_r = line_weight * 1.5
        for i in range(points):
            mid = polar_to_cartesian(cx, cy, radius * 0.85, a + i * step + step / 2)
            parts.append(circle_path(mid.x, mid.y, bead_r))

    return " ".join(parts)


def ribbon_segment(
    cx: float,
    cy: float,
    outer_radius: float,
    start_angle: float,
    end_angle: float,
    detail: float,
    complexity: float,
    line_weight: float,
    rotation: float = 0.0,
) -> list[str]:
    """Band between a bowed-out outer arc and a bowed-in inner arc."""
    start = start_angle + rotation
    end = end_angle + rotation
    mid_angle = (start + end) / 2
    inner_radius = outer_radius * (0.72 + detail * 0.18)
    accent_radius = (outer_radius + inner_radius) / 2

    outer_start = polar_to_cartesian(cx, cy, outer_radius, start)
    outer_end = polar_to_cartesian(cx, cy, outer_radius, end)
    outer_mid = polar_to_cartesian(cx, cy, outer_radius * (1.02 + complexity * 0.05), mid_angle)
    inner_end = polar_to_cartesian(cx, cy, inner_radius, end)
    inner_start = polar_to_cartesian(cx, cy, inner_radius, start)
    inner_mid = polar_to_cartesian(cx, cy, inner_radius * (0.98 - complexity * 0.05), mid_angle)

    paths = [
        f"M {pt(outer_start)} Q {pt(outer_mid)} {pt(outer_end)} L {pt(inner_end)} "
        f"Q {pt(inner_mid)} {pt(inner_start)} Z"
    ]

    if detail > _RIBBON_BEAD_DETAIL:
        bead = polar_to_cartesian(cx, cy, accent_radius, mid_angle)
        paths.append(circle_path(bead.x, bead.y, line_weight * (0.8 + detail * 0.6)))

    return paths


def ring_filler_dots(
    cx: float,
    cy: float,
    radius: float,
    count: int,
    dot_radius: float,
    rotation: float = 0.0,
) -> list[str]:
    if count <= 0 or radius <= 0:
        return []
    dots = []
    for i in range(count):
        p = polar_to_cartesian(cx, cy, radius, i * 360 / count + rotation)
        dots.append(circle_path(p.x, p.y, dot_radius))
    return dots


def mehndi_border(
    cx: float,
    cy: float,
    radius: float,
    segments: int,
    detail: float,
    line_weight: float,
    rotation: float = 0.0,
) -> list[str]:
    """Ring of small henna dots; count = floor(segments * detail)."""
    count = math.floor(segments * detail)
    return ring_filler_dots(cx, cy, radius, count, line_weight * 0.8, rotation)


def mehndi_curve(
    cx: float,
    cy: float,
    radius: float,
    angle: float,
    curvature: float,
    detail: float,
) -> str:
    """S-shaped vine running outward, more knots with higher detail."""
    # A curve needs at least two knots, whatever the detail.
    n = max(2, 4 + math.floor(detail * 4 + 0.5))
    pts: list[Point] = []
    for i in range(n):
        t = i / (n - 1)
        sway = math.sin(t * math.pi * 2) * 12 * curvature
        pts.append(polar_to_cartesian(cx, cy, radius * (0.35 + 0.65 * t), angle + sway))
    return smooth_curve(pts)


def paisley_teardrop(
    cx: float,
    cy: float,
    radius: float,
    angle: float,
    curvature: float,
) -> str:
    """Buta teardrop with a tip that curls sideways by ``curvature``, plus an eye."""
    base = polar_to_cartesian(cx, cy, radius * 0.45, angle)
    c1 = polar_to_cartesian(cx, cy, radius * 0.5, angle - 25)
    c2 = polar_to_cartesian(cx, cy, radius * 0.95, angle - 14)
    tip = polar_to_cartesian(cx, cy, radius, angle + 10 * curvature)
    c3 = polar_to_cartesian(cx, cy, radius * 0.9, angle + 8 + 10 * curvature)
    c4 = polar_to_cartesian(cx, cy, radius * 0.55, angle + 20)
    eye = polar_to_cartesian(cx, cy, radius * 0.62, angle - 2)

    return (
        f"M {pt(base)} C {pt(c1)} {pt(c2)} {pt(tip)} C {pt(c3)} {pt(c4)} {pt(base)} Z "
        + circle_path(eye.x, eye.y, radius * 0.04)
    )


def mango_leaf(
    cx: float,
    cy: float,
    radius: float,
    angle: float,
    curvature: float = 0.5,
) -> str:
    tip = polar_to_cartesian(cx, cy, radius, angle)
    base = polar_to_cartesian(cx, cy, radius * 0.3, angle)
    left = polar_to_cartesian(cx, cy, radius * 0.7, angle - 20 * curvature)
    right = polar_to_cartesian(cx, cy, radius * 0.7, angle + 20 * curvature)
    return (
        f"M {pt(base)} C {pt(left)} {pt(left)} {pt(tip)} "
        f"C {pt(right)} {pt(right)} {pt(base)} Z"
    )


def peacock_motif(
    cx: float,
    cy: float,
    radius: float,
    angle: float,
    complexity: float = 0.5,
) -> list[str]:
    """Stem plus a 60° fan of feathers, eyes at the tips when complex enough."""
    base = polar_to_cartesian(cx, cy, radius * 0.3, angle)
    head = polar_to_cartesian(cx, cy, radius * 0.5, angle)
    paths = [f"M {pt(base)} L {pt(head)}"]

    count = math.floor(5 + complexity * 10)
    fan_step = _PEACOCK_SPREAD_DEG / (count - 1) if count > 1 else 0.0
    eye_r = radius * 0.05

    for i in range(count):
        a = angle - _PEACOCK_SPREAD_DEG / 2 + i * fan_step
        tip = polar_to_cartesian(cx, cy, radius, a)
        root = polar_to_cartesian(cx, cy, radius * 0.4, a)
        paths.append(f"M {pt(root)} Q {pt(head)} {pt(tip)}")

        if complexity > _PEACOCK_EYE_COMPLEXITY:
            eye = polar_to_cartesian(cx, cy, radius * 0.9, a)
            paths.append(circle_path(eye.x, eye.y, eye_r))

    return paths


def cypress_tree(
    cx: float,
    cy: float,
    radius: float,
    angle: float,
    height: float = 1.0,
) -> list[str]:
    base = polar_to_cartesian(cx, cy, radius * 0.5, angle)
    tip = polar_to_cartesian(cx, cy, radius * (0.5 + height * 0.5), angle)
    # (radial fraction, angular half-width) of the three tiers
    tiers = [(0.6, 10), (0.7, 8), (0.8, 5)]
    left = [polar_to_cartesian(cx, cy, radius * f, angle - w) for f, w in tiers]
    right = [polar_to_cartesian(cx, cy, radius * f, angle + w) for f, w in reversed(tiers)]

    outline = [f"M {pt(base)}"]
    outline += [f"L {pt(p)}" for p in left]
    outline.append(f"L {pt(tip)}")
    outline += [f"L {pt(p)}" for p in right]
    return [" ".join(outline) + " Z"]


def kalash(cx: float, cy: float, radius: float, angle: float) -> list[str]:
    """Pot outline with five mango-leaf strokes fanning from the rim."""
    base = polar_to_cartesian(cx, cy, radius * 0.3, angle)
    left_belly = polar_to_cartesian(cx, cy, radius * 0.6, angle - 15)
    right_belly = polar_to_cartesian(cx, cy, radius * 0.6, angle + 15)
    left_neck = polar_to_cartesian(cx, cy, radius * 0.8, angle - 8)
    right_neck = polar_to_cartesian(cx, cy, radius * 0.8, angle + 8)
    left_rim = polar_to_cartesian(cx, cy, radius, angle - 12)
    right_rim = polar_to_cartesian(cx, cy, radius, angle + 12)

    paths = [
        f"M {pt(base)} Q {pt(left_belly)} {pt(left_neck)} L {pt(left_rim)} "
        f"L {pt(right_rim)} L {pt(right_neck)} Q {pt(right_belly)} {pt(base)} Z"
    ]
    for i in range(5):
        a = angle - 20 + i * 10
        leaf_base = polar_to_cartesian(cx, cy, radius * 0.95, a)
        leaf_tip = polar_to_cartesian(cx, cy, radius * 1.2, a)
        paths.append(f"M {pt(leaf_base)} L {pt(leaf_tip)}")
    return paths


def diya(cx: float, cy: float, radius: float, angle: float) -> list[str]:
    """Oil lamp: open bowl curve plus a closed flame."""
    base = polar_to_cartesian(cx, cy, radius * 0.5, angle)
    left_edge = polar_to_cartesian(cx, cy, radius * 0.7, angle - 25)
    right_edge = polar_to_cartesian(cx, cy, radius * 0.7, angle + 25)
    left_tip = polar_to_cartesian(cx, cy, radius, angle - 30)
    right_tip = polar_to_cartesian(cx, cy, radius, angle + 30)

    flame_base = polar_to_cartesian(cx, cy, radius * 0.6, angle)
    flame_tip = polar_to_cartesian(cx, cy, radius * 1.3, angle)
    flame_left = polar_to_cartesian(cx, cy, radius * 0.95, angle - 8)
    flame_right = polar_to_cartesian(cx, cy, radius * 0.95, angle + 8)

    return [
        f"M {pt(left_tip)} Q {pt(left_edge)} {pt(base)} Q {pt(right_edge)} {pt(right_tip)}",
        f"M {pt(flame_base)} Q {pt(flame_left)} {pt(flame_tip)} "
        f"Q {pt(flame_right)} {pt(flame_base)} Z",
    ]


def om_symbol(cx: float, cy: float, size: float) -> list[str]:
    """Stylised om glyph on a 100-unit design grid scaled to ``size``."""
    s = size / 100
    top = polar_to_cartesian(cx, cy, 40 * s, 0)
    bottom = polar_to_cartesian(cx, cy, 40 * s, 180)
    left_curve = polar_to_cartesian(cx, cy, 50 * s, 210)
    right_curve = polar_to_cartesian(cx, cy, 50 * s, 330)

    body = (
        f"M {fmt(cx - 30 * s)},{fmt(cy)} Q {pt(left_curve)} {pt(bottom)} "
        f"Q {fmt(cx)},{fmt(cy + 30 * s)} {fmt(cx + 30 * s)},{fmt(cy)} "
        f"Q {pt(right_curve)} {pt(top)}"
    )
    return [body, circle_path(cx, cy - 50 * s, 5 * s)]


def elephant(cx: float, cy: float, radius: float, angle: float) -> list[str]:
    """Simplified side-profile elephant: back-head-trunk sweep and an ear."""
    body = polar_to_cartesian(cx, cy, radius * 0.5, angle)
    head = polar_to_cartesian(cx, cy, radius * 0.7, angle - 30)
    trunk = polar_to_cartesian(cx, cy, radius, angle - 45)
    back = polar_to_cartesian(cx, cy, radius * 0.6, angle + 30)
    ear = polar_to_cartesian(cx, cy, radius * 0.8, angle - 50)
    # Trunk and ear bends are fixed offsets in output units.
    bend = Point(head.x + 5, head.y + 5)
    chin = Point(head.x, head.y + 10)

    return [
        f"M {pt(back)} Q {pt(body)} {pt(head)} Q {pt(bend)} {pt(trunk)}",
        f"M {pt(head)} Q {pt(ear)} {pt(chin)}",
    ]


def interlaced_triangles(cx: float, cy: float, size: float, count: int = 9) -> list[str]:
    """Yantra of nested upward and downward triangles."""
    paths: list[str] = []
    upward = math.ceil(count / 2)
    downward = count // 2

    for i in range(upward):
        r = size * (1 - i * 0.15)
        verts = [polar_to_cartesian(cx, cy, r, a) for a in (90, 210, 330)]
        paths.append(f"M {pt(verts[0])} L {pt(verts[1])} L {pt(verts[2])} Z")

    for i in range(downward):
        r = size * (0.9 - i * 0.15)
        verts = [polar_to_cartesian(cx, cy, r, a) for a in (270, 30, 150)]
        paths.append(f"M {pt(verts[0])} L {pt(verts[1])} L {pt(verts[2])} Z")

    return paths
