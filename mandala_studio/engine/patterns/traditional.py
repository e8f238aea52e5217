"""Traditional — petal / rangoli star / ribbon round-robin by ring."""

from __future__ import annotations

import math

from mandala_studio.engine.context import GenerationContext, RingFrame
from mandala_studio.engine.motifs import lotus_petal, rangoli_shape, ribbon_segment
from mandala_studio.engine.registry import pattern
from mandala_studio.utils.geometry import create_star_polygon, polar_to_cartesian, pt

_PETAL_SIZE = 12
_RANGOLI_POINTS = 6
_FLOURISH_DETAIL = 0.55
_ACCENT_STAR_DETAIL = 0.45


@pattern(name="traditional", variable_stroke=True, description="Mixed Indian motifs")
def traditional(ctx: GenerationContext, frame: RingFrame) -> None:
    s = ctx.settings
    style = frame.ring % 3

    for _, angle in ctx.segment_angles(frame):
        if style == 0:
            ctx.paths.append(
                lotus_petal(
                    ctx.cx, ctx.cy, frame.radius, angle,
                    _PETAL_SIZE, s.petal_curvature, s.rotation_offset,
                )
            )
        elif style == 1:
            ctx.paths.append(
                rangoli_shape(
                    ctx.cx, ctx.cy, frame.radius, angle, _RANGOLI_POINTS,
                    s.ornament_complexity, s.detail_density, s.line_weight,
                    s.rotation_offset,
                )
            )
        else:
            end = angle + ctx.angle_step
            ctx.paths.extend(
                ribbon_segment(
                    ctx.cx, ctx.cy, frame.radius, angle, end,
                    s.detail_density, s.ornament_complexity, s.line_weight,
                    s.rotation_offset,
                )
            )
            if s.detail_density > _FLOURISH_DETAIL:
                ctx.paths.append(_flourish(ctx, frame, (angle + end) / 2))

    if style == 1 and s.detail_density > _ACCENT_STAR_DETAIL:
        points = max(5, math.floor(s.segments / 2))
        outer = frame.radius * (0.9 - 0.05 * min(frame.ring, 4))
        inner = outer * (0.6 + s.ornament_complexity * 0.25)
        ctx.paths.append(
            create_star_polygon(
                ctx.cx, ctx.cy, outer, inner, points,
                s.rotation_offset + frame.angle_offset,
            )
        )


def _flourish(ctx: GenerationContext, frame: RingFrame, angle: float) -> str:
    """Short radial tick inside the ribbon."""
    s = ctx.settings
    r = frame.radius * (0.65 + s.ornament_complexity * 0.1)
    a = angle + s.rotation_offset
    start = polar_to_cartesian(ctx.cx, ctx.cy, r, a)
    end = polar_to_cartesian(ctx.cx, ctx.cy, r + s.line_weight * (1.2 + s.detail_density * 0.8), a)
    return f"M {pt(start)} L {pt(end)}"
