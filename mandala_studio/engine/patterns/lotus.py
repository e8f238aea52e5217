"""Lotus — one petal per segment, inner petals and sacred stars with detail."""

from __future__ import annotations

import math

from mandala_studio.engine.context import GenerationContext, RingFrame
from mandala_studio.engine.motifs import lotus_petal
from mandala_studio.engine.registry import pattern
from mandala_studio.utils.geometry import create_star_polygon, lotus_petal_count

_INNER_PETAL_DETAIL = 0.5
_SACRED_STAR_DETAIL = 0.45
_MAX_SACRED_PETALS = 28


@pattern(name="lotus", description="Sacred flower patterns")
def lotus(ctx: GenerationContext, frame: RingFrame) -> None:
    s = ctx.settings
    petal_size = 15 + s.ornament_complexity * 10

    for _, angle in ctx.segment_angles(frame):
        ctx.paths.append(
            lotus_petal(
                ctx.cx, ctx.cy, frame.radius, angle,
                petal_size, s.petal_curvature, s.rotation_offset,
            )
        )
        if s.detail_density > _INNER_PETAL_DETAIL and frame.ring % 2 == 0:
            ctx.paths.append(
                lotus_petal(
                    ctx.cx, ctx.cy, frame.radius * 0.85, angle + ctx.angle_step / 2,
                    petal_size * 0.7, s.petal_curvature, s.rotation_offset,
                )
            )

    if s.detail_density > _SACRED_STAR_DETAIL:
        sacred = min(lotus_petal_count(min(frame.ring, 6)), _MAX_SACRED_PETALS)
        outer = frame.radius * 0.82
        inner = outer * (0.55 + s.ornament_complexity * 0.25)
        ctx.paths.append(
            create_star_polygon(
                ctx.cx, ctx.cy, outer, inner, max(4, math.floor(sacred / 2)),
                s.rotation_offset + frame.angle_offset,
            )
        )
