"""Rangoli — beaded star per segment, yantra at the center ring with detail."""

from __future__ import annotations

import math

from mandala_studio.engine.context import GenerationContext, RingFrame
from mandala_studio.engine.motifs import interlaced_triangles, rangoli_shape
from mandala_studio.engine.registry import pattern

_YANTRA_DETAIL = 0.6


@pattern(name="rangoli", description="Floor art patterns")
def rangoli(ctx: GenerationContext, frame: RingFrame) -> None:
    s = ctx.settings
    points = 5 + math.floor(s.ornament_complexity * 3)

    for _, angle in ctx.segment_angles(frame):
        ctx.paths.append(
            rangoli_shape(
                ctx.cx, ctx.cy, frame.radius, angle, points,
                s.ornament_complexity, s.detail_density, s.line_weight,
                s.rotation_offset,
            )
        )

    if frame.ring == 1 and s.detail_density > _YANTRA_DETAIL:
        ctx.paths.extend(interlaced_triangles(ctx.cx, ctx.cy, frame.radius * 0.6))
