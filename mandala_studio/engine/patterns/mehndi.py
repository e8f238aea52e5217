"""Mehndi — henna vines, a dotted border per ring, and ornaments with detail."""

from __future__ import annotations

from mandala_studio.engine.context import GenerationContext, RingFrame
from mandala_studio.engine.motifs import (
    cypress_tree,
    kalash,
    mehndi_border,
    mehndi_curve,
    om_symbol,
)
from mandala_studio.engine.registry import pattern

_ORNAMENT_DETAIL = 0.6
_OM_COMPLEXITY = 0.8


@pattern(name="mehndi", variable_stroke=True, description="Henna-style designs")
def mehndi(ctx: GenerationContext, frame: RingFrame) -> None:
    s = ctx.settings
    ornament = cypress_tree if frame.ring % 2 == 1 else kalash

    for _, angle in ctx.segment_angles(frame):
        a = angle + s.rotation_offset
        ctx.paths.append(
            mehndi_curve(ctx.cx, ctx.cy, frame.radius, a, s.petal_curvature, s.detail_density)
        )
        if s.detail_density > _ORNAMENT_DETAIL:
            ctx.paths.extend(ornament(ctx.cx, ctx.cy, frame.radius * 0.7, a + ctx.angle_step / 2))

    ctx.paths.extend(
        mehndi_border(
            ctx.cx, ctx.cy, frame.radius * 0.92, s.segments,
            s.detail_density, s.line_weight, s.rotation_offset + frame.angle_offset,
        )
    )

    if frame.ring == 1 and s.ornament_complexity > _OM_COMPLEXITY:
        ctx.paths.extend(om_symbol(ctx.cx, ctx.cy, frame.radius * 0.5))
