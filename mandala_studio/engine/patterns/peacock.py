"""Peacock — feather fans per segment, diyas and elephants as accents."""

from __future__ import annotations

from mandala_studio.engine.context import GenerationContext, RingFrame
from mandala_studio.engine.motifs import diya, elephant, peacock_motif
from mandala_studio.engine.registry import pattern

_DIYA_DETAIL = 0.55
_ELEPHANT_COMPLEXITY = 0.7


@pattern(name="peacock", description="Feather & eye motifs")
def peacock(ctx: GenerationContext, frame: RingFrame) -> None:
    s = ctx.settings
    outermost = frame.ring == s.rings

    for segment, angle in ctx.segment_angles(frame):
        a = angle + s.rotation_offset
        ctx.paths.extend(
            peacock_motif(ctx.cx, ctx.cy, frame.radius, a, s.ornament_complexity)
        )
        if s.detail_density > _DIYA_DETAIL and frame.ring % 2 == 0:
            ctx.paths.extend(diya(ctx.cx, ctx.cy, frame.radius * 0.6, a + ctx.angle_step / 2))
        if outermost and s.ornament_complexity > _ELEPHANT_COMPLEXITY and segment % 2 == 0:
            ctx.paths.extend(elephant(ctx.cx, ctx.cy, frame.radius * 1.1, a + ctx.angle_step / 2))
