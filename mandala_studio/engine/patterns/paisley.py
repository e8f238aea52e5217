"""Paisley — buta teardrops, mango leaves between them on even rings."""

from __future__ import annotations

from mandala_studio.engine.context import GenerationContext, RingFrame
from mandala_studio.engine.motifs import mango_leaf, paisley_teardrop
from mandala_studio.engine.registry import pattern

_LEAF_DETAIL = 0.5


@pattern(name="paisley", description="Persian teardrop")
def paisley(ctx: GenerationContext, frame: RingFrame) -> None:
    s = ctx.settings
    with_leaves = s.detail_density > _LEAF_DETAIL and frame.ring % 2 == 0

    for _, angle in ctx.segment_angles(frame):
        a = angle + s.rotation_offset
        ctx.paths.append(paisley_teardrop(ctx.cx, ctx.cy, frame.radius, a, s.petal_curvature))
        if with_leaves:
            ctx.paths.append(
                mango_leaf(
                    ctx.cx, ctx.cy, frame.radius * 0.8, a + ctx.angle_step / 2, s.petal_curvature
                )
            )
