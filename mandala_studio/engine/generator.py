"""Mandala generator — runs the ring handlers, adds fillers and the centerpiece."""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass

from mandala_studio.engine.context import GenerationContext
from mandala_studio.engine.motifs import lotus_petal, ring_filler_dots
from mandala_studio.engine.registry import PatternRegistry, PatternSpec, get_registry, load_builtin_patterns
from mandala_studio.models.settings import MandalaSettings
from mandala_studio.svg.serializer import serialize_mandala_svg
from mandala_studio.utils.geometry import circle_path, create_star_polygon, lotus_petal_count

logger = logging.getLogger(__name__)

_FILLER_COMPLEXITY = 0.5
_CENTER_MIN_RADIUS = 18
_CENTER_PETAL_SIZE = 6


@dataclass
class GenerationResult:
    svg: str
    path_count: int
    elapsed_ms: float


class MandalaGenerator:
    """Pure function of its settings: same settings, same document."""

    def __init__(
        self,
        settings: MandalaSettings,
        registry: PatternRegistry | None = None,
    ) -> None:
        self.settings = settings
        if registry is None:
            load_builtin_patterns()
            registry = get_registry()
        self.registry = registry
        self.spec: PatternSpec = registry.resolve(settings.pattern_type)

    def build(self, width: float, height: float) -> GenerationContext:
        """Run every ring and the centerpiece; return the filled context."""
        ctx = GenerationContext(settings=self.settings, width=width, height=height)
        spec = self.spec
        s = self.settings

        for ring in range(1, s.rings + 1):
            frame = ctx.frame(ring)
            spec.fn(ctx, frame)

            if ring > 1 and s.ornament_complexity > _FILLER_COMPLEXITY:
                count = math.floor(s.segments * (0.6 + s.ornament_complexity * 0.7))
                radius = frame.radius - ctx.ring_step * (0.35 + s.detail_density * 0.15)
                dot_r = s.line_weight * (0.6 + s.detail_density * 0.5)
                ctx.paths.extend(
                    ring_filler_dots(ctx.cx, ctx.cy, radius, count, dot_r, s.rotation_offset)
                )

        self._centerpiece(ctx)
        return ctx

    def _centerpiece(self, ctx: GenerationContext) -> None:
        s = self.settings
        inner_r = max(_CENTER_MIN_RADIUS, s.radius * 0.18)

        petals = min(10, max(4, lotus_petal_count(1) // 2))
        for i in range(petals):
            ctx.paths.append(
                lotus_petal(
                    ctx.cx, ctx.cy, inner_r, i * 360 / petals,
                    _CENTER_PETAL_SIZE, s.petal_curvature, s.rotation_offset,
                )
            )

        star_outer = inner_r * (0.9 + s.ornament_complexity * 0.1)
        star_inner = star_outer * (0.55 + s.detail_density * 0.15)
        ctx.paths.append(
            create_star_polygon(
                ctx.cx, ctx.cy, star_outer, star_inner,
                max(4, math.floor(s.segments / 2)), s.rotation_offset,
            )
        )

        bindu_r = s.line_weight * (1.2 + s.detail_density * 1.1)
        ctx.paths.append(circle_path(ctx.cx, ctx.cy, bindu_r))

    def render(self, width: float, height: float) -> GenerationResult:
        start = time.perf_counter()
        ctx = self.build(width, height)
        spec = self.spec

        svg = serialize_mandala_svg(
            ctx.paths.snapshot(),
            self.settings,
            width,
            height,
            variable_stroke=spec.variable_stroke,
        )
        elapsed = (time.perf_counter() - start) * 1000
        logger.info("Generated %s mandala: %d paths in %.1fms", spec.name, len(ctx.paths), elapsed)
        return GenerationResult(svg=svg, path_count=len(ctx.paths), elapsed_ms=elapsed)

    def generate(self, width: float, height: float) -> str:
        return self.render(width, height).svg


def generate_mandala(settings: MandalaSettings, width: float = 800, height: float = 800) -> str:
    return MandalaGenerator(settings).generate(width, height)
