"""Shared test fixtures."""

from __future__ import annotations

import threading

import numpy as np
import pytest

from mandala_studio.engine.registry import load_builtin_patterns
from mandala_studio.models.settings import MandalaSettings

load_builtin_patterns()


# The lotus scenario: 8 petals on each of 3 rings, no secondary ornament,
# plus the 6-path centerpiece (4 petals, star, bindu).
LOTUS_SCENARIO = dict(
    pattern_type="lotus",
    segments=8,
    rings=3,
    radius=300,
    spacing_multiplier=1,
    center_scale=1,
    rotation_offset=0,
    segment_offset=False,
    detail_density=0.3,
    ornament_complexity=0.3,
)


class SolidRasterizer:
    """Renders every document as one flat RGBA color at the requested size."""

    def __init__(self, rgba: tuple[int, int, int, int] = (255, 255, 255, 255)) -> None:
        self.rgba = rgba
        self.calls: list[tuple[int, int]] = []

    def render_rgba(self, svg: str, width: int, height: int):
        self.calls.append((width, height))
        out = np.empty((height, width, 4), dtype=np.uint8)
        out[:, :] = self.rgba
        return out


class FailingRasterizer:
    """Stands in for a missing render surface or a decode failure."""

    def render_rgba(self, svg: str, width: int, height: int):
        return None


class GatedRasterizer(SolidRasterizer):
    """Blocks renders of documents containing ``slow`` until the gate opens."""

    def __init__(self) -> None:
        super().__init__()
        self.gate = threading.Event()

    def render_rgba(self, svg: str, width: int, height: int):
        if "slow" in svg:
            self.gate.wait(timeout=5)
            self.rgba = (0, 0, 0, 255)
        else:
            self.rgba = (255, 255, 255, 255)
        return super().render_rgba(svg, width, height)


@pytest.fixture
def lotus_settings() -> MandalaSettings:
    return MandalaSettings(**LOTUS_SCENARIO)


@pytest.fixture
def white_rasterizer() -> SolidRasterizer:
    return SolidRasterizer((255, 255, 255, 255))


@pytest.fixture
def black_rasterizer() -> SolidRasterizer:
    return SolidRasterizer((0, 0, 0, 255))


@pytest.fixture
def failing_rasterizer() -> FailingRasterizer:
    return FailingRasterizer()


@pytest.fixture
def gated_rasterizer() -> GatedRasterizer:
    return GatedRasterizer()

