"""Preset catalog."""

from __future__ import annotations

from dataclasses import dataclass

from mandala_studio.models.settings import MandalaSettings, StrokeDash


@dataclass(frozen=True)
class PatternPreset:
    name: str
    description: str
    settings: MandalaSettings


PATTERN_PRESETS: list[PatternPreset] = [
    PatternPreset(
        name="Lotus Chakra",
        description="Layered petals with sacred star overlays",
        settings=MandalaSettings(
            pattern_type="lotus",
            segments=9,
            rings=6,
            radius=320,
            line_weight=2.2,
            petal_curvature=0.65,
            detail_density=0.62,
            ornament_complexity=0.55,
            rotation_offset=0,
            segment_offset=True,
            spacing_multiplier=1.05,
            center_scale=1.15,
            stroke_color="#f5f5f5",
            background_color="#0c0c0c",
            stroke_opacity=1,
            stroke_dash=StrokeDash.SOLID,
        ),
    ),
    PatternPreset(
        name="Navaratri Garland",
        description="Traditional ring cadence with bead flourishes",
        settings=MandalaSettings(
            pattern_type="traditional",
            segments=12,
            rings=7,
            radius=340,
            line_weight=1.6,
            petal_curvature=0.55,
            detail_density=0.7,
            ornament_complexity=0.75,
            rotation_offset=10,
            segment_offset=True,
            spacing_multiplier=0.95,
            center_scale=0.9,
            stroke_color="#fde68a",
            background_color="#1b1204",
            stroke_opacity=1,
            stroke_dash=StrokeDash.SOLID,
        ),
    ),
    PatternPreset(
        name="Rangoli Carnival",
        description="Festival starburst with bead inlays",
        settings=MandalaSettings(
            pattern_type="rangoli",
            segments=10,
            rings=6,
            radius=310,
            line_weight=2.4,
            petal_curvature=0.48,
            detail_density=0.8,
            ornament_complexity=0.78,
            rotation_offset=18,
            segment_offset=False,
            spacing_multiplier=1.12,
            center_scale=1.25,
            stroke_color="#f97316",
            background_color="#1d1208",
            stroke_opacity=1,
            stroke_dash=StrokeDash.SOLID,
        ),
    ),
]


def get_preset(name: str) -> PatternPreset | None:
    for preset in PATTERN_PRESETS:
        if preset.name.lower() == name.lower():
            return preset
    return None


def preset_settings(name: str, seed: float) -> MandalaSettings | None:
    """The preset's settings stamped with ``seed``, or None for an unknown name."""
    preset = get_preset(name)
    if preset is None:
        return None
    return preset.settings.merge(seed=seed)
