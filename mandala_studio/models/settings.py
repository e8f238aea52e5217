"""Generation settings records — immutable per generation call."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_CHARSET = "@%#*+=-:. "


class StrokeDash(str, enum.Enum):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    DASHDOT = "dashdot"


class _Record(BaseModel):
    """Frozen record accepting both snake_case and camelCase field names."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def merge(self, **partial: Any) -> "_Record":
        """Return a copy with ``partial`` applied; other fields keep their value.

        Keys may be snake_case or camelCase. Values are re-validated.
        """
        data = self.model_dump()
        data.update(partial)
        return type(self).model_validate(data)


class MandalaSettings(_Record):
    # Open set: any registered pattern name. Unknown names render as traditional.
    pattern_type: str = "traditional"
    segments: int = 12
    rings: int = 6
    radius: float = 300.0
    line_weight: float = 2.0
    symmetry: bool = True
    petal_curvature: float = 0.5
    detail_density: float = 0.5
    ornament_complexity: float = 0.5
    rotation_offset: float = 0.0
    segment_offset: bool = False
    spacing_multiplier: float = 1.0
    center_scale: float = 1.0
    stroke_color: str = "#ffffff"
    background_color: str = "#0a0a0a"
    stroke_opacity: float = 1.0
    stroke_dash: StrokeDash = StrokeDash.SOLID
    seed: float = 0.0


class AsciiSettings(_Record):
    columns: int = 120
    contrast: float = 1.0
    brightness: float = 0.0
    invert: bool = False
    charset: str = Field(default=DEFAULT_CHARSET, description="Glyph pool, dark to light")
