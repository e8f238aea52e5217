"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from mandala_studio.models.settings import MandalaSettings


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    patterns_registered: int = 0


class PatternInfo(BaseModel):
    name: str
    description: str = ""
    variable_stroke: bool = False


class PresetInfo(BaseModel):
    name: str
    description: str
    settings: MandalaSettings


class GenerateResponse(BaseModel):
    svg: str
    path_count: int = 0
    processing_time_ms: float = 0.0


class RandomizeResponse(BaseModel):
    settings: MandalaSettings
    svg: str


class AsciiResponse(BaseModel):
    ascii: str = ""
    columns: int = 0
    rows: int = 0
    superseded: bool = Field(default=False, description="A newer request took the output slot")


class VectorizeResponse(BaseModel):
    svg: str = ""
    rect_count: int = 0
