"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from mandala_studio.models.settings import AsciiSettings, MandalaSettings


class GenerateRequest(BaseModel):
    settings: MandalaSettings = Field(default_factory=MandalaSettings)
    width: int | None = Field(default=None, description="Canvas width; server default if omitted")
    height: int | None = Field(default=None, description="Canvas height; server default if omitted")


class RandomizeRequest(BaseModel):
    settings: MandalaSettings = Field(default_factory=MandalaSettings)
    rng_seed: int = Field(..., description="Seed for the randomizer's RNG")


class AsciiRequest(BaseModel):
    svg: str | None = Field(default=None, description="Rendered pattern; generated from settings if omitted")
    settings: MandalaSettings = Field(default_factory=MandalaSettings)
    ascii: AsciiSettings | None = Field(default=None, description="Server default charset if omitted")


class VectorizeRequest(BaseModel):
    ascii: str = Field(..., description="Newline-joined ASCII rows")


class ExportRequest(BaseModel):
    svg: str | None = Field(default=None, description="Document to export; generated from settings if omitted")
    settings: MandalaSettings = Field(default_factory=MandalaSettings)


class AsciiExportRequest(BaseModel):
    ascii: str
