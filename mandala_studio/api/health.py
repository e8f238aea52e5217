"""Health check + catalog endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from mandala_studio.engine.presets import PATTERN_PRESETS
from mandala_studio.engine.registry import get_registry
from mandala_studio.models.responses import HealthResponse, PatternInfo, PresetInfo

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version="0.1.0", patterns_registered=get_registry().count)


@router.get("/patterns", response_model=list[PatternInfo])
async def patterns() -> list[PatternInfo]:
    return [
        PatternInfo(name=s.name, description=s.description, variable_stroke=s.variable_stroke)
        for s in get_registry().all()
    ]


@router.get("/presets", response_model=list[PresetInfo])
async def presets() -> list[PresetInfo]:
    return [
        PresetInfo(name=p.name, description=p.description, settings=p.settings)
        for p in PATTERN_PRESETS
    ]
