"""POST /api/pattern/* — mandala generation."""

from __future__ import annotations

import random

from fastapi import APIRouter, Depends

from mandala_studio.config import Settings
from mandala_studio.dependencies import get_settings
from mandala_studio.engine.generator import MandalaGenerator
from mandala_studio.engine.randomize import randomize
from mandala_studio.models.requests import GenerateRequest, RandomizeRequest
from mandala_studio.models.responses import GenerateResponse, RandomizeResponse

router = APIRouter(prefix="/pattern")


@router.post("/generate", response_model=GenerateResponse)
async def generate(
    req: GenerateRequest,
    app_settings: Settings = Depends(get_settings),
) -> GenerateResponse:
    width = req.width or app_settings.canvas_width
    height = req.height or app_settings.canvas_height
    result = MandalaGenerator(req.settings).render(width, height)
    return GenerateResponse(
        svg=result.svg,
        path_count=result.path_count,
        processing_time_ms=round(result.elapsed_ms, 1),
    )


@router.post("/randomize", response_model=RandomizeResponse)
async def randomize_pattern(
    req: RandomizeRequest,
    app_settings: Settings = Depends(get_settings),
) -> RandomizeResponse:
    new_settings = randomize(req.settings, random.Random(req.rng_seed))
    svg = MandalaGenerator(new_settings).generate(
        app_settings.canvas_width, app_settings.canvas_height
    )
    return RandomizeResponse(settings=new_settings, svg=svg)
