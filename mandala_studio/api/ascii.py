"""POST /api/ascii/* — raster → ASCII → rectangles."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from mandala_studio.ascii.glyph_vectorizer import split_rows, vectorize_rows
from mandala_studio.ascii.pipeline import AsciiPipeline
from mandala_studio.config import Settings
from mandala_studio.dependencies import get_ascii_pipeline, get_render_backend, get_settings
from mandala_studio.engine.generator import MandalaGenerator
from mandala_studio.models.requests import AsciiRequest, VectorizeRequest
from mandala_studio.models.responses import AsciiResponse, VectorizeResponse
from mandala_studio.models.settings import AsciiSettings
from mandala_studio.utils.rasterizer import Rasterizer

router = APIRouter(prefix="/ascii")


@router.post("/generate", response_model=AsciiResponse)
async def generate_ascii(
    req: AsciiRequest,
    app_settings: Settings = Depends(get_settings),
    rasterizer: Rasterizer = Depends(get_render_backend),
    pipeline: AsciiPipeline = Depends(get_ascii_pipeline),
) -> AsciiResponse:
    svg = req.svg or MandalaGenerator(req.settings).generate(
        app_settings.canvas_width, app_settings.canvas_height
    )
    ascii_settings = req.ascii or AsciiSettings(charset=app_settings.default_charset)

    text = await pipeline.regenerate(svg, ascii_settings, rasterizer)
    if text is None:
        return AsciiResponse(superseded=True)

    rows = text.split("\n") if text else []
    return AsciiResponse(
        ascii=text,
        columns=len(rows[0]) if rows else 0,
        rows=len(rows),
    )


@router.post("/vectorize", response_model=VectorizeResponse)
async def vectorize(req: VectorizeRequest) -> VectorizeResponse:
    svg, rects = vectorize_rows(split_rows(req.ascii))
    return VectorizeResponse(svg=svg, rect_count=len(rects))
