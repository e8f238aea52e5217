"""POST /api/export/* — downloadable SVG, PNG and ASCII text."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from mandala_studio.config import Settings
from mandala_studio.dependencies import get_render_backend, get_settings
from mandala_studio.engine.generator import MandalaGenerator
from mandala_studio.export import export_ascii_text, export_png, export_svg
from mandala_studio.models.requests import AsciiExportRequest, ExportRequest
from mandala_studio.utils.rasterizer import Rasterizer

router = APIRouter(prefix="/export")


def _document(req: ExportRequest, app_settings: Settings) -> str:
    if req.svg:
        return req.svg
    return MandalaGenerator(req.settings).generate(
        app_settings.canvas_width, app_settings.canvas_height
    )


@router.post("/svg")
async def svg(
    req: ExportRequest,
    app_settings: Settings = Depends(get_settings),
) -> Response:
    return Response(content=export_svg(_document(req, app_settings)), media_type="image/svg+xml")


@router.post("/png")
async def png(
    req: ExportRequest,
    app_settings: Settings = Depends(get_settings),
    rasterizer: Rasterizer = Depends(get_render_backend),
) -> Response:
    data = export_png(
        _document(req, app_settings),
        req.settings.background_color,
        app_settings.canvas_width,
        app_settings.canvas_height,
        scale=app_settings.png_export_scale,
        rasterizer=rasterizer,
    )
    if data is None:
        return Response(status_code=204)
    return Response(content=data, media_type="image/png")


@router.post("/ascii", response_class=PlainTextResponse)
async def ascii_text(req: AsciiExportRequest) -> str:
    return export_ascii_text(req.ascii)
