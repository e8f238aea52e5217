"""Export glue: minified SVG, composited PNG, clean ASCII text."""

from __future__ import annotations

import io
import logging

from PIL import Image

from mandala_studio.ascii.encoder import strip_trailing_blank_row
from mandala_studio.svg.serializer import minify_svg
from mandala_studio.utils.rasterizer import Rasterizer, get_rasterizer

logger = logging.getLogger(__name__)

PNG_EXPORT_SCALE = 3


def export_svg(svg: str) -> str:
    return minify_svg(svg)


def export_png(
    svg: str,
    background: str,
    width: int,
    height: int,
    scale: int = PNG_EXPORT_SCALE,
    rasterizer: Rasterizer | None = None,
) -> bytes | None:
    """Render at ``scale``× and composite onto an opaque ``background``.

    None when the render backend is unavailable or the color is invalid.
    """
    out_w, out_h = width * scale, height * scale
    rgba = (rasterizer or get_rasterizer()).render_rgba(svg, out_w, out_h)
    if rgba is None:
        return None

    try:
        canvas = Image.new("RGBA", (out_w, out_h), background)
    except ValueError as e:
        logger.warning("Invalid export background %r: %s", background, e)
        return None

    composed = Image.alpha_composite(canvas, Image.fromarray(rgba))
    buf = io.BytesIO()
    composed.convert("RGB").save(buf, format="PNG")
    return buf.getvalue()


def export_ascii_text(text: str) -> str:
    return strip_trailing_blank_row(text)
