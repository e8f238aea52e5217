"""Rasterization utilities — SVG to RGBA pixels, pixels to a luminance grid.

The render backend sits behind the ``Rasterizer`` protocol; CairoSVG is the
default. A backend that cannot render returns None, never raises.
"""

from __future__ import annotations

import asyncio
import io
import logging
import math
import re
from dataclasses import dataclass
from typing import Protocol

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

# ── Named constants ──

# Narrowest ASCII grid: 16 columns. Shortest: 8 rows.
MIN_COLUMNS = 16
MIN_ROWS = 8

# Terminal cells are about twice as tall as wide, so rows = cols × aspect × ½.
CHAR_ASPECT = 0.5

# Rec. 601 luma weights.
_LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114])

_SVG_TAG_RE = re.compile(r"<svg\b[^>]*>", re.IGNORECASE | re.DOTALL)
_VIEWBOX_RE = re.compile(r'viewBox\s*=\s*"([^"]+)"')
_WIDTH_RE = re.compile(r'\swidth\s*=\s*"([^"]*?)"')
_HEIGHT_RE = re.compile(r'\sheight\s*=\s*"([^"]*?)"')


class Rasterizer(Protocol):
    def render_rgba(self, svg: str, width: int, height: int) -> NDArray[np.uint8] | None:
        """Render ``svg`` to an (height, width, 4) uint8 array, or None on failure."""
        ...


class CairoRasterizer:
    """CairoSVG render, PIL decode."""

    def render_rgba(self, svg: str, width: int, height: int) -> NDArray[np.uint8] | None:
        try:
            import cairosvg
            from PIL import Image

            png_data = cairosvg.svg2png(
                bytestring=svg.encode("utf-8"),
                output_width=width,
                output_height=height,
            )
            return np.array(Image.open(io.BytesIO(png_data)).convert("RGBA"))
        except Exception as e:
            logger.warning("Failed to render SVG at %dx%d: %s", width, height, e)
            return None


_default_rasterizer: Rasterizer = CairoRasterizer()


def get_rasterizer() -> Rasterizer:
    return _default_rasterizer


@dataclass
class LuminanceGrid:
    """Per-sample straight (not premultiplied) luminance and alpha, both 0–1."""

    luminance: NDArray[np.float64]
    alpha: NDArray[np.float64]

    @property
    def width(self) -> int:
        return int(self.luminance.shape[1])

    @property
    def height(self) -> int:
        return int(self.luminance.shape[0])

    @classmethod
    def from_rgba(cls, rgba: NDArray[np.uint8]) -> "LuminanceGrid":
        pixels = rgba.astype(np.float64)
        luminance = pixels[:, :, :3] @ _LUMA_WEIGHTS / 255.0
        alpha = pixels[:, :, 3] / 255.0
        return cls(luminance=luminance, alpha=alpha)


def _parse_length(value: str) -> float | None:
    try:
        return float(value.strip().replace("px", "").replace("pt", ""))
    except ValueError:
        return None


def svg_dimensions(svg: str) -> tuple[float, float] | None:
    """Intrinsic (width, height) from the root tag: width/height, else viewBox."""
    tag = _SVG_TAG_RE.search(svg)
    if not tag:
        return None
    root = tag.group(0)

    w_match = _WIDTH_RE.search(root)
    h_match = _HEIGHT_RE.search(root)
    if w_match and h_match:
        w = _parse_length(w_match.group(1))
        h = _parse_length(h_match.group(1))
        if w and h and w > 0 and h > 0:
            return (w, h)

    vb_match = _VIEWBOX_RE.search(root)
    if vb_match:
        parts = vb_match.group(1).replace(",", " ").split()
        if len(parts) >= 4:
            w = _parse_length(parts[2])
            h = _parse_length(parts[3])
            if w and h and w > 0 and h > 0:
                return (w, h)
    return None


def grid_size(columns: int, aspect: float) -> tuple[int, int]:
    """(width, height) of the sample grid for ``columns`` and source h/w aspect."""
    width = max(MIN_COLUMNS, columns)
    height = max(MIN_ROWS, math.floor(width * aspect * CHAR_ASPECT + 0.5))
    return width, height


def source_aspect(svg: str) -> float:
    dims = svg_dimensions(svg)
    if dims is None:
        return 1.0
    return dims[1] / dims[0]


def sample_luminance_grid(
    svg: str,
    columns: int,
    rasterizer: Rasterizer | None = None,
) -> LuminanceGrid | None:
    """Render ``svg`` straight at grid resolution and read luminance + alpha.

    One sample per cell (no supersampling). None when the render fails.
    """
    width, height = grid_size(columns, source_aspect(svg))
    rgba = (rasterizer or get_rasterizer()).render_rgba(svg, width, height)
    if rgba is None:
        return None
    if rgba.shape[:2] != (height, width):
        logger.warning(
            "Rasterizer returned %s, expected %dx%d", rgba.shape[:2], height, width
        )
        return None
    return LuminanceGrid.from_rgba(rgba)


async def sample_luminance_grid_async(
    svg: str,
    columns: int,
    rasterizer: Rasterizer | None = None,
) -> LuminanceGrid | None:
    """Same as ``sample_luminance_grid``, off the event loop. One await point."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, sample_luminance_grid, svg, columns, rasterizer)
