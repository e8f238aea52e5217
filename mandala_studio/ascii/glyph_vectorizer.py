"""ASCII rows → bitmap → rectangle partition → one compound SVG path.

The text is drawn supersampled with PIL, thresholded, and the bright pixels
are covered by greedy scanline rectangles. The rectangles partition the
bright set exactly: no overlap, no omission.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageDraw, ImageFont

from mandala_studio.svg.serializer import serialize_filled_path_svg
from mandala_studio.utils.geometry import fmt

logger = logging.getLogger(__name__)


@dataclass
class GlyphVectorizerConfig:
    font_size: float = 14
    line_height: float = 16
    char_width: float = 8.5
    padding: float = 18
    supersample: int = 2
    # Mean RGB above this (0–255) counts as ink.
    threshold: float = 50
    foreground: str = "#e2e8f0"
    background: str = "#050505"


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float


def canvas_size(rows: list[str], config: GlyphVectorizerConfig) -> tuple[float, float]:
    """Output-unit (width, height) of the text block including padding."""
    columns = max((len(r) for r in rows), default=0)
    width = max(1.0, columns * config.char_width + config.padding * 2)
    height = max(1.0, len(rows) * config.line_height + config.padding * 2)
    return width, height


def render_ascii_bitmap(rows: list[str], config: GlyphVectorizerConfig) -> NDArray[np.uint8]:
    """Draw ``rows`` as a monospaced grid onto an RGB array at supersampled size.

    Each glyph is placed at its own cell origin, so column alignment does not
    depend on the font's advance widths.
    """
    ss = config.supersample
    width, height = canvas_size(rows, config)
    image = Image.new("RGB", (round(width * ss), round(height * ss)), config.background)
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default(size=config.font_size * ss)

    for r, row in enumerate(rows):
        y = (config.padding + r * config.line_height) * ss
        for c, ch in enumerate(row):
            if ch.isspace():
                continue
            x = (config.padding + c * config.char_width) * ss
            draw.text((x, y), ch, fill=config.foreground, font=font)

    return np.array(image)


def binarize(rgb: NDArray[np.uint8], threshold: float) -> NDArray[np.bool_]:
    return rgb[:, :, :3].astype(np.float64).mean(axis=2) > threshold


def _free_runs(free: NDArray[np.bool_]) -> list[tuple[int, int]]:
    """[start, end) spans of consecutive True values in a 1-D mask."""
    padded = np.concatenate(([0], free.astype(np.int8), [0]))
    edges = np.diff(padded)
    starts = np.flatnonzero(edges == 1)
    ends = np.flatnonzero(edges == -1)
    return list(zip(starts.tolist(), ends.tolist()))


def merge_rectangles(mask: NDArray[np.bool_]) -> list[tuple[int, int, int, int]]:
    """Greedy scanline cover of ``mask`` with (x, y, w, h) pixel rectangles.

    Row-major scan: each unvisited bright pixel starts a maximal horizontal
    run, which then grows downward while the whole span below is bright and
    unvisited. Within a row, marking a run only touches that run's columns,
    so all runs of the row can be taken from one snapshot.
    """
    mask = np.asarray(mask, dtype=bool)
    if mask.ndim != 2:
        raise ValueError(f"Expected a 2-D mask, got shape {mask.shape}")
    h, _ = mask.shape
    visited = np.zeros_like(mask)
    rects: list[tuple[int, int, int, int]] = []

    for y in range(h):
        free = mask[y] & ~visited[y]
        if not free.any():
            continue
        for x0, x1 in _free_runs(free):
            y1 = y + 1
            while y1 < h and bool(np.all(mask[y1, x0:x1] & ~visited[y1, x0:x1])):
                y1 += 1
            visited[y:y1, x0:x1] = True
            rects.append((x0, y, x1 - x0, y1 - y))

    return rects


def rects_to_path(rects: list[tuple[int, int, int, int]], scale: float = 1.0) -> str:
    """``M x,y h w v h h -w z`` per rectangle, space-joined, divided by ``scale``."""
    parts = []
    for x, y, w, h in rects:
        parts.append(
            f"M {fmt(x / scale)},{fmt(y / scale)} h {fmt(w / scale)} "
            f"v {fmt(h / scale)} h {fmt(-w / scale)} z"
        )
    return " ".join(parts)


def vectorize_rows(
    rows: list[str],
    config: GlyphVectorizerConfig | None = None,
) -> tuple[str, list[Rect]]:
    """Return (svg, rects in output units); ("", []) when there is no text."""
    config = config or GlyphVectorizerConfig()
    if not rows:
        return "", []

    bitmap = render_ascii_bitmap(rows, config)
    pixel_rects = merge_rectangles(binarize(bitmap, config.threshold))
    ss = config.supersample
    rects = [Rect(x / ss, y / ss, w / ss, h / ss) for x, y, w, h in pixel_rects]

    width, height = canvas_size(rows, config)
    svg = serialize_filled_path_svg(
        rects_to_path(pixel_rects, ss),
        width,
        height,
        fill=config.foreground,
        background=config.background,
    )
    logger.debug("Vectorized %d rows into %d rectangles", len(rows), len(rects))
    return svg, rects


def split_rows(text: str) -> list[str]:
    """Newline-joined text to rows, ignoring one trailing newline."""
    rows = text.split("\n") if text else []
    if rows and rows[-1] == "":
        rows = rows[:-1]
    return rows


def vectorize_ascii(text: str, config: GlyphVectorizerConfig | None = None) -> str:
    """Compact vector re-encoding of ASCII text (one filled compound path)."""
    svg, _ = vectorize_rows(split_rows(text), config)
    return svg
