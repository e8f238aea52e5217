"""Luminance grid → character rows.

Luminance is premultiplied by alpha before the contrast/brightness curve, so
partially transparent edges read darker. Samples with alpha under 0.1 are not
inked at all: they take the charset's light-end character.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from mandala_studio.models.settings import DEFAULT_CHARSET, AsciiSettings
from mandala_studio.utils.rasterizer import LuminanceGrid

# Below this alpha a sample counts as uncovered.
EMPTY_ALPHA = 0.1


def adjust_luminance(
    luminance: NDArray[np.float64],
    contrast: float,
    brightness: float,
) -> NDArray[np.float64]:
    """Contrast about mid-grey, then additive brightness, clamped to [0, 1]."""
    return np.clip((luminance - 0.5) * contrast + 0.5 + brightness, 0.0, 1.0)


def pool_indices(adjusted: NDArray[np.float64], pool_length: int) -> NDArray[np.int64]:
    """Darker → higher index. Rounds half up."""
    raw = np.floor((1.0 - adjusted) * (pool_length - 1) + 0.5)
    return np.clip(raw, 0, pool_length - 1).astype(np.int64)


def resolve_charset(charset: str) -> str:
    """Whitespace-only pools fall back to the default; "" stays empty."""
    if charset and not charset.strip():
        return DEFAULT_CHARSET
    return charset


def encode_grid(grid: LuminanceGrid, settings: AsciiSettings) -> list[str]:
    """One string per grid row, one character per sample."""
    charset = resolve_charset(settings.charset)
    if not charset:
        return []

    pool = charset[::-1] if settings.invert else charset
    empty_char = charset[-1]

    premultiplied = grid.luminance * grid.alpha
    adjusted = adjust_luminance(premultiplied, settings.contrast, settings.brightness)
    indices = pool_indices(adjusted, len(pool))
    uncovered = grid.alpha < EMPTY_ALPHA

    rows: list[str] = []
    for r in range(grid.height):
        rows.append(
            "".join(
                empty_char if uncovered[r, c] else pool[indices[r, c]]
                for c in range(grid.width)
            )
        )
    return rows


def grid_to_ascii(grid: LuminanceGrid, settings: AsciiSettings) -> str:
    return "\n".join(encode_grid(grid, settings))


def strip_trailing_blank_row(text: str) -> str:
    """Drop a single trailing empty row, for export and clipboard only."""
    rows = text.split("\n")
    if len(rows) > 1 and rows[-1] == "":
        rows = rows[:-1]
    return "\n".join(rows)
