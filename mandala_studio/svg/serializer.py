"""Write SVG output: stroked mandala documents and filled glyph documents."""

from __future__ import annotations

import html
import math
import re
from typing import Any

from mandala_studio.models.settings import MandalaSettings, StrokeDash
from mandala_studio.utils.geometry import fmt

SVG_NS = "http://www.w3.org/2000/svg"

# Filters are declared when the stroke is translucent or the detail is dense.
_GLOW_OPACITY = 0.95
_FILTER_DETAIL = 0.8

_WHITESPACE_RE = re.compile(r"\s+")


def _element(tag: str, attrs: dict[str, Any], children: str = "") -> str:
    attr_str = " ".join(f'{k}="{v}"' for k, v in attrs.items())
    if children:
        return f"<{tag} {attr_str}>{children}</{tag}>"
    return f"<{tag} {attr_str} />"


def stroke_dash_array(dash: StrokeDash, line_weight: float) -> str | None:
    """Dash pattern in multiples of the line weight; None for solid."""
    w = line_weight
    if dash == StrokeDash.DASHED:
        parts = [w * 4, w * 2]
    elif dash == StrokeDash.DOTTED:
        parts = [w, w]
    elif dash == StrokeDash.DASHDOT:
        parts = [w * 4, w, w, w]
    else:
        return None
    return ",".join(fmt(p) for p in parts)


def stroke_width(line_weight: float, seed: float, index: int, variable: bool) -> float:
    """Base weight, or weight jittered ±10% by the path's global emission index."""
    if not variable:
        return line_weight
    return line_weight * (1 + math.sin(seed + index) * 0.1)


def _filter_defs(line_weight: float) -> str:
    glow = _element(
        "filter",
        {"id": "softGlow", "x": "-50%", "y": "-50%", "width": "200%", "height": "200%"},
        _element("feGaussianBlur", {"in": "SourceGraphic", "stdDeviation": fmt(line_weight * 0.3)}),
    )
    # Declared alongside softGlow; no path references it.
    blur = _element(
        "filter",
        {"id": "subtleBlur", "x": "-20%", "y": "-20%", "width": "140%", "height": "140%"},
        _element("feGaussianBlur", {"in": "SourceGraphic", "stdDeviation": fmt(line_weight * 0.1)}),
    )
    return f"<defs>{glow}{blur}</defs>"


def serialize_mandala_svg(
    paths: list[str],
    settings: MandalaSettings,
    width: float,
    height: float,
    variable_stroke: bool = False,
) -> str:
    """Compact single-line SVG: background rect, then one stroked path per entry."""
    s = settings
    parts = [
        f'<svg width="{fmt(width)}" height="{fmt(height)}" '
        f'viewBox="0 0 {fmt(width)} {fmt(height)}" xmlns="{SVG_NS}">'
    ]

    if s.stroke_opacity < _GLOW_OPACITY or s.detail_density > _FILTER_DETAIL:
        parts.append(_filter_defs(s.line_weight))

    parts.append(
        _element("rect", {"width": "100%", "height": "100%", "fill": html.escape(s.background_color)})
    )

    dash = stroke_dash_array(s.stroke_dash, s.line_weight)
    use_glow = s.stroke_opacity < _GLOW_OPACITY
    stroke = html.escape(s.stroke_color)

    for index, d in enumerate(paths):
        attrs: dict[str, Any] = {
            "d": d,
            "stroke": stroke,
            "stroke-width": fmt(stroke_width(s.line_weight, s.seed, index, variable_stroke)),
            "fill": "none",
            "stroke-linecap": "round",
            "stroke-linejoin": "round",
            "stroke-opacity": fmt(s.stroke_opacity),
        }
        if dash is not None:
            attrs["stroke-dasharray"] = dash
        if use_glow:
            attrs["filter"] = "url(#softGlow)"
        parts.append(_element("path", attrs))

    parts.append("</svg>")
    return "".join(parts)


def serialize_filled_path_svg(
    d: str,
    width: float,
    height: float,
    fill: str,
    background: str | None = None,
) -> str:
    """Minimal document holding exactly one filled path."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="{SVG_NS}" width="{fmt(width)}" height="{fmt(height)}">',
    ]
    if background:
        lines.append("  " + _element("rect", {"width": "100%", "height": "100%", "fill": background}))
    lines.append("  " + _element("path", {"d": d, "fill": fill}))
    lines.append("</svg>")
    return "\n".join(lines)


def minify_svg(svg: str) -> str:
    """Collapse newlines and whitespace runs, for pasting into design tools."""
    return _WHITESPACE_RE.sub(" ", svg).strip()
