"""Tests for SVG document writing."""

from __future__ import annotations

import math

import pytest

from mandala_studio.models.settings import MandalaSettings, StrokeDash
from mandala_studio.svg.serializer import (
    minify_svg,
    serialize_filled_path_svg,
    serialize_mandala_svg,
    stroke_dash_array,
    stroke_width,
)


@pytest.mark.parametrize(
    "dash, expected",
    [
        (StrokeDash.SOLID, None),
        (StrokeDash.DASHED, "12,6"),
        (StrokeDash.DOTTED, "3,3"),
        (StrokeDash.DASHDOT, "12,3,3,3"),
    ],
)
def test_stroke_dash_array(dash, expected):
    assert stroke_dash_array(dash, 3) == expected


def test_stroke_width():
    assert stroke_width(2, 0.5, 7, variable=False) == 2
    assert stroke_width(2, 0.5, 7, variable=True) == pytest.approx(2 * (1 + 0.1 * math.sin(7.5)))
    for i in range(50):
        assert 1.8 - 1e-9 <= stroke_width(2, 0, i, variable=True) <= 2.2 + 1e-9


def test_empty_path_list():
    svg = serialize_mandala_svg([], MandalaSettings(), 100, 50)
    assert svg.startswith('<svg width="100" height="50" viewBox="0 0 100 50"')
    assert "<path" not in svg
    assert "<rect " in svg


def test_one_element_per_path_in_order():
    svg = serialize_mandala_svg(["M 0,0 L 1,1", "M 2,2 L 3,3"], MandalaSettings(), 10, 10)
    assert svg.index('d="M 0,0 L 1,1"') < svg.index('d="M 2,2 L 3,3"')
    assert svg.count("<path ") == 2


def test_colors_are_escaped():
    svg = serialize_mandala_svg(["M 0,0"], MandalaSettings(stroke_color='"><x'), 10, 10)
    assert 'stroke="&quot;&gt;&lt;x"' in svg


def test_filled_path_document():
    svg = serialize_filled_path_svg("M 0,0 h 1 v 1 h -1 z", 20, 30, fill="#fff", background="#000")
    lines = svg.split("\n")
    assert lines[0] == '<?xml version="1.0" encoding="UTF-8"?>'
    assert lines[1] == '<svg xmlns="http://www.w3.org/2000/svg" width="20" height="30">'
    assert "viewBox" not in svg
    assert svg.count("<path ") == 1
    assert '<rect width="100%" height="100%" fill="#000" />' in svg
    assert '<path d="M 0,0 h 1 v 1 h -1 z" fill="#fff" />' in svg


def test_filled_path_without_background():
    svg = serialize_filled_path_svg("M 0,0 z", 1, 1, fill="#fff")
    assert "<rect" not in svg


def test_minify():
    assert minify_svg("<svg>\n  <path d=\"M 0,0\" />\n</svg>\n") == '<svg> <path d="M 0,0" /> </svg>'
