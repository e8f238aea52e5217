"""Tests for ASCII → rectangle-partition vectorization."""

from __future__ import annotations

import re

import numpy as np
import pytest

from mandala_studio.ascii.glyph_vectorizer import (
    GlyphVectorizerConfig,
    binarize,
    canvas_size,
    merge_rectangles,
    rects_to_path,
    render_ascii_bitmap,
    split_rows,
    vectorize_ascii,
    vectorize_rows,
)


def assert_partition(mask: np.ndarray, rects: list[tuple[int, int, int, int]]) -> None:
    """Every bright pixel covered exactly once, no dark pixel covered."""
    coverage = np.zeros(mask.shape, dtype=np.int32)
    for x, y, w, h in rects:
        assert w > 0 and h > 0
        coverage[y:y + h, x:x + w] += 1
    assert coverage.max(initial=0) <= 1
    np.testing.assert_array_equal(coverage.astype(bool), mask)


class TestMergeRectangles:
    def test_all_dark(self):
        assert merge_rectangles(np.zeros((6, 9), dtype=bool)) == []

    def test_all_bright_is_one_rect(self):
        assert merge_rectangles(np.ones((5, 7), dtype=bool)) == [(0, 0, 7, 5)]

    def test_checkerboard(self):
        mask = (np.indices((6, 6)).sum(axis=0) % 2 == 0)
        rects = merge_rectangles(mask)
        assert len(rects) == 18
        assert all(w == 1 and h == 1 for _, _, w, h in rects)
        assert_partition(mask, rects)

    @pytest.mark.parametrize("seed", range(6))
    @pytest.mark.parametrize("density", [0.1, 0.5, 0.9])
    def test_random_partition(self, seed, density):
        rng = np.random.default_rng(seed)
        mask = rng.random((23, 31)) < density
        assert_partition(mask, merge_rectangles(mask))

    def test_greedy_grows_down(self):
        mask = np.array([[1, 1], [1, 1], [1, 0]], dtype=bool)
        assert merge_rectangles(mask) == [(0, 0, 2, 2), (0, 2, 1, 1)]

    def test_l_shape(self):
        mask = np.array([[1, 1, 1], [1, 0, 0]], dtype=bool)
        assert merge_rectangles(mask) == [(0, 0, 3, 1), (0, 1, 1, 1)]

    def test_rejects_non_2d(self):
        with pytest.raises(ValueError):
            merge_rectangles(np.ones((2, 2, 2), dtype=bool))


def test_rects_to_path():
    assert rects_to_path([(2, 4, 6, 8)], 2) == "M 1,2 h 3 v 4 h -3 z"
    assert rects_to_path([(0, 0, 1, 1), (3, 0, 1, 1)]) == "M 0,0 h 1 v 1 h -1 z M 3,0 h 1 v 1 h -1 z"
    assert rects_to_path([]) == ""


def test_binarize_threshold_is_strict():
    rgb = np.array([[[60, 60, 60], [50, 50, 50], [150, 0, 0]]], dtype=np.uint8)
    np.testing.assert_array_equal(binarize(rgb, 50), [[True, False, False]])


class TestBitmap:
    def test_canvas_size(self):
        assert canvas_size(["@@", "@"], GlyphVectorizerConfig()) == (53, 68)

    def test_supersampled_shape(self):
        bitmap = render_ascii_bitmap(["@@"], GlyphVectorizerConfig())
        assert bitmap.shape == (104, 106, 3)

    def test_blank_rows_have_no_ink(self):
        config = GlyphVectorizerConfig()
        assert not binarize(render_ascii_bitmap(["   "], config), config.threshold).any()

    def test_glyphs_have_ink_inside_padding(self):
        config = GlyphVectorizerConfig()
        mask = binarize(render_ascii_bitmap(["@#"], config), config.threshold)
        assert mask.any()
        pad = int(config.padding * config.supersample)
        assert not mask[:, : pad // 2].any()
        assert not mask[: pad // 2, :].any()


class TestVectorize:
    def test_single_path_document(self):
        svg, rects = vectorize_rows(["@%#", " :."])
        assert rects
        assert svg.count("<path ") == 1
        assert 'fill="#e2e8f0"' in svg
        assert '<rect width="100%" height="100%" fill="#050505" />' in svg
        assert 'width="61.5" height="68"' in svg

    def test_rects_on_half_unit_grid_inside_canvas(self):
        config = GlyphVectorizerConfig()
        rows = ["@@@@", "#  #"]
        _, rects = vectorize_rows(rows, config)
        width, height = canvas_size(rows, config)
        for r in rects:
            assert (r.x * 2).is_integer() and (r.y * 2).is_integer()
            assert r.x >= 0 and r.y >= 0
            assert r.x + r.w <= width and r.y + r.h <= height

    def test_rendered_text_partition(self):
        config = GlyphVectorizerConfig()
        mask = binarize(render_ascii_bitmap(["@*", "=:"], config), config.threshold)
        assert_partition(mask, merge_rectangles(mask))

    def test_path_commands(self):
        svg, _ = vectorize_rows(["@"])
        d = re.search(r'<path d="([^"]+)"', svg).group(1)
        assert re.fullmatch(r"(M [\d.]+,[\d.]+ h [\d.]+ v [\d.]+ h -[\d.]+ z ?)+", d)

    def test_empty_input(self):
        assert vectorize_rows([]) == ("", [])
        assert vectorize_ascii("") == ""

    def test_trailing_newline_ignored(self):
        assert vectorize_ascii("@@\n") == vectorize_ascii("@@")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        ("@@", ["@@"]),
        ("@@\n", ["@@"]),
        ("@\n\n", ["@", ""]),
        ("a\nb", ["a", "b"]),
    ],
)
def test_split_rows(text, expected):
    assert split_rows(text) == expected
