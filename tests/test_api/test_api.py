"""Tests for API endpoints (render backend replaced by in-memory fakes)."""

from __future__ import annotations

import asyncio
import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from mandala_studio.api.ascii import generate_ascii
from mandala_studio.ascii.pipeline import AsciiPipeline
from mandala_studio.config import Settings
from mandala_studio.dependencies import get_ascii_pipeline, get_render_backend, get_settings
from mandala_studio.main import app
from mandala_studio.models.requests import AsciiRequest
from mandala_studio.models.settings import AsciiSettings

LOTUS_SETTINGS = {
    "patternType": "lotus",
    "segments": 8,
    "rings": 3,
    "radius": 300,
    "detailDensity": 0.3,
    "ornamentComplexity": 0.3,
}

SQUARE_SVG = '<svg width="100" height="100"></svg>'
SLOW_SVG = '<svg width="32" height="32" class="slow"></svg>'
FAST_SVG = '<svg width="32" height="32" class="fast"></svg>'


@pytest.fixture
def client():
    app.dependency_overrides.clear()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def small_canvas():
    app.dependency_overrides[get_settings] = lambda: Settings(canvas_width=20, canvas_height=20)


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["patterns_registered"] == 6


def test_patterns(client):
    data = client.get("/api/patterns").json()
    by_name = {p["name"]: p for p in data}
    assert set(by_name) == {"traditional", "lotus", "rangoli", "paisley", "mehndi", "peacock"}
    assert by_name["traditional"]["variable_stroke"] is True
    assert by_name["lotus"]["variable_stroke"] is False


def test_presets_use_camel_case(client):
    data = client.get("/api/presets").json()
    assert [p["name"] for p in data] == ["Lotus Chakra", "Navaratri Garland", "Rangoli Carnival"]
    assert data[0]["settings"]["patternType"] == "lotus"


class TestGenerate:
    def test_lotus_scenario(self, client):
        response = client.post("/api/pattern/generate", json={"settings": LOTUS_SETTINGS})
        assert response.status_code == 200
        data = response.json()
        assert data["path_count"] == 30
        assert data["svg"].count("<path ") == 30
        assert data["processing_time_ms"] >= 0

    def test_canvas_size(self, client):
        data = client.post("/api/pattern/generate", json={"width": 400, "height": 300}).json()
        assert data["svg"].startswith('<svg width="400" height="300"')

    def test_degenerate_settings_are_not_errors(self, client):
        response = client.post(
            "/api/pattern/generate", json={"settings": {"segments": 0, "rings": 0}}
        )
        assert response.status_code == 200
        assert response.json()["path_count"] == 6

    def test_negative_detail_mehndi(self, client):
        response = client.post(
            "/api/pattern/generate",
            json={"settings": {"patternType": "mehndi", "detailDensity": -0.75}},
        )
        assert response.status_code == 200
        assert response.json()["svg"].endswith("</svg>")

    def test_malformed_types_rejected(self, client):
        response = client.post("/api/pattern/generate", json={"settings": {"segments": "many"}})
        assert response.status_code == 422


def test_randomize_is_reproducible(client):
    body = {"settings": {"patternType": "paisley"}, "rng_seed": 7}
    a = client.post("/api/pattern/randomize", json=body).json()
    b = client.post("/api/pattern/randomize", json=body).json()
    assert a == b
    assert a["settings"]["patternType"] == "paisley"
    assert a["svg"].startswith("<svg ")


class TestAscii:
    def test_floors_apply(self, client, white_rasterizer):
        app.dependency_overrides[get_render_backend] = lambda: white_rasterizer
        data = client.post(
            "/api/ascii/generate", json={"svg": SQUARE_SVG, "ascii": {"columns": 4}}
        ).json()
        assert (data["columns"], data["rows"]) == (16, 8)
        assert data["ascii"] == "\n".join(["@" * 16] * 8)

    def test_renders_pattern_when_svg_missing(self, client, white_rasterizer):
        app.dependency_overrides[get_render_backend] = lambda: white_rasterizer
        data = client.post("/api/ascii/generate", json={"settings": LOTUS_SETTINGS}).json()
        assert (data["columns"], data["rows"]) == (120, 60)
        assert white_rasterizer.calls == [(120, 60)]

    def test_empty_charset(self, client, white_rasterizer):
        app.dependency_overrides[get_render_backend] = lambda: white_rasterizer
        data = client.post(
            "/api/ascii/generate", json={"svg": SQUARE_SVG, "ascii": {"charset": ""}}
        ).json()
        assert data == {"ascii": "", "columns": 0, "rows": 0, "superseded": False}
        assert white_rasterizer.calls == []

    def test_output_goes_through_app_pipeline(self, client, white_rasterizer):
        pipeline = AsciiPipeline()
        app.dependency_overrides[get_render_backend] = lambda: white_rasterizer
        app.dependency_overrides[get_ascii_pipeline] = lambda: pipeline
        data = client.post(
            "/api/ascii/generate", json={"svg": SQUARE_SVG, "ascii": {"columns": 16}}
        ).json()
        assert data["superseded"] is False
        assert pipeline.output == data["ascii"]
        assert pipeline.epoch == 1

    def test_whitespace_charset_uses_default(self, client, white_rasterizer):
        app.dependency_overrides[get_render_backend] = lambda: white_rasterizer
        data = client.post(
            "/api/ascii/generate",
            json={"svg": SQUARE_SVG, "ascii": {"columns": 16, "charset": "   "}},
        ).json()
        assert data["ascii"] == "\n".join(["@" * 16] * 8)

    def test_older_request_is_superseded(self, gated_rasterizer):
        pipeline = AsciiPipeline()
        ascii_settings = AsciiSettings(columns=16)
        slow_req = AsciiRequest(svg=SLOW_SVG, ascii=ascii_settings)
        fast_req = AsciiRequest(svg=FAST_SVG, ascii=ascii_settings)

        async def scenario():
            slow_task = asyncio.create_task(
                generate_ascii(slow_req, Settings(), gated_rasterizer, pipeline)
            )
            await asyncio.sleep(0)
            fast = await generate_ascii(fast_req, Settings(), gated_rasterizer, pipeline)
            gated_rasterizer.gate.set()
            return await slow_task, fast

        slow, fast = asyncio.run(scenario())
        assert slow.superseded is True
        assert slow.ascii == ""
        assert fast.superseded is False
        assert fast.ascii == "\n".join(["@" * 16] * 8)
        assert pipeline.output == fast.ascii

    def test_render_failure_is_empty(self, client, failing_rasterizer):
        app.dependency_overrides[get_render_backend] = lambda: failing_rasterizer
        data = client.post("/api/ascii/generate", json={"svg": SQUARE_SVG}).json()
        assert data["ascii"] == ""

    def test_vectorize(self, client):
        data = client.post("/api/ascii/vectorize", json={"ascii": "@@\n@@\n"}).json()
        assert data["rect_count"] > 0
        assert data["svg"].count("<path ") == 1

    def test_vectorize_empty(self, client):
        data = client.post("/api/ascii/vectorize", json={"ascii": ""}).json()
        assert data == {"svg": "", "rect_count": 0}


class TestExport:
    def test_svg_is_minified(self, client):
        response = client.post("/api/export/svg", json={"svg": "<svg>\n  <path d=\"M 0,0\" />\n</svg>"})
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert response.text == '<svg> <path d="M 0,0" /> </svg>'

    def test_png(self, client, small_canvas, white_rasterizer):
        app.dependency_overrides[get_render_backend] = lambda: white_rasterizer
        response = client.post("/api/export/png", json={"settings": LOTUS_SETTINGS})
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        image = Image.open(io.BytesIO(response.content))
        assert image.size == (60, 60)
        assert image.mode == "RGB"
        assert white_rasterizer.calls == [(60, 60)]

    def test_png_unavailable(self, client, small_canvas, failing_rasterizer):
        app.dependency_overrides[get_render_backend] = lambda: failing_rasterizer
        response = client.post("/api/export/png", json={})
        assert response.status_code == 204

    def test_ascii_text(self, client):
        response = client.post("/api/export/ascii", json={"ascii": "a\nb\n"})
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "a\nb"
