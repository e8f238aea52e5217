"""FastAPI dependency injection."""

from __future__ import annotations

from mandala_studio.ascii.pipeline import AsciiPipeline
from mandala_studio.config import Settings, settings
from mandala_studio.utils.rasterizer import Rasterizer, get_rasterizer

# One ASCII output slot for the app; a newer request supersedes an older one.
_ascii_pipeline = AsciiPipeline()


def get_settings() -> Settings:
    return settings


def get_render_backend() -> Rasterizer:
    return get_rasterizer()


def get_ascii_pipeline() -> AsciiPipeline:
    return _ascii_pipeline
