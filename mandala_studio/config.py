"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from mandala_studio.models.settings import DEFAULT_CHARSET


class Settings(BaseSettings):
    mandala_env: str = "development"
    mandala_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Generation canvas
    canvas_width: int = 800
    canvas_height: int = 800

    # PNG export renders at this multiple of the canvas size
    png_export_scale: int = 3

    default_charset: str = DEFAULT_CHARSET

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
