"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mandala_studio.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.mandala_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Mandala Studio",
        description="Parametric mandala generation, ASCII conversion and glyph vectorization",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all pattern modules to trigger registration
    from mandala_studio.engine.registry import load_builtin_patterns

    load_builtin_patterns()

    from mandala_studio.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
