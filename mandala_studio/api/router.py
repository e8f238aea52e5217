"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from mandala_studio.api import ascii, export, health, pattern

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(pattern.router)
api_router.include_router(ascii.router)
api_router.include_router(export.router)
