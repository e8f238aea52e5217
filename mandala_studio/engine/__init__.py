"""Mandala pattern engine."""

from mandala_studio.engine.registry import pattern, get_registry, load_builtin_patterns
from mandala_studio.engine.context import GenerationContext, PathBuffer, RingFrame
from mandala_studio.engine.generator import MandalaGenerator, generate_mandala

__all__ = [
    "pattern",
    "get_registry",
    "load_builtin_patterns",
    "GenerationContext",
    "PathBuffer",
    "RingFrame",
    "MandalaGenerator",
    "generate_mandala",
]
