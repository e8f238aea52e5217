"""Pattern registry — every pattern variant is a ring handler registered via decorator.

Usage:
    @pattern(name="lotus", description="Sacred flower patterns")
    def lotus(ctx: GenerationContext, frame: RingFrame) -> None:
        for angle in ctx.segment_angles(frame):
            ctx.paths.append(lotus_petal(...))

Adding a new variant = creating one module under engine/patterns with the
decorator. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from mandala_studio.engine.context import GenerationContext, RingFrame

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "traditional"

RingHandler = Callable[["GenerationContext", "RingFrame"], None]


@dataclass
class PatternSpec:
    name: str
    fn: RingHandler
    # Per-path stroke-width jitter keyed on the global emission index.
    variable_stroke: bool = False
    description: str = ""


class PatternRegistry:
    """Singleton registry of all pattern variants."""

    def __init__(self) -> None:
        self._patterns: dict[str, PatternSpec] = {}

    def register(self, spec: PatternSpec) -> None:
        if spec.name in self._patterns:
            raise ValueError(f"Duplicate pattern name: {spec.name}")
        self._patterns[spec.name] = spec
        logger.debug("Registered pattern %s", spec.name)

    def get(self, name: str) -> PatternSpec:
        return self._patterns[name]

    def resolve(self, name: str) -> PatternSpec:
        """Look up ``name``, falling back to the default variant."""
        spec = self._patterns.get(name)
        if spec is not None:
            return spec
        logger.debug("Unknown pattern %r, using %s", name, DEFAULT_PATTERN)
        return self._patterns[DEFAULT_PATTERN]

    def names(self) -> list[str]:
        return list(self._patterns)

    def all(self) -> list[PatternSpec]:
        return list(self._patterns.values())

    def __contains__(self, name: object) -> bool:
        return name in self._patterns

    @property
    def count(self) -> int:
        return len(self._patterns)


# Module-level singleton
_registry = PatternRegistry()


def get_registry() -> PatternRegistry:
    return _registry


def pattern(
    *,
    name: str,
    variable_stroke: bool = False,
    description: str = "",
):
    """Decorator to register a ring handler."""

    def decorator(fn: RingHandler):
        _registry.register(
            PatternSpec(
                name=name,
                fn=fn,
                variable_stroke=variable_stroke,
                description=description,
            )
        )
        return fn

    return decorator


def load_builtin_patterns() -> None:
    """Import every module in engine.patterns so @pattern decorators fire."""
    import importlib
    import pkgutil

    package = importlib.import_module("mandala_studio.engine.patterns")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")
