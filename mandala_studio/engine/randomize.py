"""Reproducible randomization of mandala settings.

All draws come from the caller's ``random.Random`` so a given RNG state
always yields the same settings.
"""

from __future__ import annotations

import math
import random

from mandala_studio.models.settings import MandalaSettings

_SEED_SCALE = 10000


def draw_seed(rng: random.Random) -> float:
    return rng.random() * _SEED_SCALE


def default_settings(rng: random.Random) -> MandalaSettings:
    return MandalaSettings(seed=draw_seed(rng))


def randomize(settings: MandalaSettings, rng: random.Random) -> MandalaSettings:
    """Re-roll the geometry knobs; colors, dash and pattern type are kept."""
    # Draw order is part of the contract: same RNG state, same result.
    return settings.merge(
        seed=draw_seed(rng),
        segments=6 + math.floor(rng.random() * 19),
        rings=3 + math.floor(rng.random() * 8),
        petal_curvature=0.2 + rng.random() * 0.8,
        detail_density=rng.random(),
        ornament_complexity=rng.random(),
        rotation_offset=math.floor(rng.random() * 360),
        segment_offset=rng.random() > 0.5,
        spacing_multiplier=0.8 + rng.random() * 0.4,
        center_scale=0.7 + rng.random() * 0.6,
    )
