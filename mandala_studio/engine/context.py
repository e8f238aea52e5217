"""GenerationContext — the state flowing through one generate() call.

Settings are read-only; the only thing that grows is the path buffer.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from mandala_studio.models.settings import MandalaSettings


class PathBuffer:
    """Ordered, append-only list of path-data strings.

    The index returned by ``append`` is the path's position in the whole
    emission sequence; stroke jitter is keyed on it.
    """

    def __init__(self) -> None:
        self._paths: list[str] = []

    def append(self, path: str) -> int:
        self._paths.append(path)
        return len(self._paths) - 1

    def extend(self, paths: list[str]) -> None:
        for p in paths:
            self.append(p)

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[tuple[int, str]]:
        return iter(enumerate(self._paths))

    def __getitem__(self, index: int) -> str:
        return self._paths[index]

    def snapshot(self) -> list[str]:
        return list(self._paths)


@dataclass(frozen=True)
class RingFrame:
    """Geometry of one ring, computed once and handed to the variant handler."""

    ring: int
    radius: float
    angle_offset: float


@dataclass
class GenerationContext:
    settings: MandalaSettings
    width: float
    height: float
    paths: PathBuffer = field(default_factory=PathBuffer)

    @property
    def cx(self) -> float:
        return self.width / 2

    @property
    def cy(self) -> float:
        return self.height / 2

    @property
    def angle_step(self) -> float:
        segments = self.settings.segments
        return 360 / segments if segments > 0 else 0.0

    @property
    def ring_step(self) -> float:
        s = self.settings
        if s.rings <= 0:
            return 0.0
        return (s.radius / s.rings) * s.spacing_multiplier

    def frame(self, ring: int) -> RingFrame:
        s = self.settings
        radius = self.ring_step * ring
        if ring == 1:
            radius *= s.center_scale
        offset = self.angle_step / 2 if s.segment_offset and ring % 2 == 0 else 0.0
        return RingFrame(ring=ring, radius=radius, angle_offset=offset)

    def segment_angles(self, frame: RingFrame) -> Iterator[tuple[int, float]]:
        """(segment index, unrotated angle) for every segment of the ring."""
        for segment in range(max(self.settings.segments, 0)):
            yield segment, segment * self.angle_step + frame.angle_offset
