"""ASCII regeneration with last-request-wins semantics.

Each ``regenerate`` call takes a new epoch before awaiting the render. When
the render resumes, its result is committed only if no newer call has started
in the meantime. Stale results are dropped. A failed render commits "".
"""

from __future__ import annotations

import itertools
import logging

from mandala_studio.ascii.encoder import grid_to_ascii
from mandala_studio.models.settings import AsciiSettings
from mandala_studio.utils.rasterizer import Rasterizer, sample_luminance_grid_async

logger = logging.getLogger(__name__)


class AsciiPipeline:
    """Owns one ASCII output slot."""

    def __init__(self, rasterizer: Rasterizer | None = None) -> None:
        self.rasterizer = rasterizer
        self._epochs = itertools.count(1)
        self._epoch = 0
        self.output = ""

    @property
    def epoch(self) -> int:
        return self._epoch

    def _begin(self) -> int:
        self._epoch = next(self._epochs)
        return self._epoch

    async def regenerate(
        self,
        svg: str,
        settings: AsciiSettings,
        rasterizer: Rasterizer | None = None,
    ) -> str | None:
        """Render and encode; return the committed text, or None if superseded.

        ``rasterizer`` overrides the pipeline's own backend for this call.
        """
        token = self._begin()

        if not svg or not settings.charset:
            self.output = ""
            return self.output

        grid = await sample_luminance_grid_async(
            svg, settings.columns, rasterizer or self.rasterizer
        )

        if token != self._epoch:
            logger.debug("Dropping stale ASCII render (epoch %d, current %d)", token, self._epoch)
            return None

        if grid is None:
            logger.warning("ASCII render produced no grid")
            self.output = ""
        else:
            self.output = grid_to_ascii(grid, settings)
        return self.output
