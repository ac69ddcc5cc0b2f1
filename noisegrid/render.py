from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Any

import numpy as np

from noisegrid.appconfig import AppConfig
from noisegrid.cache import ValueCache
from noisegrid.config import Settings
from noisegrid.grid import fill
from noisegrid.normalize import normalize_into
from noisegrid.resolver import Unsupported, resolve
from noisegrid.settings import reset_field, set_field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Frame:
    """What the display sink receives after a render pass."""

    rgb: np.ndarray
    values: np.ndarray
    size: int
    sample_success: bool
    elapsed: float
    message: str | None = None

    @property
    def gray(self) -> np.ndarray:
        """size x size grid of 8-bit intensities, row-major."""
        return self.rgb[..., 0]


def _frame_from_cache(
    cache: ValueCache, *, success: bool, elapsed: float, message: str | None
) -> Frame:
    side = math.isqrt(cache.size)
    return Frame(
        rgb=cache.pixels.reshape(side, side, 3).copy(),
        values=cache.values.reshape(side, side).copy(),
        size=side,
        sample_success=success,
        elapsed=elapsed,
        message=message,
    )


class NoiseView:
    """Settings, cached buffers and render-loop bookkeeping for one preview.

    `render()` recomputes only when a tracked field changed since the last
    pass; otherwise it hands back the previous frame untouched.
    """

    def __init__(self, settings: Settings | None = None, *, app_config: AppConfig | None = None):
        self.settings = Settings() if settings is None else settings
        self.app_config = AppConfig() if app_config is None else app_config
        self.cache = ValueCache()
        self.elapsed = 0.0
        self.sample_success = True
        self.passes = 0
        self.frame: Frame | None = None

    def set(self, name: str, value: Any) -> bool:
        return set_field(self.settings, self.cache, name, value)

    def reset(self, name: str) -> bool:
        return reset_field(self.settings, self.cache, name)

    def mark_dirty(self) -> None:
        self.cache.mark_dirty()

    def render(self) -> Frame:
        if not self.cache.is_dirty() and self.frame is not None:
            return self.frame

        self.passes += 1
        config = self.settings.config
        viewport = self.settings.viewport
        n = int(viewport.resolution)

        sampler = resolve(config, viewport.dimension, viewport.simd)
        if isinstance(sampler, Unsupported):
            logger.info(
                "unsupported %s in %dD (simd=%s): %s",
                sampler.kind,
                sampler.dimension,
                sampler.simd,
                sampler.reason,
            )
            if self.frame is None:
                # Nothing shown yet: a sentinel-filled placeholder of the requested size.
                self.cache.resize(n * n)
            self.sample_success = False
            self.cache.clear_dirty()
            self.frame = _frame_from_cache(
                self.cache, success=False, elapsed=self.elapsed, message=sampler.message
            )
            return self.frame

        self.cache.resize(n * n)
        start = time.perf_counter()
        fill(
            sampler,
            self.cache.values,
            n,
            bool(config.tileable),
            viewport.shift,
            workers=self.app_config.workers,
        )
        normalize_into(self.cache.values, self.cache.pixels, config.kind)
        self.elapsed = time.perf_counter() - start

        self.sample_success = True
        self.cache.clear_dirty()
        logger.debug(
            "sampled %s %dD %dx%d (simd=%s) in %.2f ms",
            config.kind,
            viewport.dimension,
            n,
            n,
            viewport.simd,
            self.elapsed * 1000.0,
        )
        self.frame = _frame_from_cache(
            self.cache, success=True, elapsed=self.elapsed, message=None
        )
        return self.frame
