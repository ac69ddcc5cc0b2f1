from __future__ import annotations

import logging

import numpy as np

logger = logging.getLogger(__name__)

# Freshly allocated pixels show up magenta until a fill overwrites them.
SENTINEL_RGB = (255, 0, 255)


class ValueCache:
    """Raw scalar buffer plus derived RGB pixels, reused across render passes.

    `values` is float32 of length `size`; `pixels` is uint8 shaped
    (size, 3). Buffers are reallocated only when the requested size changes.
    """

    def __init__(self) -> None:
        self.values = np.zeros(0, dtype=np.float32)
        self.pixels = np.zeros((0, 3), dtype=np.uint8)
        self.size = 0
        self.allocations = 0
        self._dirty = True

    def resize(self, new_size: int) -> bool:
        new_size = int(new_size)
        if new_size < 0:
            raise ValueError("size must be >= 0")
        if new_size == self.size:
            return False

        self.values = np.zeros(new_size, dtype=np.float32)
        self.pixels = np.empty((new_size, 3), dtype=np.uint8)
        self.pixels[:] = SENTINEL_RGB
        self.size = new_size
        self.allocations += 1
        logger.debug("cache reallocated for %d cells", new_size)
        return True

    def mark_dirty(self) -> None:
        self._dirty = True

    def is_dirty(self) -> bool:
        return self._dirty

    def clear_dirty(self) -> None:
        self._dirty = False

    def gray(self) -> np.ndarray:
        """Intensity of every cell (all channels carry the same gray)."""
        return self.pixels[:, 0]
