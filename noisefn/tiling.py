from __future__ import annotations

import math

import numpy as np


def torus_coords(
    p: np.ndarray,
    *,
    period_x: float,
    period_y: float,
    frequency: float,
) -> np.ndarray:
    """Wrap 2D coordinates onto a torus embedded in 4D.

    Each axis becomes a circle whose circumference, measured in noise units,
    is `period * frequency`; a 4D noise sampled at the result is periodic in
    x with `period_x` and in y with `period_y` while keeping the local
    feature size of `frequency`.
    """

    p = np.asarray(p, dtype=np.float64)
    if p.ndim == 0 or p.shape[-1] != 2:
        raise ValueError("torus_coords expects 2D coordinates")

    period_x = float(period_x)
    period_y = float(period_y)
    if period_x <= 0.0 or period_y <= 0.0:
        raise ValueError("period_x and period_y must be > 0")

    frequency = float(frequency)
    ax = (2.0 * math.pi / period_x) * p[..., 0]
    ay = (2.0 * math.pi / period_y) * p[..., 1]
    rx = period_x * frequency / (2.0 * math.pi)
    ry = period_y * frequency / (2.0 * math.pi)
    return np.stack(
        [rx * np.cos(ax), rx * np.sin(ax), ry * np.cos(ay), ry * np.sin(ay)],
        axis=-1,
    )
