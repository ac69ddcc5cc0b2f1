from __future__ import annotations

from typing import Protocol

import numpy as np

from .core import lerp

FRACTALS = ("none", "fbm", "ridged", "ping_pong")


class Kernel(Protocol):
    def __call__(self, p: np.ndarray, *, seed: int) -> np.ndarray:  # pragma: no cover
        ...


def fractal_bounding(octaves: int, gain: float) -> float:
    """1 / sum of octave amplitudes, keeping layered output in the base range."""
    amp = float(gain)
    total = 1.0
    for _ in range(1, max(int(octaves), 1)):
        total += amp
        amp *= float(gain)
    if total == 0.0:
        return 1.0
    return 1.0 / total


def ping_pong(t: np.ndarray) -> np.ndarray:
    """Triangle wave folding t into [0, 1] with period 2."""
    t = np.asarray(t, dtype=np.float64)
    t = t - np.trunc(t * 0.5) * 2.0
    return np.where(t < 1.0, t, 2.0 - t)


def layered(
    kernel: Kernel,
    p: np.ndarray,
    *,
    seed: int,
    fractal: str,
    octaves: int = 3,
    lacunarity: float = 2.0,
    gain: float = 0.5,
    weighted_strength: float = 0.0,
    ping_pong_strength: float = 2.0,
) -> np.ndarray:
    """Combine octaves of `kernel` with the given fractal strategy.

    Each octave increments the seed and scales the coordinates by
    `lacunarity`; amplitudes shrink by `gain` and, with a non-zero
    `weighted_strength`, by the previous octave's value.
    """

    fractal = str(fractal)
    if fractal not in FRACTALS:
        raise ValueError(f"unknown fractal: {fractal}")

    p = np.asarray(p, dtype=np.float64)
    seed = int(seed)
    if fractal == "none":
        return kernel(p, seed=seed)

    octaves = max(int(octaves), 1)
    lacunarity = float(lacunarity)
    gain = float(gain)
    weighted_strength = float(weighted_strength)
    ping_pong_strength = float(ping_pong_strength)

    total = np.zeros(p.shape[:-1], dtype=np.float64)
    amp: np.ndarray | float = fractal_bounding(octaves, gain)

    for octave in range(octaves):
        noise = kernel(p, seed=seed + octave)

        if fractal == "fbm":
            total += noise * amp
            amp = amp * lerp(1.0, np.minimum(noise + 1.0, 2.0) * 0.5, weighted_strength)
        elif fractal == "ridged":
            noise = np.abs(noise)
            total += (noise * -2.0 + 1.0) * amp
            amp = amp * lerp(1.0, 1.0 - noise, weighted_strength)
        else:
            noise = ping_pong((noise + 1.0) * ping_pong_strength)
            total += (noise - 0.5) * 2.0 * amp
            amp = amp * lerp(1.0, noise, weighted_strength)

        amp = amp * gain
        p = p * lacunarity

    return total
