from __future__ import annotations

import math

import numpy as np

from .core import (
    corner_offsets,
    fade,
    grad_from_hash,
    grad_table,
    hash_lattice,
    make_permutation,
    split_coords,
)


def perlin_noise(p: np.ndarray, *, seed: int = 0) -> np.ndarray:
    """N-D Perlin gradient noise, scaled to roughly [-1, 1].

    With unit gradients the peak amplitude is sqrt(dim) / 2, hence the
    2 / sqrt(dim) output scale.
    """

    cell, frac, dim = split_coords(p)
    perm = make_permutation(int(seed))
    table = grad_table(dim)
    t = fade(frac)

    out = np.zeros(frac.shape[:-1], dtype=np.float64)
    for corner in corner_offsets(dim):
        cells = [(cell[..., a] + c) & 255 for a, c in enumerate(corner)]
        g = grad_from_hash(hash_lattice(perm, cells), table)
        d = frac - np.asarray(corner, dtype=np.float64)
        dot = np.sum(g * d, axis=-1)

        weight = np.ones_like(out)
        for a, c in enumerate(corner):
            weight = weight * (t[..., a] if c else 1.0 - t[..., a])
        out += weight * dot
    return out * (2.0 / math.sqrt(dim))
