from __future__ import annotations

import numpy as np

from .core import (
    corner_offsets,
    cubic_weights,
    fade,
    hash_lattice,
    hash_to_signed,
    make_permutation,
    split_coords,
)


def value_noise(p: np.ndarray, *, seed: int = 0) -> np.ndarray:
    """N-D value noise (lattice values + quintic interpolation), in [-1, 1].

    `p` has shape (..., dim) with dim in {2, 3, 4}.
    """

    cell, frac, dim = split_coords(p)
    perm = make_permutation(int(seed))
    t = fade(frac)

    out = np.zeros(frac.shape[:-1], dtype=np.float64)
    for corner in corner_offsets(dim):
        cells = [(cell[..., a] + c) & 255 for a, c in enumerate(corner)]
        weight = np.ones_like(out)
        for a, c in enumerate(corner):
            weight = weight * (t[..., a] if c else 1.0 - t[..., a])
        out += weight * hash_to_signed(hash_lattice(perm, cells))
    return out


# Catmull-Rom overshoots the lattice range; these keep the output near [-1, 1].
_CUBIC_BOUNDING = {2: 1.0 / (1.5 * 1.5), 3: 1.0 / (1.5 * 1.5 * 1.5)}


def value_cubic_noise(p: np.ndarray, *, seed: int = 0) -> np.ndarray:
    """Value noise with cubic interpolation over a 4^dim neighbourhood (2D/3D)."""

    cell, frac, dim = split_coords(p)
    if dim not in _CUBIC_BOUNDING:
        raise ValueError("value_cubic_noise supports 2D and 3D only")
    perm = make_permutation(int(seed))
    weights = [cubic_weights(frac[..., a]) for a in range(dim)]

    out = np.zeros(frac.shape[:-1], dtype=np.float64)
    for corner in corner_offsets(dim, (-1, 0, 1, 2)):
        cells = [(cell[..., a] + c) & 255 for a, c in enumerate(corner)]
        weight = np.ones_like(out)
        for a, c in enumerate(corner):
            weight = weight * weights[a][c + 1]
        out += weight * hash_to_signed(hash_lattice(perm, cells))
    return out * _CUBIC_BOUNDING[dim]
