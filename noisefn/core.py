from __future__ import annotations

import itertools
from functools import lru_cache

import numpy as np


def fade(t: np.ndarray) -> np.ndarray:
    """Quintic fade curve used by Improved Perlin Noise (2002)."""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def lerp(a: np.ndarray, b: np.ndarray, t: np.ndarray) -> np.ndarray:
    return a + t * (b - a)


def cubic_weights(t: np.ndarray) -> tuple[np.ndarray, ...]:
    """Catmull-Rom weights for lattice offsets -1, 0, 1, 2 (they sum to 1)."""
    t2 = t * t
    t3 = t2 * t
    return (
        0.5 * (-t3 + 2.0 * t2 - t),
        0.5 * (3.0 * t3 - 5.0 * t2 + 2.0),
        0.5 * (-3.0 * t3 + 4.0 * t2 + t),
        0.5 * (t3 - t2),
    )


@lru_cache(maxsize=128)
def make_permutation(seed: int) -> np.ndarray:
    # Cached per seed; callers must treat the table as read-only.
    rng = np.random.default_rng(int(seed) & 0xFFFFFFFF)
    p = rng.permutation(256).astype(np.int64)
    table = np.concatenate([p, p])
    table.setflags(write=False)
    return table


@lru_cache(maxsize=None)
def corner_offsets(dim: int, values: tuple[int, ...] = (0, 1)) -> tuple[tuple[int, ...], ...]:
    return tuple(itertools.product(values, repeat=int(dim)))


def hash_lattice(perm: np.ndarray, cells: list[np.ndarray], salt: int = 0) -> np.ndarray:
    """Chain lattice coordinates (already wrapped to 0..255) through `perm`."""
    h = perm[(cells[0] + salt) & 255]
    for c in cells[1:]:
        h = perm[h + c]
    return h


def hash_to_signed(h: np.ndarray) -> np.ndarray:
    """Map a 0..255 hash into [-1, 1]."""
    return (np.asarray(h, dtype=np.float64) / 255.0) * 2.0 - 1.0


def split_coords(p: np.ndarray) -> tuple[np.ndarray, np.ndarray, int]:
    """Return (integer lattice cell, fractional offset, dimension) of `p`."""
    p = np.asarray(p, dtype=np.float64)
    if p.ndim == 0 or p.shape[-1] not in (2, 3, 4):
        raise ValueError("coordinates must have a trailing axis of length 2, 3 or 4")
    base = np.floor(p)
    return base.astype(np.int64), p - base, int(p.shape[-1])


_GRAD2_DIAG8 = np.array(
    [
        [1.0, 0.0],
        [-1.0, 0.0],
        [0.0, 1.0],
        [0.0, -1.0],
        [1.0, 1.0],
        [-1.0, 1.0],
        [1.0, -1.0],
        [-1.0, -1.0],
    ],
    dtype=np.float64,
)
_GRAD2_DIAG8 /= np.linalg.norm(_GRAD2_DIAG8, axis=1, keepdims=True)

_GRAD3_EDGE12 = np.array(
    [
        [1.0, 1.0, 0.0],
        [-1.0, 1.0, 0.0],
        [1.0, -1.0, 0.0],
        [-1.0, -1.0, 0.0],
        [1.0, 0.0, 1.0],
        [-1.0, 0.0, 1.0],
        [1.0, 0.0, -1.0],
        [-1.0, 0.0, -1.0],
        [0.0, 1.0, 1.0],
        [0.0, -1.0, 1.0],
        [0.0, 1.0, -1.0],
        [0.0, -1.0, -1.0],
    ],
    dtype=np.float64,
)
_GRAD3_EDGE12 /= np.linalg.norm(_GRAD3_EDGE12, axis=1, keepdims=True)

# The 32 edge midpoints of the tesseract: one zero axis, the rest +-1.
_GRAD4_EDGE32 = np.array(
    [
        [*g[:zero], 0.0, *g[zero:]]
        for zero in range(4)
        for g in itertools.product((1.0, -1.0), repeat=3)
    ],
    dtype=np.float64,
)
_GRAD4_EDGE32 /= np.linalg.norm(_GRAD4_EDGE32, axis=1, keepdims=True)


def _sphere_table(dim: int, count: int) -> np.ndarray:
    rng = np.random.default_rng(7919 * dim)
    g = rng.normal(size=(count, dim))
    g /= np.linalg.norm(g, axis=1, keepdims=True)
    return g


_GRAD_LATTICE = {2: _GRAD2_DIAG8, 3: _GRAD3_EDGE12, 4: _GRAD4_EDGE32}
_GRAD_SPHERE = {dim: _sphere_table(dim, 64) for dim in (2, 3, 4)}


def grad_table(dim: int, name: str = "lattice") -> np.ndarray:
    name = str(name)
    if name == "lattice":
        return _GRAD_LATTICE[int(dim)]
    if name == "sphere":
        return _GRAD_SPHERE[int(dim)]
    raise ValueError(f"unknown gradient set: {name}")


def grad_from_hash(h: np.ndarray, table: np.ndarray) -> np.ndarray:
    idx = (np.asarray(h) % int(table.shape[0])).astype(np.int64)
    return table[idx]
