from __future__ import annotations

import math

import numpy as np

from .core import grad_from_hash, grad_table, hash_lattice, make_permutation

IMPROVE_MODES = ("none", "xy", "xz")

_ROOT3 = 0.577350269189626
_SKEW_PLANE = -0.211324865405187


def _check_dim(p: np.ndarray) -> int:
    if p.ndim == 0 or p.shape[-1] not in (2, 3, 4):
        raise ValueError("coordinates must have a trailing axis of length 2, 3 or 4")
    return int(p.shape[-1])


def _simplex_lattice(
    p: np.ndarray,
    *,
    seed: int,
    r2: float,
    exponent: int,
    grads: str,
    salt: int,
    scale: float,
) -> np.ndarray:
    p = np.asarray(p, dtype=np.float64)
    n = _check_dim(p)
    perm = make_permutation(int(seed))
    table = grad_table(n, grads)

    skew = (math.sqrt(n + 1.0) - 1.0) / n
    unskew = (1.0 - 1.0 / math.sqrt(n + 1.0)) / n

    s = np.sum(p, axis=-1, keepdims=True) * skew
    base = np.floor(p + s)
    t = np.sum(base, axis=-1, keepdims=True) * unskew
    x0 = p - (base - t)
    base = base.astype(np.int64)

    # Vertex k of the containing simplex steps along the k largest axes of x0.
    order = np.argsort(-x0, axis=-1, kind="stable")
    offset = np.zeros_like(x0)

    out = np.zeros(p.shape[:-1], dtype=np.float64)
    for k in range(n + 1):
        if k > 0:
            np.put_along_axis(offset, order[..., k - 1 : k], 1.0, axis=-1)
        xk = x0 - offset + k * unskew
        falloff = np.maximum(r2 - np.sum(xk * xk, axis=-1), 0.0)

        lattice = base + offset.astype(np.int64)
        cells = [lattice[..., a] & 255 for a in range(n)]
        g = grad_from_hash(hash_lattice(perm, cells, salt), table)
        out += falloff**exponent * np.sum(g * xk, axis=-1)
    return out * scale


_SIMPLEX_R2 = {2: 0.5, 3: 0.6, 4: 0.6}
_SIMPLEX_SCALE = {2: 99.8, 3: 32.7, 4: 27.0}

_OS2_SCALE = {2: 99.8, 3: 76.0, 4: 62.0}
_OS2S_SCALE = {2: 38.0, 3: 18.0, 4: 15.0}


def simplex_noise(p: np.ndarray, *, seed: int = 0) -> np.ndarray:
    """Classic N-D simplex noise (Gustavson kernel radii), roughly [-1, 1]."""
    n = _check_dim(np.asarray(p))
    return _simplex_lattice(
        p,
        seed=seed,
        r2=_SIMPLEX_R2[n],
        exponent=4,
        grads="lattice",
        salt=0,
        scale=_SIMPLEX_SCALE[n],
    )


def open_simplex_2(p: np.ndarray, *, seed: int = 0) -> np.ndarray:
    """OpenSimplex2-style noise: tight kernel and a dense spherical gradient set."""
    n = _check_dim(np.asarray(p))
    return _simplex_lattice(
        p,
        seed=seed,
        r2=0.5,
        exponent=4,
        grads="sphere",
        salt=17,
        scale=_OS2_SCALE[n],
    )


def open_simplex_2s(p: np.ndarray, *, seed: int = 0) -> np.ndarray:
    """OpenSimplex2S-style noise: softer cubic falloff, smoother output."""
    n = _check_dim(np.asarray(p))
    return _simplex_lattice(
        p,
        seed=seed,
        r2=_SIMPLEX_R2[n],
        exponent=3,
        grads="sphere",
        salt=53,
        scale=_OS2S_SCALE[n],
    )


def improve_3d(p: np.ndarray, mode: str) -> np.ndarray:
    """Rotate 3D coordinates so one lattice plane family aligns with XY or XZ.

    `none` leaves the coordinates untouched.
    """

    mode = str(mode)
    if mode not in IMPROVE_MODES:
        raise ValueError(f"unknown improve mode: {mode}")
    p = np.asarray(p, dtype=np.float64)
    if mode == "none":
        return p
    if p.shape[-1] != 3:
        raise ValueError("improve_3d expects 3D coordinates")

    x = p[..., 0]
    y = p[..., 1]
    z = p[..., 2]
    if mode == "xy":
        xy = x + y
        s2 = xy * _SKEW_PLANE
        zz = z * _ROOT3
        return np.stack([x + s2 + zz, y + s2 + zz, xy * -_ROOT3 + zz], axis=-1)

    xz = x + z
    s2 = xz * _SKEW_PLANE
    yy = y * _ROOT3
    return np.stack([x + s2 + yy, xz * -_ROOT3 + yy, z + s2 + yy], axis=-1)
