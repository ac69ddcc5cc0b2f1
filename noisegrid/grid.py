from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import numpy as np

from noisegrid.resolver import Sampler

Shift = tuple[float, float, float, float]


def axis_positions(n: int, *, tileable: bool, shift: float, count: int | None = None) -> np.ndarray:
    """Coordinates of grid indices 0..count-1 along one axis of an n-cell grid.

    Tileable: `i / n + shift` (one unit per grid). Otherwise
    `(i / n) * 2 - 1 + shift` (a centred [-1, 1) window).
    """

    n = int(n)
    count = n if count is None else int(count)
    if n <= 0:
        return np.zeros(0, dtype=np.float64)
    t = np.arange(count, dtype=np.float64) / float(n)
    if tileable:
        return t + float(shift)
    return t * 2.0 - 1.0 + float(shift)


def grid_coordinate(
    ix: int,
    iy: int,
    n: int,
    *,
    tileable: bool,
    shift: Shift,
    dimension: int,
) -> np.ndarray:
    """The coordinate vector sampled for grid cell (ix, iy).

    Indices at or beyond `n` are allowed; they extend the same mapping.
    """

    n = int(n)
    if n <= 0:
        raise ValueError("n must be > 0")
    x = float(ix) / n
    y = float(iy) / n
    if not tileable:
        x = x * 2.0 - 1.0
        y = y * 2.0 - 1.0
    point = [x + float(shift[0]), y + float(shift[1]), float(shift[2]), float(shift[3])]
    return np.asarray(point[: int(dimension)], dtype=np.float64)


def _row_coords(
    x: float, ys: np.ndarray, *, shift: Shift, dimension: int
) -> np.ndarray:
    coords = np.empty((ys.shape[0], dimension), dtype=np.float64)
    coords[:, 0] = x
    coords[:, 1] = ys
    if dimension >= 3:
        coords[:, 2] = float(shift[2])
    if dimension == 4:
        coords[:, 3] = float(shift[3])
    return coords


def _fill_rows(
    sampler: Sampler,
    values_out: np.ndarray,
    xs: np.ndarray,
    ys: np.ndarray,
    rows: range,
    shift: Shift,
) -> None:
    n = ys.shape[0]
    for ix in rows:
        coords = _row_coords(float(xs[ix]), ys, shift=shift, dimension=sampler.dimension)
        values_out[ix * n : (ix + 1) * n] = sampler.fn(coords)


def fill(
    sampler: Sampler,
    values_out: np.ndarray,
    n: int,
    tileable: bool,
    shift: Shift,
    *,
    workers: int = 1,
) -> None:
    """Evaluate `sampler` over an n x n grid into `values_out` in place.

    Cell (ix, iy) lands at index `ix * n + iy`. Wide samplers are evaluated
    in one batch; scalar samplers one grid row at a time, optionally spread
    over `workers` threads that each own a disjoint block of rows. Every
    mode writes the same values.
    """

    n = int(n)
    if n < 0:
        raise ValueError("n must be >= 0")
    if not isinstance(values_out, np.ndarray):
        raise TypeError(f"values_out must be a numpy array, got {type(values_out).__name__}")
    if values_out.ndim != 1 or values_out.shape[0] != n * n:
        raise ValueError(
            f"values_out has shape {values_out.shape}, expected ({n * n},)"
        )
    if n == 0:
        return

    xs = axis_positions(n, tileable=tileable, shift=shift[0])
    ys = axis_positions(n, tileable=tileable, shift=shift[1])

    if sampler.wide:
        coords = np.empty((n, n, sampler.dimension), dtype=np.float64)
        coords[..., 0] = xs[:, None]
        coords[..., 1] = ys[None, :]
        if sampler.dimension >= 3:
            coords[..., 2] = float(shift[2])
        if sampler.dimension == 4:
            coords[..., 3] = float(shift[3])
        values_out[:] = sampler.fn(coords).reshape(-1)
        return

    workers = max(int(workers), 1)
    if workers == 1 or n < 2:
        _fill_rows(sampler, values_out, xs, ys, range(n), shift)
        return

    step = -(-n // workers)
    blocks = [range(start, min(start + step, n)) for start in range(0, n, step)]
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(_fill_rows, sampler, values_out, xs, ys, rows, shift)
            for rows in blocks
        ]
        for future in futures:
            future.result()
