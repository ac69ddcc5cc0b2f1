from __future__ import annotations

import numpy as np

from noisegrid.capabilities import DISTANCE, KIND_TABLE, SIGNED

# Explicit and exhaustive: a misclassified kind silently wrecks contrast.
POLICY_BY_KIND: dict[str, str] = {kind: spec.policy for kind, spec in KIND_TABLE.items()}


def _to_unit(raw: np.ndarray, policy: str) -> np.ndarray:
    if policy == SIGNED:
        return raw * 0.5 + 0.5
    if policy == DISTANCE:
        return raw
    raise ValueError(f"unknown normalization policy: {policy!r}")


def _policy(kind: str) -> str:
    try:
        return POLICY_BY_KIND[str(kind)]
    except KeyError:
        raise ValueError(f"unknown noise kind: {kind!r}") from None


def normalize(raw: float, kind: str) -> int:
    """Map one raw sample to an 8-bit intensity (0..255) for `kind`."""
    return int(to_bytes(np.asarray([raw], dtype=np.float64), kind)[0])


def to_bytes(values: np.ndarray, kind: str) -> np.ndarray:
    unit = _to_unit(np.asarray(values, dtype=np.float64), _policy(kind))
    scaled = np.nan_to_num(unit * 255.0, nan=0.0, posinf=255.0, neginf=0.0)
    return np.clip(scaled, 0.0, 255.0).astype(np.uint8)


def normalize_into(values: np.ndarray, pixels: np.ndarray, kind: str) -> None:
    """Write the gray level of every raw value into each channel of `pixels`."""
    if pixels.shape[0] != values.shape[0]:
        raise ValueError("values and pixels must have the same length")
    gray = to_bytes(values, kind)
    if pixels.ndim == 1:
        pixels[:] = gray
    else:
        pixels[:] = gray[:, None]
