import io

import numpy as np
import pytest
from PIL import Image

from viz.export import (
    frame_to_image,
    gray_to_png_bytes,
    image_to_png_bytes,
    tiles_preview,
    unsupported_overlay,
)
from viz.figures import value_histogram


def _rgb(n: int = 8) -> np.ndarray:
    g = (np.arange(n * n) % 256).astype(np.uint8).reshape(n, n)
    return np.repeat(g[..., None], 3, axis=-1)


def test_gray_to_png_bytes_roundtrip():
    z = np.arange(12, dtype=np.uint8).reshape(3, 4)
    data = gray_to_png_bytes(z)
    assert data[:8] == b"\x89PNG\r\n\x1a\n"

    img = Image.open(io.BytesIO(data))
    assert img.size == (4, 3)
    assert np.array_equal(np.array(img), z)


def test_gray_to_png_bytes_rejects_rgb():
    with pytest.raises(ValueError):
        gray_to_png_bytes(_rgb())


def test_frame_to_image_and_png():
    img = frame_to_image(_rgb())
    assert img.mode == "RGB"
    assert img.size == (8, 8)
    data = image_to_png_bytes(img)
    assert data[:8] == b"\x89PNG\r\n\x1a\n"
    with pytest.raises(ValueError):
        frame_to_image(np.zeros((4, 4)))


def test_tiles_preview_doubles_each_side():
    img = frame_to_image(_rgb(64))
    out = tiles_preview(img, label=False)
    assert out.size == (128, 128)
    arr = np.array(out)
    assert np.array_equal(arr[:64, :64], arr[64:, 64:])
    assert np.array_equal(arr[:64, :64], np.array(img))

    labelled = tiles_preview(img)
    assert labelled.size == (128, 128)
    # Markers are black discs; sample one left of the digit.
    assert tuple(np.array(labelled)[32, 32 - 6]) == (0, 0, 0)


def test_unsupported_overlay_keeps_size_and_input():
    img = frame_to_image(np.full((64, 64, 3), 200, dtype=np.uint8))
    out = unsupported_overlay(img, "not available")
    assert out.size == img.size
    assert (np.array(img) == 200).all()
    assert (np.array(out) == 0).any()


def test_value_histogram_trace():
    fig = value_histogram(np.linspace(-1.0, 1.0, 50).reshape(5, 10))
    assert len(fig.data) == 1
    assert len(fig.data[0].x) == 50
