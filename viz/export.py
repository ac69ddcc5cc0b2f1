from __future__ import annotations

import io

import numpy as np
from PIL import Image, ImageDraw, ImageFont


def frame_to_image(rgb: np.ndarray) -> Image.Image:
    """Wrap an (n, n, 3) uint8 pixel grid as an RGB image."""

    rgb = np.asarray(rgb)
    if rgb.ndim != 3 or rgb.shape[2] != 3:
        raise ValueError("expected an (h, w, 3) array")
    return Image.fromarray(np.ascontiguousarray(rgb, dtype=np.uint8))


def gray_to_png_bytes(gray: np.ndarray) -> bytes:
    """Encode an 8-bit intensity grid as a grayscale PNG (no rescaling)."""

    gray = np.asarray(gray)
    if gray.ndim != 2:
        raise ValueError("expected a 2D array")

    out = io.BytesIO()
    Image.fromarray(np.ascontiguousarray(gray, dtype=np.uint8)).save(out, format="PNG")
    return out.getvalue()


def image_to_png_bytes(img: Image.Image) -> bytes:
    out = io.BytesIO()
    img.save(out, format="PNG")
    return out.getvalue()


def _font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    return ImageFont.load_default(size=size)


def tiles_preview(img: Image.Image, *, label: bool = True) -> Image.Image:
    """Repeat `img` in a 2x2 mosaic so tiling seams are visible.

    Each copy gets a numbered marker (0..3) at its centre.
    """

    w, h = img.size
    out = Image.new("RGB", (w * 2, h * 2))
    for i in range(4):
        out.paste(img, ((i % 2) * w, (i // 2) * h))

    if not label or w == 0 or h == 0:
        return out

    draw = ImageDraw.Draw(out)
    radius = max(min(w, h) // 8, 4)
    font = _font(max(radius, 8))
    for i in range(4):
        cx = (i % 2) * w + w // 2
        cy = (i // 2) * h + h // 2
        draw.ellipse((cx - radius, cy - radius, cx + radius, cy + radius), fill=(0, 0, 0))
        draw.text((cx, cy), str(i), fill=(255, 255, 255), font=font, anchor="mm")
    return out


def unsupported_overlay(img: Image.Image, message: str) -> Image.Image:
    """Draw `message` in a black box centred over a copy of `img`."""

    out = img.convert("RGB").copy()
    w, h = out.size
    if w == 0 or h == 0:
        return out

    draw = ImageDraw.Draw(out)
    font = _font(14)
    left, top, right, bottom = draw.textbbox((0, 0), message, font=font)
    tw = right - left
    th = bottom - top
    pad = 5
    box = (
        w // 2 - tw // 2 - pad,
        h // 2 - th // 2 - pad,
        w // 2 + tw // 2 + pad,
        h // 2 + th // 2 + pad,
    )
    draw.rounded_rectangle(box, radius=5, fill=(0, 0, 0))
    draw.text((w // 2, h // 2), message, fill=(255, 255, 255), font=font, anchor="mm")
    return out
