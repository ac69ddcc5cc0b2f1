from viz.export import (
    frame_to_image,
    gray_to_png_bytes,
    image_to_png_bytes,
    tiles_preview,
    unsupported_overlay,
)
from viz.figures import value_histogram

__all__ = [
    "frame_to_image",
    "gray_to_png_bytes",
    "image_to_png_bytes",
    "tiles_preview",
    "unsupported_overlay",
    "value_histogram",
]
