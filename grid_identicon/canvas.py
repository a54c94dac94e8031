"""Pixel canvas primitives.

The canvas is a NumPy ``uint8`` array of shape ``(size, size, 3)`` addressed
``canvas[y, x]`` with the origin at the top-left corner. Pillow is only used
at the output boundary, in :func:`to_image`.
"""

import numpy as np
from PIL import Image

from grid_identicon.types import RGB, Canvas


def new_canvas(size: int, color: RGB) -> Canvas:
    """Allocate a square canvas with every pixel set to ``color``."""
    if size <= 0:
        raise ValueError(f"Canvas size must be positive, got {size}")
    canvas: Canvas = np.empty((size, size, 3), dtype=np.uint8)
    canvas[...] = np.asarray(color, dtype=np.uint8)
    return canvas


def fill_rect(canvas: Canvas, x0: int, y0: int, x1: int, y1: int, color: RGB) -> None:
    """Paint the half-open rectangle ``[x0, x1) x [y0, y1)`` in place."""
    canvas[y0:y1, x0:x1] = np.asarray(color, dtype=np.uint8)


def to_image(canvas: Canvas) -> Image.Image:
    """Wrap a canvas as an RGB Pillow image for external encoders."""
    return Image.fromarray(np.ascontiguousarray(canvas))
