"""Deterministic grid identicons.

Renders a small, horizontally symmetric sprite from an arbitrary byte source
(usually a hash digest). The pipeline is pure and deterministic:

* :mod:`grid_identicon.color` converts the derived HSL color to RGB.
* :mod:`grid_identicon.nibbles` streams 4-bit fill decisions.
* :mod:`grid_identicon.canvas` paints rectangles onto a NumPy pixel buffer.
* :mod:`grid_identicon.identicon` ties them together.

Obtaining the bytes (hashing) and encoding the result (PNG, ...) are left to
the caller; :meth:`Identicon.image` hands off a Pillow image for the latter.
"""

from .canvas import fill_rect, new_canvas, to_image
from .color import HSL
from .geometry import BACKGROUND, DEFAULT_GEOMETRY, DEFAULT_SIZE, Geometry
from .identicon import (
    MIN_SOURCE_LENGTH,
    Identicon,
    NibbleExhaustedError,
    SourceTooShortError,
    render_identicon,
)
from .nibbles import Nibbler

__all__ = [
    "BACKGROUND",
    "DEFAULT_GEOMETRY",
    "DEFAULT_SIZE",
    "Geometry",
    "HSL",
    "Identicon",
    "MIN_SOURCE_LENGTH",
    "NibbleExhaustedError",
    "Nibbler",
    "SourceTooShortError",
    "fill_rect",
    "new_canvas",
    "render_identicon",
    "to_image",
]
