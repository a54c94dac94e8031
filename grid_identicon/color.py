"""HSL color model.

Implements the CSS3 HSL to RGB conversion
(http://www.w3.org/TR/css3-color/#hsl-color). Hue is given in degrees,
saturation and luminance in percent; the result is an 8-bit RGB triple.
"""

import math
from dataclasses import dataclass

from grid_identicon.types import RGB
from grid_identicon.utils.math import clamp


@dataclass(frozen=True)
class HSL:
    """Hue / saturation / luminance triple.

    Attributes:
        hue: Degrees, nominally in ``[0, 360)``.
        sat: Saturation percentage in ``[0, 100]``.
        lum: Luminance percentage in ``[0, 100]``.
    """

    hue: float
    sat: float
    lum: float

    def rgb(self) -> RGB:
        """Convert to an 8-bit RGB triple."""
        hue = self.hue / 360.0
        sat = self.sat / 100.0
        lum = self.lum / 100.0

        if lum <= 0.5:
            b = lum * (sat + 1.0)
        else:
            b = lum + sat - lum * sat
        a = lum * 2.0 - b

        r = hue_to_rgb(a, b, hue + 1.0 / 3.0)
        g = hue_to_rgb(a, b, hue)
        bl = hue_to_rgb(a, b, hue - 1.0 / 3.0)
        return (to_channel(r), to_channel(g), to_channel(bl))


def hue_to_rgb(a: float, b: float, hue: float) -> float:
    """Piecewise channel value for a hue offset already shifted per channel."""
    h = hue
    if h < 0.0:
        h += 1.0
    elif h >= 1.0:
        h -= 1.0

    if h < 1.0 / 6.0:
        return a + (b - a) * 6.0 * h
    if h < 1.0 / 2.0:
        return b
    if h < 2.0 / 3.0:
        return a + (b - a) * (2.0 / 3.0 - h) * 6.0
    return a


def to_channel(value: float) -> int:
    """Scale a ``[0, 1]`` channel to ``0..255``, rounding half away from zero."""
    return clamp(int(math.floor(value * 255.0 + 0.5)), 0, 255)
