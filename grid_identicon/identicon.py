"""Identicon generator.

Turns a byte source (typically a digest of some identity, e.g. the MD5 of an
email address) into a deterministic, horizontally symmetric 5x5 sprite.

Derivation:

* **Foreground color** comes from bytes 12..15. The low nibble of byte 12 and
  all of byte 13 form a 12-bit hue; bytes 14 and 15 pull saturation and
  luminance down from 65% and 75% by up to 20 points each, which keeps
  colors mid-tone.
* **Fill pattern** comes from the nibble stream over the *whole* source
  (color bytes included). Cells are visited axis column first, then outward,
  top to bottom; an even nibble fills the cell and its mirror.

The generator never copies or mutates the source; each :meth:`Identicon.render`
call owns a fresh canvas and nibble stream.
"""

import logging
from typing import List

from pyrsistent import pvector
from pyrsistent.typing import PVector
from PIL import Image

from grid_identicon.canvas import fill_rect, new_canvas, to_image
from grid_identicon.color import HSL
from grid_identicon.geometry import BACKGROUND, DEFAULT_GEOMETRY, DEFAULT_SIZE, Geometry
from grid_identicon.nibbles import Nibbler
from grid_identicon.types import RGB, ByteSource, Canvas
from grid_identicon.utils.math import map_range

logger = logging.getLogger(__name__)

MIN_SOURCE_LENGTH = 16

# Color bias: saturation in [45, 65], luminance in [55, 75]
BASE_SATURATION = 65.0
BASE_LUMINANCE = 75.0
MAX_COLOR_SHIFT = 20.0

Pattern = PVector[PVector[bool]]


class SourceTooShortError(ValueError):
    """The byte source cannot supply the color bytes (indices 12..15)."""


class NibbleExhaustedError(ValueError):
    """The byte source cannot supply one nibble per grid decision."""


class Identicon:
    """Deterministic identicon over a borrowed byte source.

    Arguments:
        source: Bytes-like object of at least 16 bytes.
        size: Edge length of the square output canvas in pixels.
        geometry: Cell layout; the default gives the 420x420 layout.

    Raises:
        TypeError: ``source`` does not support the buffer protocol.
        SourceTooShortError: ``source`` has fewer than 16 bytes.
        ValueError: ``size`` cannot hold the grid and its leading margin.
    """

    def __init__(
        self,
        source: ByteSource,
        size: int = DEFAULT_SIZE,
        geometry: Geometry = DEFAULT_GEOMETRY,
    ) -> None:
        view = memoryview(source).cast("B")
        if len(view) < MIN_SOURCE_LENGTH:
            raise SourceTooShortError(
                f"Identicon source needs at least {MIN_SOURCE_LENGTH} bytes, "
                f"got {len(view)}"
            )
        if size < geometry.inner_size + geometry.margin:
            raise ValueError(
                f"Canvas size {size} is too small for a {geometry.sprite_size}x"
                f"{geometry.sprite_size} grid of {geometry.pixel_size}px cells"
            )
        self.source = view.toreadonly()
        self.size = size
        self.geometry = geometry

    def foreground_hsl(self) -> HSL:
        # Last 28 bits of the 16-byte prefix drive the HSL values
        hue_bits = ((self.source[12] & 0x0F) << 8) | self.source[13]
        sat_byte = self.source[14]
        lum_byte = self.source[15]

        hue = map_range(hue_bits, 0, 4095, 0, 360)
        sat = map_range(sat_byte, 0, 255, 0, MAX_COLOR_SHIFT)
        lum = map_range(lum_byte, 0, 255, 0, MAX_COLOR_SHIFT)
        return HSL(hue, BASE_SATURATION - sat, BASE_LUMINANCE - lum)

    def foreground(self) -> RGB:
        return self.foreground_hsl().rgb()

    def pattern(self) -> Pattern:
        """Fill decisions as an immutable ``pattern[row][col]`` grid.

        Raises:
            NibbleExhaustedError: Fewer nibbles than ``geometry.decisions``.
        """
        geometry = self.geometry
        nibbles = Nibbler(self.source)
        if nibbles.remaining() < geometry.decisions:
            raise NibbleExhaustedError(
                f"Grid needs {geometry.decisions} nibbles, source of "
                f"{len(self.source)} bytes supplies {nibbles.remaining()}"
            )

        cells: List[List[bool]] = [
            [False] * geometry.sprite_size for _ in range(geometry.sprite_size)
        ]
        for x in geometry.columns():
            col = x // geometry.pixel_size
            mirror_col = geometry.mirror_x(x) // geometry.pixel_size
            for y in geometry.rows():
                row = y // geometry.pixel_size
                filled = next(nibbles) % 2 == 0
                cells[row][col] = filled
                cells[row][mirror_col] = filled
        return pvector(pvector(row) for row in cells)

    def render(self) -> Canvas:
        """Paint the identicon onto a fresh background canvas."""
        geometry = self.geometry
        pixel_size, margin = geometry.pixel_size, geometry.margin
        hsl = self.foreground_hsl()
        foreground = hsl.rgb()
        pattern = self.pattern()
        logger.debug(
            "Rendering identicon: hsl=%s rgb=%s size=%d", hsl, foreground, self.size
        )

        canvas = new_canvas(self.size, BACKGROUND)
        for x in geometry.columns():
            col = x // pixel_size
            for y in geometry.rows():
                if not pattern[y // pixel_size][col]:
                    continue
                fill_rect(
                    canvas,
                    x + margin,
                    y + margin,
                    x + pixel_size + margin,
                    y + pixel_size + margin,
                    foreground,
                )
                # Mirror blocks across axis
                if x != geometry.axis_x:
                    x_start = geometry.mirror_x(x)
                    fill_rect(
                        canvas,
                        x_start + margin,
                        y + margin,
                        x_start + pixel_size + margin,
                        y + pixel_size + margin,
                        foreground,
                    )
        return canvas

    def image(self) -> Image.Image:
        """Render and hand off as a Pillow RGB image."""
        return to_image(self.render())


def render_identicon(source: ByteSource, size: int = DEFAULT_SIZE) -> Canvas:
    """Render ``source`` with the default geometry."""
    return Identicon(source, size=size).render()
