"""Grid geometry.

An identicon is a ``sprite_size x sprite_size`` grid of square cells,
``pixel_size`` pixels each, drawn inside a canvas with a margin of half a
cell on every side. Only the columns left of and including the vertical
axis are decided independently; the rest are mirror images.

Defaults reproduce the classic 420x420 layout:

* ``pixel_size`` 70, ``sprite_size`` 5
* ``inner_size`` 350 (drawn region), ``margin`` 35
* ``half_axis`` 2, so 3 independent columns and 15 decisions per render
"""

from dataclasses import dataclass
from typing import Iterator

from grid_identicon.types import RGB

DEFAULT_PIXEL_SIZE = 70
DEFAULT_SPRITE_SIZE = 5
BACKGROUND: RGB = (240, 240, 240)


@dataclass(frozen=True)
class Geometry:
    """Cell layout of the identicon grid.

    Attributes:
        pixel_size: Edge length of one grid cell in pixels.
        sprite_size: Number of cells along each side of the grid (odd).
    """

    pixel_size: int = DEFAULT_PIXEL_SIZE
    sprite_size: int = DEFAULT_SPRITE_SIZE

    def __post_init__(self) -> None:
        if self.pixel_size < 1:
            raise ValueError(f"pixel_size must be >= 1, got {self.pixel_size}")
        if self.sprite_size < 1 or self.sprite_size % 2 == 0:
            raise ValueError(
                f"sprite_size must be a positive odd number, got {self.sprite_size}"
            )

    @property
    def inner_size(self) -> int:
        return self.sprite_size * self.pixel_size

    @property
    def margin(self) -> int:
        return self.pixel_size // 2

    @property
    def half_axis(self) -> int:
        return (self.sprite_size - 1) // 2

    @property
    def axis_x(self) -> int:
        """Grid x offset of the symmetry column."""
        return self.half_axis * self.pixel_size

    @property
    def canvas_size(self) -> int:
        """Smallest square canvas that centers the grid inside its margin."""
        return self.inner_size + 2 * self.margin

    @property
    def decisions(self) -> int:
        """Nibbles consumed by one render: one per independent cell."""
        return (self.half_axis + 1) * self.sprite_size

    def columns(self) -> Iterator[int]:
        """Independent column offsets, axis column first then outward."""
        return iter(range(self.axis_x, -1, -self.pixel_size))

    def rows(self) -> Iterator[int]:
        """Row offsets, top to bottom."""
        return iter(range(0, self.inner_size, self.pixel_size))

    def mirror_x(self, x: int) -> int:
        """Offset of the column reflected across the axis."""
        return 2 * self.axis_x - x


DEFAULT_GEOMETRY = Geometry()
DEFAULT_SIZE = DEFAULT_GEOMETRY.canvas_size
