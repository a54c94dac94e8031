"""Common type aliases.

``ByteSource`` is anything exposing the buffer protocol (``bytes``,
``bytearray``, ``memoryview``); the generator only ever reads from it.
"""

from typing import Tuple, Union

import numpy as np
import numpy.typing as npt

RGB = Tuple[int, int, int]
Nibble = int
ByteSource = Union[bytes, bytearray, memoryview]

# Pixel buffer addressed ``canvas[y, x]``; shape (height, width, 3)
Canvas = npt.NDArray[np.uint8]
