"""Nibble stream over a byte source.

Each byte contributes two 4-bit values, high nibble first. The stream is a
plain single-pass iterator: once a nibble has been handed out it cannot be
requested again.
"""

from typing import Iterator, Optional

from grid_identicon.types import ByteSource, Nibble


class Nibbler(Iterator[Nibble]):
    """Iterator yielding ``2 * len(source)`` nibbles in input order.

    Attributes:
        pending: Low nibble of the last consumed byte, not yet handed out.
        cursor: Index of the next unread byte in the source.
    """

    def __init__(self, source: ByteSource) -> None:
        self._source = memoryview(source).cast("B")
        self.pending: Optional[Nibble] = None
        self.cursor: int = 0

    def __iter__(self) -> "Nibbler":
        return self

    def __next__(self) -> Nibble:
        if self.pending is not None:
            value, self.pending = self.pending, None
            return value
        if self.cursor >= len(self._source):
            raise StopIteration
        byte = self._source[self.cursor]
        self.cursor += 1
        self.pending = byte & 0x0F
        return (byte & 0xF0) >> 4

    def remaining(self) -> int:
        """Number of nibbles still available."""
        unread = len(self._source) - self.cursor
        return 2 * unread + (1 if self.pending is not None else 0)
