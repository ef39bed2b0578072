"""Turn text into rows of bits for drawing."""

from __future__ import annotations

from collections.abc import Iterator

from pixatar.settings import Endian, Orientation


def bit_values(text: str) -> list[list[bool]]:
    """Return the bits of each UTF-8 byte of ``text``, least significant first."""
    return [[bool(byte & (1 << bit)) for bit in range(8)] for byte in text.encode("utf-8")]


class BitRows:
    """The rows of a bit grid built from the bytes of a text."""

    def __init__(self, text: str, orientation: Orientation, endian: Endian) -> None:
        self.text = text
        self.orientation = orientation
        self.endian = endian
        self.values = bit_values(text)

    def dimensions(self) -> tuple[int, int]:
        """Return the grid's (width, height) in bits."""
        length = len(self.values)
        if self.orientation is Orientation.HORIZONTAL:
            return length, 8
        return 8, length

    def __iter__(self) -> Iterator[list[bool]]:
        if self.orientation is Orientation.HORIZONTAL:
            for bit in range(8):
                index = bit if self.endian is Endian.MOST else 7 - bit
                yield [char_bits[index] for char_bits in self.values]
        else:
            for char_bits in self.values:
                if self.endian is Endian.MOST:
                    yield list(char_bits)
                else:
                    yield list(reversed(char_bits))