"""
An iterator over the bits of an unsigned 64-bit integer, used to walk the fields of a 64-bit Steam ID.

Licensed under The MIT License (MIT) - Copyright (c) 2020-present James H-B. See LICENSE
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from typing_extensions import Self

__all__ = ("BitIterator",)

U64_BITS: Final = 64


def bits(value: int, from_: int, width: int, /) -> int:
    """Get the ``width`` bits of ``value`` that end at bit position ``from_``."""
    shift = from_ - width
    mask = ((1 << width) - 1) << shift
    return (value & mask) >> shift


class BitIterator(Iterator[int]):
    """Iterates over fixed width unsigned fields of a 64-bit integer, most significant bit first.

    .. container:: operations

        .. describe:: next(x)

            Returns the next :attr:`width` bits of the value. Raises :exc:`StopIteration` when fewer than
            :attr:`width` bits are left.

    Parameters
    ----------
    value
        The unsigned 64-bit integer to iterate over. It is never modified.
    width
        The number of bits to read per iteration.

    Examples
    --------
    .. code:: pycon

        >>> list(BitIterator(76561197983318796, 8))
        [1, 16, 0, 1, 1, 95, 195, 12]
    """

    __slots__ = ("value", "width", "position")

    def __init__(self, value: int, width: int):
        if not 0 <= value < 1 << U64_BITS:
            raise ValueError(f"{value!r} is not an unsigned 64-bit integer")
        if not 0 <= width <= U64_BITS:
            raise ValueError(f"width must be in [0, {U64_BITS}] not {width!r}")
        self.value: Final = value
        """The integer being iterated over."""
        self.width = width
        """The number of bits read per iteration."""
        self.position = U64_BITS
        """The position of the cursor, the number of bits that have not been consumed yet."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} value={self.value} width={self.width} position={self.position}>"

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> int:
        new_position = self.position - self.width
        if new_position < 0:
            raise StopIteration
        item = bits(self.value, self.position, self.width)
        self.position = new_position
        return item

    @property
    def remaining(self) -> int:
        """The number of bits that have not been consumed yet."""
        return self.position

    def change_width(self, width: int) -> Self:
        """Change the number of bits read per iteration.

        Raises
        ------
        :exc:`ValueError`
            ``width`` is bigger than the number of bits left.
        """
        if not 0 <= width <= self.position:
            raise ValueError(f"width {width!r} is bigger than the {self.position} bits left")
        self.width = width
        return self

    def next_bits(self, width: int, /, *, into: int = U64_BITS) -> int | None:
        """Read the next ``width`` bits as an unsigned integer of ``into`` bits.

        Parameters
        ----------
        width
            The number of bits to read. This becomes the new :attr:`width`.
        into
            The width of the unsigned integer type the result has to fit in.

        Returns
        -------
        The value or ``None`` if there aren't enough bits left or it doesn't fit in ``into`` bits.
        """
        if width > self.position:
            return None
        item = next(self.change_width(width), None)
        if item is None or item >= 1 << into:
            return None
        return item
