"""
Forward-only bit reader over a transmission's bit sequence.

A ``BitCursor`` is a window ``[position, end)`` onto bit storage shared with
every other cursor carved from the same transmission. ``bound()`` hands out a
child window and skips the parent past it without copying any bits.
"""
from __future__ import annotations

from typing import Optional

from packetwire.core.binary import bits_to_int
from packetwire.core.errors import UnderflowError


class BitCursor:
    """Sequential MSB-first reader over a sub-range of a bit sequence."""

    __slots__ = ("_bits", "_position", "_end")

    def __init__(self, bits: bytes, start: int = 0, end: Optional[int] = None) -> None:
        """
        Args:
            bits: One ``0``/``1`` element per bit, as produced by ``hex_to_bits``.
            start: Absolute index of the first readable bit.
            end: Absolute index one past the last readable bit; defaults to
                the end of ``bits``.
        """
        if end is None:
            end = len(bits)
        if not 0 <= start <= end <= len(bits):
            raise ValueError(f"invalid cursor range [{start}, {end}) over {len(bits)} bits")
        self._bits = bits
        self._position = start
        self._end = end

    @property
    def position(self) -> int:
        """Absolute offset of the next bit in the shared storage."""
        return self._position

    def remaining(self) -> int:
        return self._end - self._position

    def is_empty(self) -> bool:
        return self._position >= self._end

    def _claim(self, count: int, field: str) -> int:
        if count < 0:
            raise ValueError("bit count must not be negative")
        available = self.remaining()
        if count > available:
            raise UnderflowError(field, count, available)
        start = self._position
        self._position += count
        return start

    def take_bit(self, field: str = "bit") -> bool:
        start = self._claim(1, field)
        return self._bits[start] == 1

    def take_bits(self, count: int, field: str = "bits") -> int:
        """
        Consume ``count`` bits and return them as an unsigned integer.

        The first bit read is the most significant. Reading zero bits
        returns ``0``.

        Raises:
            UnderflowError: If fewer than ``count`` bits remain.
        """
        start = self._claim(count, field)
        return bits_to_int(self._bits[start:start + count])

    def bound(self, count: int, field: str = "sub-packets") -> "BitCursor":
        """
        Split off the next ``count`` bits as an independent cursor.

        The parent cursor advances past the returned window immediately.

        Raises:
            UnderflowError: If fewer than ``count`` bits remain.
        """
        start = self._claim(count, field)
        return BitCursor(self._bits, start, start + count)

    def __repr__(self) -> str:
        return f"BitCursor(position={self._position}, remaining={self.remaining()})"
