from __future__ import annotations

from typing import Iterable

from packetwire.core.errors import InvalidCharacterError

BITS_PER_HEX_DIGIT = 4

# Uppercase only; lowercase digits are rejected like any other character.
_HEX_DIGITS: dict[str, int] = {char: index for index, char in enumerate("0123456789ABCDEF")}


def hex_to_bits(text: str) -> bytes:
    """
    Expand a hexadecimal transmission into a flat bit sequence.

    Surrounding whitespace is trimmed. Each digit becomes four bits, most
    significant bit first, stored as one ``0``/``1`` element of the
    returned ``bytes``.

    Raises:
        InvalidCharacterError: If a character outside ``0-9A-F`` appears.
    """
    cleaned = text.strip()
    bits = bytearray()
    for position, char in enumerate(cleaned):
        nibble = _HEX_DIGITS.get(char)
        if nibble is None:
            raise InvalidCharacterError(char, position)
        for shift in range(BITS_PER_HEX_DIGIT - 1, -1, -1):
            bits.append((nibble >> shift) & 1)
    return bytes(bits)


def bits_to_int(bits: Iterable[int]) -> int:
    value = 0
    for bit in bits:
        value = (value << 1) | (1 if bit else 0)
    return value
