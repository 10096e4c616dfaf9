"""
Bit-level primitives shared by the transmission decoder.

- ``binary``: hexadecimal to bit expansion.
- ``cursor``: the forward-only ``BitCursor``.
- ``errors``: the decoding error taxonomy.
- ``text``: whole-file input reading.
"""
from packetwire.core.binary import bits_to_int, hex_to_bits
from packetwire.core.cursor import BitCursor
from packetwire.core.errors import (
    ArityError,
    InputFileError,
    InvalidCharacterError,
    NestingTooDeepError,
    TransmissionError,
    UnderflowError,
    UnknownOpcodeError,
)
from packetwire.core.text import read_all_text

__all__ = [
    "ArityError",
    "BitCursor",
    "bits_to_int",
    "hex_to_bits",
    "InputFileError",
    "InvalidCharacterError",
    "NestingTooDeepError",
    "read_all_text",
    "TransmissionError",
    "UnderflowError",
    "UnknownOpcodeError",
]
