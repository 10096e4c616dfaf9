"""
Exceptions raised while reading and decoding transmissions.

Every decoding failure derives from ``TransmissionError`` so callers can
catch the whole family at once; a failed decode never yields a partial tree.
"""
from __future__ import annotations

from typing import Optional


class TransmissionError(ValueError):
    """Base class for every failure while decoding a transmission."""
    pass


class InvalidCharacterError(TransmissionError):
    """Raised when the hexadecimal input contains a character outside ``0-9A-F``."""

    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(
            f"input has an invalid character {character!r} "
            f"(code point {ord(character)}) at position {position}"
        )


class UnderflowError(TransmissionError):
    """Raised when a read needs more bits than remain in the cursor."""

    def __init__(self, field: str, requested: int, available: int) -> None:
        self.field = field
        self.requested = requested
        self.available = available
        super().__init__(
            f"insufficient bits for {field}: requested {requested}, available {available}"
        )


class UnknownOpcodeError(TransmissionError):
    """Raised when an operator type-id has no opcode mapping."""

    def __init__(self, type_id: int) -> None:
        self.type_id = type_id
        super().__init__(f"invalid operation value: {type_id}")


class ArityError(TransmissionError):
    """Raised when an operator carries a child count its opcode cannot take."""

    def __init__(self, opcode: str, count: int, expected: Optional[int] = None) -> None:
        self.opcode = opcode
        self.count = count
        self.expected = expected
        if expected is None:
            message = f"operator {opcode} requires at least one sub-packet, got {count}"
        else:
            message = f"operator {opcode} requires exactly {expected} sub-packets, got {count}"
        super().__init__(message)


class NestingTooDeepError(TransmissionError):
    """Raised when operator nesting exceeds the configured ``max_depth``."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"packet nesting exceeds the configured limit of {limit}")


class InputFileError(OSError):
    """Raised when the transmission file cannot be read."""
    pass
