"""
Operator catalog for transmission packets.

A packet's 3-bit type-id selects either a literal (type-id 4) or one of
seven operators. The catalog records each operator's name and how many
sub-packets it accepts.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from packetwire.core.errors import UnknownOpcodeError

LITERAL_TYPE_ID = 4


class Opcode(IntEnum):
    """Operator type-ids as they appear on the wire."""
    SUM = 0
    PRODUCT = 1
    MINIMUM = 2
    MAXIMUM = 3
    GREATER_THAN = 5
    LESS_THAN = 6
    EQUAL_TO = 7


@dataclass(frozen=True)
class OpcodeInfo:
    """
    Metadata for a single operator.

    Attributes:
        opcode: The wire opcode.
        name: Machine-readable snake_case name.
        arity: Exact number of sub-packets required, or ``None`` for
            operators taking one or more.
    """
    opcode: Opcode
    name: str
    arity: Optional[int] = None


OPCODE_CATALOG: dict[Opcode, OpcodeInfo] = {
    Opcode.SUM: OpcodeInfo(Opcode.SUM, "sum"),
    Opcode.PRODUCT: OpcodeInfo(Opcode.PRODUCT, "product"),
    Opcode.MINIMUM: OpcodeInfo(Opcode.MINIMUM, "minimum"),
    Opcode.MAXIMUM: OpcodeInfo(Opcode.MAXIMUM, "maximum"),
    Opcode.GREATER_THAN: OpcodeInfo(Opcode.GREATER_THAN, "greater_than", arity=2),
    Opcode.LESS_THAN: OpcodeInfo(Opcode.LESS_THAN, "less_than", arity=2),
    Opcode.EQUAL_TO: OpcodeInfo(Opcode.EQUAL_TO, "equal_to", arity=2),
}

COMPARISON_OPCODES: frozenset[Opcode] = frozenset(
    info.opcode for info in OPCODE_CATALOG.values() if info.arity == 2
)


def opcode_for_type_id(type_id: int) -> Opcode:
    """
    Map an operator packet's type-id to its ``Opcode``.

    Raises:
        UnknownOpcodeError: For the literal type-id or any value without
            a catalog entry.
    """
    try:
        opcode = Opcode(type_id)
    except ValueError:
        raise UnknownOpcodeError(type_id) from None
    if opcode not in OPCODE_CATALOG:
        raise UnknownOpcodeError(type_id)
    return opcode


def opcode_name(opcode: Opcode) -> str:
    return OPCODE_CATALOG[opcode].name
