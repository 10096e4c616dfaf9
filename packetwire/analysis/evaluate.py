"""
Expression evaluation over a decoded packet tree.

Literals evaluate to their value. Operators evaluate their children left to
right and combine the results; comparisons yield ``1`` or ``0``. Python
integers are unbounded, so sums and products never wrap.
"""
from __future__ import annotations

import math
from typing import Callable, Sequence

from packetwire.core.errors import ArityError
from packetwire.domain.opcodes import COMPARISON_OPCODES, Opcode, opcode_name
from packetwire.parsing.packets.model import LiteralPacket, OperatorPacket, Packet

_COMBINERS: dict[Opcode, Callable[[Sequence[int]], int]] = {
    Opcode.SUM: sum,
    Opcode.PRODUCT: math.prod,
    Opcode.MINIMUM: min,
    Opcode.MAXIMUM: max,
    Opcode.GREATER_THAN: lambda values: int(values[0] > values[1]),
    Opcode.LESS_THAN: lambda values: int(values[0] < values[1]),
    Opcode.EQUAL_TO: lambda values: int(values[0] == values[1]),
}


def apply_opcode(opcode: Opcode, values: Sequence[int]) -> int:
    """
    Combine already evaluated operand values with ``opcode``.

    Raises:
        ArityError: If ``values`` is empty, or a comparison does not get
            exactly two operands.
    """
    if opcode in COMPARISON_OPCODES:
        if len(values) != 2:
            raise ArityError(opcode_name(opcode), len(values), 2)
    elif not values:
        raise ArityError(opcode_name(opcode), 0)
    return _COMBINERS[opcode](values)


def evaluate(packet: Packet) -> int:
    if isinstance(packet, LiteralPacket):
        return packet.value
    if isinstance(packet, OperatorPacket):
        values = [evaluate(child) for child in packet.children]
        return apply_opcode(packet.opcode, values)
    raise TypeError(f"not a packet: {packet!r}")
