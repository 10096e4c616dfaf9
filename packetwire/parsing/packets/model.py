"""
Decoded packet tree.

``Packet`` is a closed union of two frozen dataclasses. Traversals tell the
variants apart with ``isinstance``; the variants carry data only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from packetwire.domain.opcodes import Opcode, opcode_name


@dataclass(frozen=True)
class LiteralPacket:
    """
    A packet carrying a single unsigned value.

    Attributes:
        version: The 3-bit version field.
        value: The value assembled from the packet's 4-bit groups.
        bit_length: Bits consumed from the stream, header included.
    """
    version: int
    value: int
    bit_length: int = field(default=0, compare=False)

    def as_dict(self) -> dict[str, Any]:
        return {
            "kind": "literal",
            "version": self.version,
            "value": self.value,
            "bit_length": self.bit_length,
        }


@dataclass(frozen=True)
class OperatorPacket:
    """
    A packet combining its sub-packets with an operator.

    Attributes:
        version: The 3-bit version field.
        opcode: The operator selected by the packet's type-id.
        children: Sub-packets in stream order.
        bit_length: Bits consumed from the stream, header and children included.
    """
    version: int
    opcode: Opcode
    children: tuple["Packet", ...]
    bit_length: int = field(default=0, compare=False)

    def as_dict(self) -> dict[str, Any]:
        return {
            "kind": "operator",
            "version": self.version,
            "opcode": opcode_name(self.opcode),
            "bit_length": self.bit_length,
            "children": [child.as_dict() for child in self.children],
        }


Packet = Union[LiteralPacket, OperatorPacket]


@dataclass(frozen=True)
class Transmission:
    """
    A fully decoded transmission.

    Attributes:
        packet: The outermost packet.
        total_bits: Bits expanded from the hexadecimal input.
        consumed_bits: Bits used by ``packet``; the rest is padding.
    """
    packet: Packet
    total_bits: int
    consumed_bits: int

    @property
    def padding_bits(self) -> int:
        return self.total_bits - self.consumed_bits

    def version_sum(self) -> int:
        from packetwire.analysis.versions import version_sum

        return version_sum(self.packet)

    def evaluate(self) -> int:
        from packetwire.analysis.evaluate import evaluate

        return evaluate(self.packet)

    def as_dict(self) -> dict[str, Any]:
        return {
            "total_bits": self.total_bits,
            "consumed_bits": self.consumed_bits,
            "padding_bits": self.padding_bits,
            "packet": self.packet.as_dict(),
        }
