"""
Recursive-descent decoder for transmission packets.

Every packet starts with a 3-bit version and a 3-bit type-id. Type-id 4 is a
literal whose value follows in 5-bit groups (a continuation bit and four data
bits). Any other type-id is an operator whose sub-packets are framed either
by their total bit length (15-bit field) or by their count (11-bit field).
"""
from __future__ import annotations

import logging
from typing import Optional

from packetwire.config import DecoderSettings, get_settings
from packetwire.core.binary import hex_to_bits
from packetwire.core.cursor import BitCursor
from packetwire.core.errors import ArityError, NestingTooDeepError
from packetwire.domain.opcodes import (
    LITERAL_TYPE_ID,
    OPCODE_CATALOG,
    Opcode,
    opcode_for_type_id,
    opcode_name,
)
from packetwire.parsing.packets.model import LiteralPacket, OperatorPacket, Packet, Transmission

# Field widths in bits.
VERSION_BITS = 3
TYPE_ID_BITS = 3
LITERAL_GROUP_BITS = 4
TOTAL_LENGTH_BITS = 15
SUB_PACKET_COUNT_BITS = 11

# Length-type selector values.
LENGTH_TYPE_TOTAL_BITS = 0
LENGTH_TYPE_PACKET_COUNT = 1

_log = logging.getLogger(__name__)


class PacketDecoder:
    """
    Decodes packets from a ``BitCursor``.

    One decoder may be reused for many cursors; it keeps no state between
    ``decode()`` calls apart from its settings and logger.
    """

    def __init__(
        self,
        settings: Optional[DecoderSettings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.logger = logger or _log

    def decode(self, cursor: BitCursor) -> Packet:
        return self._decode(cursor, depth=0)

    def _decode(self, cursor: BitCursor, depth: int) -> Packet:
        start = cursor.position
        version = cursor.take_bits(VERSION_BITS, "version header")
        type_id = cursor.take_bits(TYPE_ID_BITS, "type id header")

        if type_id == LITERAL_TYPE_ID:
            value = self._decode_literal_value(cursor)
            packet = LiteralPacket(version=version, value=value, bit_length=cursor.position - start)
            if self.logger.isEnabledFor(logging.DEBUG):
                self.logger.debug(
                    "literal_decoded",
                    extra={"details": {"version": version, "value": value, "bits": packet.bit_length}},
                )
            return packet

        opcode = opcode_for_type_id(type_id)
        max_depth = self.settings.max_depth
        if max_depth is not None and depth >= max_depth:
            raise NestingTooDeepError(max_depth)
        children = self._decode_children(cursor, depth + 1)
        _check_arity(opcode, len(children))
        packet = OperatorPacket(
            version=version,
            opcode=opcode,
            children=children,
            bit_length=cursor.position - start,
        )
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                "operator_decoded",
                extra={
                    "details": {
                        "version": version,
                        "opcode": opcode_name(opcode),
                        "children": len(children),
                        "bits": packet.bit_length,
                    }
                },
            )
        return packet

    def _decode_literal_value(self, cursor: BitCursor) -> int:
        value = 0
        more = True
        while more:
            more = cursor.take_bit("literal continuation bit")
            group = cursor.take_bits(LITERAL_GROUP_BITS, "literal group")
            value = (value << LITERAL_GROUP_BITS) | group
        return value

    def _decode_children(self, cursor: BitCursor, depth: int) -> tuple[Packet, ...]:
        children: list[Packet] = []
        length_type = cursor.take_bits(1, "length type id")
        if length_type == LENGTH_TYPE_TOTAL_BITS:
            total_length = cursor.take_bits(TOTAL_LENGTH_BITS, "sub-packet bit length")
            bounded = cursor.bound(total_length, "sub-packets")
            while not bounded.is_empty():
                children.append(self._decode(bounded, depth))
        else:
            count = cursor.take_bits(SUB_PACKET_COUNT_BITS, "sub-packet count")
            for _ in range(count):
                children.append(self._decode(cursor, depth))
        return tuple(children)


def _check_arity(opcode: Opcode, count: int) -> None:
    expected = OPCODE_CATALOG[opcode].arity
    if expected is None:
        if count < 1:
            raise ArityError(opcode_name(opcode), count)
    elif count != expected:
        raise ArityError(opcode_name(opcode), count, expected)


def decode_packet(
    cursor: BitCursor,
    settings: Optional[DecoderSettings] = None,
    logger: Optional[logging.Logger] = None,
) -> Packet:
    """
    Decode one packet, and all of its sub-packets, from ``cursor``.

    The cursor is left positioned just after the packet.

    Raises:
        UnderflowError: If the cursor runs out of bits mid-packet.
        UnknownOpcodeError: If an operator type-id has no opcode.
        ArityError: If an operator has an invalid number of sub-packets.
        NestingTooDeepError: If ``settings.max_depth`` is exceeded.
    """
    return PacketDecoder(settings, logger).decode(cursor)


def parse_transmission(
    text: str,
    settings: Optional[DecoderSettings] = None,
    logger: Optional[logging.Logger] = None,
) -> Transmission:
    """
    Decode a hexadecimal transmission into its packet tree.

    Bits left over after the outermost packet are padding and are ignored
    whatever their value.

    Args:
        text: Uppercase hexadecimal digits; surrounding whitespace is trimmed.
        settings: Decoder settings; defaults to ``get_settings()``.
        logger: Receives per-packet debug events.

    Returns:
        The decoded ``Transmission``.

    Raises:
        TransmissionError: Any decoding failure. No partial result is
            produced.
    """
    bits = hex_to_bits(text)
    cursor = BitCursor(bits)
    decoder = PacketDecoder(settings, logger)
    packet = decoder.decode(cursor)
    transmission = Transmission(packet=packet, total_bits=len(bits), consumed_bits=cursor.position)
    decoder.logger.info(
        "transmission_decoded",
        extra={
            "details": {
                "total_bits": transmission.total_bits,
                "consumed_bits": transmission.consumed_bits,
                "padding_bits": transmission.padding_bits,
            }
        },
    )
    return transmission


def decode_hex(text: str) -> Packet:
    return parse_transmission(text).packet
