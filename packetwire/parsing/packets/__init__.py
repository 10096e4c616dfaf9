"""
Packet decoding for hexadecimal transmissions.

This sub-package turns a ``BitCursor`` into a tree of ``LiteralPacket`` and
``OperatorPacket`` values and wraps the outermost packet in a
``Transmission`` together with its bit accounting.
"""
from packetwire.parsing.packets.decode import (
    decode_hex,
    decode_packet,
    parse_transmission,
    PacketDecoder,
    LENGTH_TYPE_PACKET_COUNT,
    LENGTH_TYPE_TOTAL_BITS,
    SUB_PACKET_COUNT_BITS,
    TOTAL_LENGTH_BITS,
)
from packetwire.parsing.packets.model import LiteralPacket, OperatorPacket, Packet, Transmission

__all__ = [
    "decode_hex",
    "decode_packet",
    "parse_transmission",
    "PacketDecoder",
    "LENGTH_TYPE_PACKET_COUNT",
    "LENGTH_TYPE_TOTAL_BITS",
    "SUB_PACKET_COUNT_BITS",
    "TOTAL_LENGTH_BITS",
    "LiteralPacket",
    "OperatorPacket",
    "Packet",
    "Transmission",
]
