from packetwire.analysis import evaluate, version_sum
from packetwire.config import DecoderSettings
from packetwire.core import BitCursor, hex_to_bits, TransmissionError
from packetwire.domain import Opcode
from packetwire.parsing.packets import (
    LiteralPacket,
    OperatorPacket,
    Packet,
    Transmission,
    decode_packet,
    parse_transmission,
)
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "BitCursor",
    "DecoderSettings",
    "LiteralPacket",
    "Opcode",
    "OperatorPacket",
    "Packet",
    "Transmission",
    "TransmissionError",
    "decode_packet",
    "evaluate",
    "hex_to_bits",
    "parse_transmission",
    "version_sum",
]

try:
    __version__ = version("packetwire")
except PackageNotFoundError:
    __version__ = "0.0.0"
