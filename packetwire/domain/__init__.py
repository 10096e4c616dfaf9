"""
Domain vocabulary for transmission packets: the operator catalog and the
type-id that marks literal packets.
"""
from packetwire.domain.opcodes import (
    COMPARISON_OPCODES,
    LITERAL_TYPE_ID,
    OPCODE_CATALOG,
    Opcode,
    OpcodeInfo,
    opcode_for_type_id,
    opcode_name,
)

__all__ = [
    "COMPARISON_OPCODES",
    "LITERAL_TYPE_ID",
    "OPCODE_CATALOG",
    "Opcode",
    "OpcodeInfo",
    "opcode_for_type_id",
    "opcode_name",
]
