"""Tests for the packet decoder and transmission bit accounting."""
import pytest

from packetwire.core import BitCursor, hex_to_bits
from packetwire.domain import Opcode
from packetwire.parsing.packets import (
    LiteralPacket,
    OperatorPacket,
    decode_hex,
    decode_packet,
    parse_transmission,
)
from packetwire.analysis import iter_packets

FIXTURES = [
    "D2FE28",
    "38006F45291200",
    "EE00D40C823060",
    "8A004A801A8002F478",
    "620080001611562C8802118E34",
    "C0015000016115A2E0802F182340",
    "A0016C880162017C3686B18A3D4780",
    "C200B40A82",
    "04005AC33890",
    "880086C3E88112",
    "CE00C43D881120",
    "D8005AC2A8F0",
    "F600BC2D8F",
    "9C005AC2F8F0",
    "9C0141080250320F1802104A08",
]


def test_literal_packet():
    packet = decode_hex("D2FE28")
    assert isinstance(packet, LiteralPacket)
    assert packet.version == 6
    assert packet.value == 2021
    assert packet.bit_length == 21


def test_operator_with_total_length_framing():
    packet = decode_hex("38006F45291200")
    assert isinstance(packet, OperatorPacket)
    assert packet.version == 1
    assert packet.opcode == Opcode.LESS_THAN
    assert packet.children == (LiteralPacket(version=6, value=10), LiteralPacket(version=2, value=20))
    assert [child.bit_length for child in packet.children] == [11, 16]
    assert packet.bit_length == 49


def test_operator_with_packet_count_framing():
    packet = decode_hex("EE00D40C823060")
    assert isinstance(packet, OperatorPacket)
    assert packet.version == 7
    assert packet.opcode == Opcode.MAXIMUM
    assert [child.value for child in packet.children] == [1, 2, 3]
    assert [child.version for child in packet.children] == [2, 4, 1]
    assert packet.bit_length == 51


def test_nested_operators_chain():
    # operator v4 -> operator v1 -> operator v5 -> literal v6
    packet = decode_hex("8A004A801A8002F478")
    versions = []
    while isinstance(packet, OperatorPacket):
        versions.append(packet.version)
        assert len(packet.children) == 1
        packet = packet.children[0]
    versions.append(packet.version)
    assert versions == [4, 1, 5, 6]


@pytest.mark.parametrize("hex_input", ["620080001611562C8802118E34", "C0015000016115A2E0802F182340"])
def test_two_operators_with_two_literals_each(hex_input):
    packet = decode_hex(hex_input)
    assert isinstance(packet, OperatorPacket)
    assert len(packet.children) == 2
    for child in packet.children:
        assert isinstance(child, OperatorPacket)
        assert len(child.children) == 2
        assert all(isinstance(grandchild, LiteralPacket) for grandchild in child.children)


def test_five_literals_three_levels_deep():
    packet = decode_hex("A0016C880162017C3686B18A3D4780")
    for _ in range(2):
        assert isinstance(packet, OperatorPacket)
        assert len(packet.children) == 1
        packet = packet.children[0]
    assert isinstance(packet, OperatorPacket)
    assert len(packet.children) == 5
    assert all(isinstance(child, LiteralPacket) for child in packet.children)


def test_decode_packet_leaves_cursor_after_packet():
    cursor = BitCursor(hex_to_bits("D2FE28"))
    packet = decode_packet(cursor)
    assert packet.value == 2021
    assert cursor.position == 21
    assert cursor.remaining() == 3


def test_transmission_bit_accounting():
    transmission = parse_transmission("D2FE28")
    assert transmission.total_bits == 24
    assert transmission.consumed_bits == 21
    assert transmission.padding_bits == 3


@pytest.mark.parametrize("hex_input", FIXTURES)
def test_root_packet_consumes_all_meaningful_bits(hex_input):
    transmission = parse_transmission(hex_input)
    assert transmission.consumed_bits == transmission.packet.bit_length
    assert 0 <= transmission.padding_bits
    assert transmission.total_bits == 4 * len(hex_input)


@pytest.mark.parametrize("hex_input", FIXTURES)
def test_operator_length_equals_header_plus_children(hex_input):
    # version + type id + length type, then a 15-bit length or an 11-bit count
    for packet in iter_packets(parse_transmission(hex_input).packet):
        if isinstance(packet, OperatorPacket):
            children_bits = sum(child.bit_length for child in packet.children)
            assert packet.bit_length - 7 - children_bits in (15, 11)


def test_total_length_matches_declared_field():
    bits = hex_to_bits("38006F45291200")
    cursor = BitCursor(bits)
    cursor.take_bits(7)
    declared = cursor.take_bits(15)
    packet = decode_hex("38006F45291200")
    assert declared == sum(child.bit_length for child in packet.children) == 27


def test_padding_bits_are_not_validated():
    assert decode_hex("D2FE29").value == 2021
    assert decode_hex("D2FE2F").value == 2021


def test_literal_value_is_base16_concatenation_of_groups():
    # v0, type 4, groups 1 0001 / 1 0010 / 0 0011 -> 0x123
    bits = "000" + "100" + "10001" + "10010" + "00011"
    bits += "0" * (-len(bits) % 4)
    hex_input = "".join(f"{int(bits[i:i + 4], 2):X}" for i in range(0, len(bits), 4))
    assert decode_hex(hex_input).value == 0x123


def test_literal_wider_than_64_bits():
    groups = ["1" + format(0xF, "04b")] * 19 + ["0" + format(0xF, "04b")]
    bits = "000" + "100" + "".join(groups)
    bits += "0" * (-len(bits) % 4)
    hex_input = "".join(f"{int(bits[i:i + 4], 2):X}" for i in range(0, len(bits), 4))
    assert decode_hex(hex_input).value == 2 ** 80 - 1


def test_trees_are_immutable():
    packet = decode_hex("38006F45291200")
    with pytest.raises(AttributeError):
        packet.version = 3


def test_as_dict():
    tree = decode_hex("38006F45291200").as_dict()
    assert tree["kind"] == "operator"
    assert tree["opcode"] == "less_than"
    assert [child["value"] for child in tree["children"]] == [10, 20]
    assert parse_transmission("D2FE28").as_dict()["padding_bits"] == 3
