from __future__ import annotations

from collections import deque
from typing import Iterator

from packetwire.parsing.packets.model import OperatorPacket, Packet


def iter_packets(packet: Packet) -> Iterator[Packet]:
    """Yield ``packet`` and every packet beneath it, breadth-first."""
    pending: deque[Packet] = deque([packet])
    while pending:
        current = pending.popleft()
        yield current
        if isinstance(current, OperatorPacket):
            pending.extend(current.children)


def version_sum(packet: Packet) -> int:
    return sum(current.version for current in iter_packets(packet))


def packet_count(packet: Packet) -> int:
    return sum(1 for _ in iter_packets(packet))
