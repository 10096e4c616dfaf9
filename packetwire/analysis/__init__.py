"""
Read-only traversals over decoded packet trees.

- ``evaluate``: reduces a tree to its numeric result.
- ``versions``: sums version fields and iterates packets.
"""
from packetwire.analysis.evaluate import apply_opcode, evaluate
from packetwire.analysis.versions import iter_packets, packet_count, version_sum

__all__ = ["apply_opcode", "evaluate", "iter_packets", "packet_count", "version_sum"]
