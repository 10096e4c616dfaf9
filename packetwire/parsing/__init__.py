"""
This package contains the decoders that turn raw transmission input into
packet trees.

Sub-packages handle specific layers:

- ``packets``: Packet grammar, the decoded tree model and transmissions.
"""
