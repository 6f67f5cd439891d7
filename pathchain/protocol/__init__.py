"""Wire formats for publishing chain traversal state."""

from pathchain.protocol.wire import ChainStatus, decode_status, encode

__all__ = ["ChainStatus", "encode", "decode_status"]
