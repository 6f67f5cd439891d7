"""
Msgpack encoding of chain traversal status.

A follower publishes ChainStatus snapshots so tooling can observe progress
without touching the chain. Wire format is a msgpack array:

  [index, size, t_value, traveled, remaining, length,
   deceleration_type, decelerating, callbacks_fired]
"""

import logging

import msgspec
import numpy as np

logger = logging.getLogger(__name__)


def _enc_hook(obj: object) -> object:
    """Custom encoder hook for numpy types."""
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, (np.integer, np.floating)):
        return obj.item()  # Convert numpy scalar to Python native type
    raise NotImplementedError(f"Cannot encode {type(obj)}")


# Module-level encoder with numpy support (thread-safe, reusable)
_encoder = msgspec.msgpack.Encoder(enc_hook=_enc_hook)


class ChainStatus(msgspec.Struct, array_like=True, frozen=True):
    """Snapshot of a follower's progress along a chain."""

    index: int
    size: int
    t_value: float
    traveled: float
    remaining: float
    length: float
    deceleration_type: str
    decelerating: bool
    callbacks_fired: int


_status_decoder = msgspec.msgpack.Decoder(ChainStatus)


def encode(obj: object) -> bytes:
    """Encode a status (or any msgpack-compatible value) to bytes."""
    return _encoder.encode(obj)


def decode_status(data: bytes) -> ChainStatus:
    """
    Decode bytes into a ChainStatus.

    Raises:
        msgspec.ValidationError: If fields have the wrong shape or type
        msgspec.DecodeError: If data is not valid msgpack
    """
    return _status_decoder.decode(data)
