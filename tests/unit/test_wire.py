"""Unit tests for chain status msgpack encoding."""

import msgspec
import numpy as np
import pytest

from pathchain.protocol.wire import ChainStatus, decode_status, encode


def _status(**overrides) -> ChainStatus:
    fields = dict(
        index=1,
        size=3,
        t_value=0.25,
        traveled=15.0,
        remaining=45.0,
        length=60.0,
        deceleration_type="LAST_PATH",
        decelerating=False,
        callbacks_fired=2,
    )
    fields.update(overrides)
    return ChainStatus(**fields)


class TestChainStatusWire:
    """Tests for ChainStatus msgpack encoding."""

    def test_roundtrip(self):
        """Decoding an encoded status yields an equal status."""
        status = _status()
        assert decode_status(encode(status)) == status

    def test_encoded_as_array(self):
        """Array-like structs encode positionally."""
        raw = msgspec.msgpack.decode(encode(_status()))
        assert raw == [1, 3, 0.25, 15.0, 45.0, 60.0, "LAST_PATH", False, 2]

    def test_numpy_values_encoded(self):
        """enc_hook converts numpy scalars and arrays to native values."""
        raw = msgspec.msgpack.decode(encode([np.float64(1.5), np.arange(3)]))
        assert raw == [1.5, [0, 1, 2]]

    def test_unsupported_type(self):
        """Objects the hook does not know are refused."""
        with pytest.raises(NotImplementedError):
            encode(object())

    def test_wrong_shape_rejected(self):
        """Arrays with too few fields fail validation."""
        with pytest.raises(msgspec.ValidationError):
            decode_status(msgspec.msgpack.encode([1, 2, 3]))

    def test_garbage_rejected(self):
        """Bytes that are not msgpack fail to decode."""
        with pytest.raises(msgspec.DecodeError):
            decode_status(b"\xc1")
