import msgpack
import pytest

from msgpack_append.encoding.bytes import encode_bytes
from msgpack_append.serialization import Serializer


def _encode(data) -> bytes:
    se = Serializer.build_bytes_serializer()
    encode_bytes(se, data)
    return bytes(se.finalize())


@pytest.mark.parametrize('length,header', [
    (0, 'c400'),
    (1, 'c401'),
    (31, 'c41f'),
    (32, 'c420'),
    (255, 'c4ff'),
    (256, 'c50100'),
    (65535, 'c5ffff'),
    (65536, 'c600010000'),
])
def test_header_tiers(length: int, header: str) -> None:
    data = bytes(range(256)) * (length // 256) + bytes(range(length % 256))
    assert len(data) == length
    encoded = _encode(data)
    header_bytes = bytes.fromhex(header)
    assert encoded[:len(header_bytes)] == header_bytes
    assert encoded[len(header_bytes):] == data
    assert msgpack.unpackb(encoded) == data


def test_empty_has_explicit_header() -> None:
    assert _encode(b'') == b'\xc4\x00'


def test_accepts_bytes_like() -> None:
    assert _encode(bytearray(b'ab')) == b'\xc4\x02ab'
    assert _encode(memoryview(b'abcd')[1:3]) == b'\xc4\x02bc'
