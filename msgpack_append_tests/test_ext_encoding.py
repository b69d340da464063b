import msgpack
import pytest

from msgpack_append.encoding.ext import encode_ext
from msgpack_append.serialization import Serializer


def _encode(kind: int, data: bytes) -> bytes:
    se = Serializer.build_bytes_serializer()
    encode_ext(se, kind, data)
    return bytes(se.finalize())


@pytest.mark.parametrize('length,tag', [
    (1, 0xd4),
    (2, 0xd5),
    (4, 0xd6),
    (8, 0xd7),
    (16, 0xd8),
])
def test_fixext_sizes(length: int, tag: int) -> None:
    data = bytes(range(length))
    encoded = _encode(42, data)
    assert encoded == bytes([tag, 42]) + data
    assert msgpack.unpackb(encoded) == msgpack.ExtType(42, data)


@pytest.mark.parametrize('length,header', [
    (0, 'c700'),
    (3, 'c703'),
    (5, 'c705'),
    (15, 'c70f'),
    (17, 'c711'),
    (255, 'c7ff'),
    (256, 'c80100'),
    (65535, 'c8ffff'),
    (65536, 'c900010000'),
])
def test_generic_header_tiers(length: int, header: str) -> None:
    data = b'\xab' * length
    encoded = _encode(7, data)
    header_bytes = bytes.fromhex(header)
    assert encoded[:len(header_bytes)] == header_bytes
    assert encoded[len(header_bytes)] == 7
    assert encoded[len(header_bytes) + 1:] == data
    assert msgpack.unpackb(encoded) == msgpack.ExtType(7, data)


def test_exact_size_wins_over_generic_form() -> None:
    # 8 also fits ext8, but the dedicated fixext8 tag must be used
    assert _encode(1, b'\x00' * 8)[0] == 0xd7
    assert _encode(1, b'\x00' * 3)[:2] == b'\xc7\x03'


def test_kind_is_a_single_byte() -> None:
    assert _encode(0xff, b'a') == b'\xd4\xffa'
    assert _encode(-1, b'a') == b'\xd4\xffa'
    assert _encode(0x101, b'a') == b'\xd4\x01a'
