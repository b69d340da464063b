import msgpack
import pytest

from msgpack_append.encoding.utf8 import encode_utf8
from msgpack_append.serialization import Serializer


def _encode(value) -> bytes:
    se = Serializer.build_bytes_serializer()
    encode_utf8(se, value)
    return bytes(se.finalize())


@pytest.mark.parametrize('length,header', [
    (0, 'a0'),
    (1, 'a1'),
    (31, 'bf'),
    (32, 'd920'),
    (255, 'd9ff'),
    (256, 'da0100'),
    (65535, 'daffff'),
    (65536, 'db00010000'),
])
def test_header_tiers(length: int, header: str) -> None:
    value = 'x' * length
    encoded = _encode(value)
    header_bytes = bytes.fromhex(header)
    assert encoded[:len(header_bytes)] == header_bytes
    assert encoded[len(header_bytes):] == value.encode('utf-8')
    assert msgpack.unpackb(encoded) == value


def test_length_counts_utf8_bytes() -> None:
    # 13 characters, 32 bytes in UTF-8
    value = 'ハトホル' * 2 + 'π' * 3 + 'ab'
    assert len(value) == 13
    assert len(value.encode('utf-8')) == 32
    encoded = _encode(value)
    assert encoded[:2] == b'\xd9\x20'
    assert msgpack.unpackb(encoded) == value


def test_multibyte_round_trip() -> None:
    for value in ['π', '😎', 'ハトホル', 'mixed ascii and ünïcödé']:
        assert msgpack.unpackb(_encode(value)) == value


def test_encoded_bytes_are_not_validated() -> None:
    assert _encode(b'\xff\xfe') == b'\xa2\xff\xfe'
    assert _encode('\ud800') == b'\xa3\xed\xa0\x80'
