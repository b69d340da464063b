from datetime import datetime, timezone

import msgpack
import pytest

from msgpack_append.compound_encoding.value import encode_value
from msgpack_append.encoding.ext import ExtValue
from msgpack_append.encoding.timestamp import Timestamp
from msgpack_append.serialization import Serializer, UnsupportedTypeError


def _encode(value) -> bytes:
    se = Serializer.build_bytes_serializer()
    encode_value(se, value)
    return bytes(se.finalize())


def test_scalars() -> None:
    assert _encode(None) == b'\xc0'
    assert _encode(True) == b'\xc3'
    assert _encode(False) == b'\xc2'
    assert _encode(1) == bytes.fromhex('cf0000000000000001')
    assert _encode(-1) == bytes.fromhex('d3ffffffffffffffff')
    assert _encode(1.0) == bytes.fromhex('cb3ff0000000000000')
    assert _encode('a') == b'\xa1a'
    assert _encode(b'a') == b'\xc4\x01a'
    assert _encode(bytearray(b'a')) == b'\xc4\x01a'


def test_ext_and_timestamps() -> None:
    assert _encode(ExtValue(5, b'\x01')) == b'\xd4\x05\x01'
    assert _encode(Timestamp(1700000000)) == bytes.fromhex('d6016553f100')
    assert _encode(Timestamp(1700000000, 500)) == bytes.fromhex('d701000007d06553f100')
    assert _encode(datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)) == bytes.fromhex('d6016553f100')


def test_nested_round_trip() -> None:
    value = [1, -2, 'three', [4.5, None, [True, b'six']], ()]
    assert msgpack.unpackb(_encode(value)) == [1, -2, 'three', [4.5, None, [True, b'six']], []]


def test_large_unsigned() -> None:
    assert msgpack.unpackb(_encode(2**64 - 1)) == 2**64 - 1


@pytest.mark.parametrize('value', [{'a': 1}, {1, 2}, object()])
def test_unsupported(value) -> None:
    with pytest.raises(UnsupportedTypeError):
        _encode(value)
