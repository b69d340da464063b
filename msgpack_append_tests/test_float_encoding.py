import math
import struct

import msgpack
import pytest

from msgpack_append.encoding.float import encode_float32, encode_float64
from msgpack_append.serialization import Serializer


def _encode(encoder, value: float) -> bytes:
    se = Serializer.build_bytes_serializer()
    encoder(se, value)
    return bytes(se.finalize())


def _float64_from_bits(bits: int) -> float:
    return struct.unpack('>d', bits.to_bytes(8, 'big'))[0]


def _float32_from_bits(bits: int) -> float:
    return struct.unpack('>f', bits.to_bytes(4, 'big'))[0]


FLOAT64_BIT_PATTERNS = [
    0x0000000000000000,  # +0
    0x8000000000000000,  # -0
    0x3ff0000000000000,  # 1.0
    0xc034000000000000,  # -20.0
    0x0000000000000001,  # smallest subnormal
    0x000fffffffffffff,  # largest subnormal
    0x7fefffffffffffff,  # largest finite
    0x7ff0000000000000,  # +inf
    0xfff0000000000000,  # -inf
    0x7ff8000000000000,  # quiet NaN
    0x7ff8000000000123,  # quiet NaN with payload
    0xfff8000000abcdef,  # negative NaN with payload
]

FLOAT32_BIT_PATTERNS = [
    0x00000000,  # +0
    0x80000000,  # -0
    0x3f800000,  # 1.0
    0x00000001,  # smallest subnormal
    0x007fffff,  # largest subnormal
    0x7f7fffff,  # largest finite
    0x7f800000,  # +inf
    0xff800000,  # -inf
]


@pytest.mark.parametrize('bits', FLOAT64_BIT_PATTERNS)
def test_float64_bit_pattern(bits: int) -> None:
    encoded = _encode(encode_float64, _float64_from_bits(bits))
    assert encoded == b'\xcb' + bits.to_bytes(8, 'big')

    decoded = msgpack.unpackb(encoded)
    assert struct.pack('>d', decoded) == bits.to_bytes(8, 'big')


@pytest.mark.parametrize('bits', FLOAT32_BIT_PATTERNS)
def test_float32_bit_pattern(bits: int) -> None:
    encoded = _encode(encode_float32, _float32_from_bits(bits))
    assert encoded == b'\xca' + bits.to_bytes(4, 'big')

    decoded = msgpack.unpackb(encoded)
    assert struct.pack('>f', decoded) == bits.to_bytes(4, 'big')


# double NaN bits and the float32 bits they narrow to
FLOAT32_NAN_NARROWING = [
    (0x7ff8000000000000, 0x7fc00000),  # default quiet NaN
    (0xfff8000000000000, 0xffc00000),  # negative quiet NaN
    (0x7ff8000020000000, 0x7fc00001),  # quiet NaN with payload
    (0x7ff0000020000000, 0x7f800001),  # signalling NaN, smallest payload
    (0x7ff4000000000000, 0x7fa00000),  # signalling NaN
    (0xfff7ffffe0000000, 0xffbfffff),  # negative signalling NaN, largest payload
    (0x7ff0000000000001, 0x7fc00000),  # payload lost when narrowing
]


@pytest.mark.parametrize('bits64, bits32', FLOAT32_NAN_NARROWING)
def test_float32_nan_payload(bits64: int, bits32: int) -> None:
    encoded = _encode(encode_float32, _float64_from_bits(bits64))
    assert encoded == b'\xca' + bits32.to_bytes(4, 'big')


def test_float32_nan() -> None:
    encoded = _encode(encode_float32, math.nan)
    assert encoded[0] == 0xca
    assert math.isnan(msgpack.unpackb(encoded))


def test_float32_narrowing() -> None:
    value = 20.1234
    decoded = msgpack.unpackb(_encode(encode_float32, value))
    assert decoded == struct.unpack('>f', struct.pack('>f', value))[0]
    assert abs(decoded - value) < 1e-5


def test_float32_overflow_becomes_infinity() -> None:
    assert _encode(encode_float32, 1e300) == bytes.fromhex('ca7f800000')
    assert _encode(encode_float32, -1e300) == bytes.fromhex('caff800000')


def test_float64_round_trip() -> None:
    for value in [20.1234, -1.5, math.pi, 1e300, 5e-324]:
        assert msgpack.unpackb(_encode(encode_float64, value)) == value
