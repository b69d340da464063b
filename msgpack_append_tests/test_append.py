from datetime import datetime, timezone

import msgpack

from msgpack_append import append


def test_appends_after_existing_content() -> None:
    dst = b'\x01\x02'
    assert append.append_int8(dst, 20) == b'\x01\x02\xd0\x14'
    assert append.append_nil(dst) == b'\x01\x02\xc0'
    assert dst == b'\x01\x02'


def test_does_not_mutate_bytearray() -> None:
    dst = bytearray(b'\x90')
    out = append.append_bool(dst, True)
    assert out == b'\x90\xc3'
    assert dst == bytearray(b'\x90')
    # the caller can still grow its own buffer
    dst.extend(b'\xc2')
    assert dst == bytearray(b'\x90\xc2')


def test_every_kind() -> None:
    out = b''
    out = append.append_array_len(out, 18)
    out = append.append_int8(out, -8)
    out = append.append_int16(out, -16)
    out = append.append_int32(out, -32)
    out = append.append_int64(out, -64)
    out = append.append_uint8(out, 8)
    out = append.append_uint16(out, 16)
    out = append.append_uint32(out, 32)
    out = append.append_uint64(out, 64)
    out = append.append_float32(out, 1.5)
    out = append.append_float64(out, -2.25)
    out = append.append_string(out, 'hello')
    out = append.append_bytes(out, b'\x00\x01')
    out = append.append_ext(out, 3, b'abc')
    out = append.append_timestamp(out, 1700000000)
    out = append.append_timestamp(out, 1700000000, 500)
    out = append.append_time(out, datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc))
    out = append.append_nil(out)
    out = append.append_bool(out, False)

    assert msgpack.unpackb(out) == [
        -8, -16, -32, -64,
        8, 16, 32, 64,
        1.5, -2.25,
        'hello',
        b'\x00\x01',
        msgpack.ExtType(3, b'abc'),
        msgpack.ExtType(1, (1700000000).to_bytes(4, 'big')),
        msgpack.ExtType(1, ((500 << 34) | 1700000000).to_bytes(8, 'big')),
        msgpack.ExtType(1, (1700000000).to_bytes(4, 'big')),
        None,
        False,
    ]


def test_string_headers() -> None:
    assert append.append_string(b'', 'a' * 31)[:1] == b'\xbf'
    assert append.append_string(b'', 'a' * 32)[:2] == b'\xd9\x20'
    assert append.append_bytes(b'', b'')[:2] == b'\xc4\x00'
