# Copyright 2026 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

r"""
Functional interface to the encoders: every `append_x(dst, value)` returns `dst` extended by the encoding of `value`.

`dst` is any bytes-like object and is never modified, a new `bytes` is returned instead, so calls can be chained:

>>> out = append_array_len(b'', 2)
>>> out = append_int8(out, 20)
>>> out = append_string(out, 'hi')
>>> out.hex()
'92d014a26869'

Each function is a thin wrapper around the matching `encode_x` in `msgpack_append.encoding`, when writing many values
it is cheaper to use a `Serializer` directly.
"""

from datetime import datetime
from typing import Callable, Union

from msgpack_append.encoding import (
    array,
    bool as bool_encoding,
    bytes as bytes_encoding,
    ext,
    float as float_encoding,
    int as int_encoding,
    nil,
    timestamp,
    utf8,
)
from msgpack_append.serialization import Serializer
from msgpack_append.serialization.types import Buffer


def _append(dst: Buffer, encode: Callable[[Serializer], None]) -> bytes:
    se = Serializer.build_bytes_serializer(bytes(dst))
    encode(se)
    return bytes(se.finalize())


def append_int8(dst: Buffer, n: int) -> bytes:
    return _append(dst, lambda se: int_encoding.encode_int8(se, n))


def append_int16(dst: Buffer, n: int) -> bytes:
    return _append(dst, lambda se: int_encoding.encode_int16(se, n))


def append_int32(dst: Buffer, n: int) -> bytes:
    return _append(dst, lambda se: int_encoding.encode_int32(se, n))


def append_int64(dst: Buffer, n: int) -> bytes:
    return _append(dst, lambda se: int_encoding.encode_int64(se, n))


def append_uint8(dst: Buffer, n: int) -> bytes:
    return _append(dst, lambda se: int_encoding.encode_uint8(se, n))


def append_uint16(dst: Buffer, n: int) -> bytes:
    return _append(dst, lambda se: int_encoding.encode_uint16(se, n))


def append_uint32(dst: Buffer, n: int) -> bytes:
    return _append(dst, lambda se: int_encoding.encode_uint32(se, n))


def append_uint64(dst: Buffer, n: int) -> bytes:
    return _append(dst, lambda se: int_encoding.encode_uint64(se, n))


def append_float32(dst: Buffer, fl: float) -> bytes:
    return _append(dst, lambda se: float_encoding.encode_float32(se, fl))


def append_float64(dst: Buffer, fl: float) -> bytes:
    return _append(dst, lambda se: float_encoding.encode_float64(se, fl))


def append_string(dst: Buffer, s: Union[str, bytes]) -> bytes:
    return _append(dst, lambda se: utf8.encode_utf8(se, s))


def append_bytes(dst: Buffer, data: Buffer) -> bytes:
    return _append(dst, lambda se: bytes_encoding.encode_bytes(se, data))


def append_array_len(dst: Buffer, size: int) -> bytes:
    """Append only the header of an array, the `size` elements must be appended after it."""
    return _append(dst, lambda se: array.encode_array_length(se, size))


def append_ext(dst: Buffer, kind: int, data: Buffer) -> bytes:
    return _append(dst, lambda se: ext.encode_ext(se, kind, data))


def append_timestamp(dst: Buffer, seconds: int, nanoseconds: int = 0) -> bytes:
    return _append(dst, lambda se: timestamp.encode_timestamp(se, seconds, nanoseconds))


def append_time(dst: Buffer, ts: datetime) -> bytes:
    return _append(dst, lambda se: timestamp.encode_datetime(se, ts))


def append_nil(dst: Buffer) -> bytes:
    return _append(dst, nil.encode_nil)


def append_bool(dst: Buffer, v: bool) -> bytes:
    return _append(dst, lambda se: bool_encoding.encode_bool(se, v))
