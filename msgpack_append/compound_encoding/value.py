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
Encoding of arbitrary Python values, picking an encoder from the value's type.

The mapping is fixed:

- `None`: nil
- `bool`: bool
- `int`: int64 when negative, uint64 otherwise
- `float`: float64
- `str`: str
- `bytes`, `bytearray`, `memoryview`: bin
- `ExtValue`: ext
- `Timestamp`, `datetime`: timestamp
- `list`, `tuple`: array, each element encoded recursively

>>> se = Serializer.build_bytes_serializer()
>>> encode_value(se, [None, True, 'a', b'\x00', -1])
>>> bytes(se.finalize()).hex()
'95c0c3a161c40100d3ffffffffffffffff'

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_value(se, {'a': 1})
... except UnsupportedTypeError as e:
...     print(*e.args)
type not supported: dict
"""

from datetime import datetime
from typing import Any

from msgpack_append.encoding.bool import encode_bool
from msgpack_append.encoding.bytes import encode_bytes
from msgpack_append.encoding.ext import ExtValue, encode_ext
from msgpack_append.encoding.float import encode_float64
from msgpack_append.encoding.int import encode_int64, encode_uint64
from msgpack_append.encoding.nil import encode_nil
from msgpack_append.encoding.timestamp import Timestamp, encode_datetime, encode_timestamp
from msgpack_append.encoding.utf8 import encode_utf8
from msgpack_append.serialization import Serializer, UnsupportedTypeError

from .array import encode_array


def encode_value(serializer: Serializer, value: Any) -> None:
    """ Encodes a Python value using the encoder for its type.

    This modules's docstring has the type mapping and examples.
    """
    # bool before int, and the NamedTuples before tuple, because they are subclasses
    if value is None:
        encode_nil(serializer)
    elif isinstance(value, bool):
        encode_bool(serializer, value)
    elif isinstance(value, int):
        if value < 0:
            encode_int64(serializer, value)
        else:
            encode_uint64(serializer, value)
    elif isinstance(value, float):
        encode_float64(serializer, value)
    elif isinstance(value, str):
        encode_utf8(serializer, value)
    elif isinstance(value, (bytes, bytearray, memoryview)):
        encode_bytes(serializer, value)
    elif isinstance(value, ExtValue):
        encode_ext(serializer, value.kind, value.data)
    elif isinstance(value, Timestamp):
        encode_timestamp(serializer, value.seconds, value.nanoseconds)
    elif isinstance(value, datetime):
        encode_datetime(serializer, value)
    elif isinstance(value, (list, tuple)):
        encode_array(serializer, value, encode_value)
    else:
        raise UnsupportedTypeError(f'type not supported: {type(value).__name__}')
