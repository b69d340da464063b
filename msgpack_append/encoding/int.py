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

"""
This module implements encoding of integers with a fixed size.

`encode_int` writes a bare big-endian integer, the size and signedness are parametrized. It is the building block for
both the tagged MessagePack integers and the length prefixes of variable-length types.

The tagged encoders always use the explicitly sized form (tag + 1, 2, 4 or 8 bytes), even for small values that would
fit in a positive or negative fixint:

>>> se = Serializer.build_bytes_serializer()
>>> encode_int8(se, 20)  # writes d014
>>> encode_int16(se, -2)  # writes d1fffe
>>> encode_uint32(se, 1)  # writes ce00000001
>>> encode_int64(se, -20)  # writes d3ffffffffffffffec
>>> bytes(se.finalize()).hex()
'd014d1fffece00000001d3ffffffffffffffec'

Values outside of the width wrap around, the same as a conversion to a fixed-width integer would:

>>> se = Serializer.build_bytes_serializer()
>>> encode_uint8(se, 263)  # writes cc07
>>> encode_int8(se, 200)  # writes d0c8, which is -56
>>> bytes(se.finalize()).hex()
'cc07d0c8'
"""

from msgpack_append import consts
from msgpack_append.serialization import Serializer


def _wrap(number: int, *, length: int, signed: bool) -> int:
    bits = 8 * length
    if signed:
        half = 1 << (bits - 1)
        return ((number + half) % (1 << bits)) - half
    return number % (1 << bits)


def encode_int(serializer: Serializer, number: int, *, length: int, signed: bool) -> None:
    """ Encode an int using the given byte-length and signedness, without a tag.

    This modules's docstring has more details and examples.
    """
    data = int.to_bytes(_wrap(number, length=length, signed=signed), length, byteorder='big', signed=signed)
    serializer.write_bytes(data)


def _encode_tagged(serializer: Serializer, tag: int, number: int, *, length: int, signed: bool) -> None:
    serializer.write_byte(tag)
    encode_int(serializer, number, length=length, signed=signed)


def encode_int8(serializer: Serializer, number: int) -> None:
    _encode_tagged(serializer, consts.INT8, number, length=1, signed=True)


def encode_int16(serializer: Serializer, number: int) -> None:
    _encode_tagged(serializer, consts.INT16, number, length=2, signed=True)


def encode_int32(serializer: Serializer, number: int) -> None:
    _encode_tagged(serializer, consts.INT32, number, length=4, signed=True)


def encode_int64(serializer: Serializer, number: int) -> None:
    _encode_tagged(serializer, consts.INT64, number, length=8, signed=True)


def encode_uint8(serializer: Serializer, number: int) -> None:
    _encode_tagged(serializer, consts.UINT8, number, length=1, signed=False)


def encode_uint16(serializer: Serializer, number: int) -> None:
    _encode_tagged(serializer, consts.UINT16, number, length=2, signed=False)


def encode_uint32(serializer: Serializer, number: int) -> None:
    _encode_tagged(serializer, consts.UINT32, number, length=4, signed=False)


def encode_uint64(serializer: Serializer, number: int) -> None:
    _encode_tagged(serializer, consts.UINT64, number, length=8, signed=False)
