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
This module implements the MessagePack ext type: an application-defined kind byte plus an opaque payload.

Layout: [header][kind: 1 byte][payload]

The header is chosen by the payload length L, exact sizes are checked first:

- L in {1, 2, 4, 8, 16}: the fixext tag for that size (`d4`, `d5`, `d6`, `d7`, `d8`), no length byte
- L < 256: `c7` followed by L as 1 byte
- L < 65536: `c8` followed by L as 2 bytes
- otherwise: `c9` followed by L as 4 bytes

>>> se = Serializer.build_bytes_serializer()
>>> encode_ext(se, 5, b'\x01\x02\x03\x04\x05\x06\x07\x08')  # fixext8, writes d7 05 0102030405060708
>>> encode_ext(se, 5, b'abc')  # ext8, writes c7 03 05 616263
>>> bytes(se.finalize()).hex()
'd7050102030405060708c70305616263'

The kind is a single byte, negative kinds (reserved by MessagePack for predefined types) are written in two's
complement:

>>> se = Serializer.build_bytes_serializer()
>>> encode_ext(se, -1, b'')
>>> bytes(se.finalize()).hex()
'c700ff'
"""

from typing import NamedTuple

from msgpack_append import consts
from msgpack_append.serialization import Serializer
from msgpack_append.serialization.types import Buffer

from .length import encode_tiered_length


class ExtValue(NamedTuple):
    """An ext value that has not been encoded yet, `kind` is the application-defined type byte."""
    kind: int
    data: bytes


def encode_ext_length(serializer: Serializer, size: int) -> None:
    """ Write only the ext header for a payload of `size` bytes, the kind byte is not included.
    """
    fixext_tag = consts.FIXEXT_TAGS.get(size)
    if fixext_tag is not None:
        serializer.write_byte(fixext_tag)
    else:
        encode_tiered_length(serializer, size, tag8=consts.EXT8, tag16=consts.EXT16, tag32=consts.EXT32)


def encode_ext(serializer: Serializer, kind: int, data: Buffer) -> None:
    """ Encodes an ext value of the given `kind` with `data` as its payload.

    This modules's docstring has more details and examples.
    """
    data_view = memoryview(data)
    encode_ext_length(serializer, data_view.nbytes)
    serializer.write_byte(kind & 0xff)
    serializer.write_bytes(data_view)
