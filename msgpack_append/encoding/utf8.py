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
This module implements the MessagePack str type: UTF-8 text with a length prefix.

The header depends on the byte length L of the UTF-8 data:

- L < 32: a single fixstr byte, 0b101xxxxx where xxxxx is L
- L < 256: str8, `d9` followed by L as 1 byte
- L < 65536: str16, `da` followed by L as 2 bytes
- otherwise: str32, `db` followed by L as 4 bytes

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'foobar')  # writes a6666f6f626172
>>> encode_utf8(se, 'π')  # writes a2cf80
>>> encode_utf8(se, '')  # writes a0
>>> bytes(se.finalize()).hex()
'a6666f6f626172a2cf80a0'

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'x' * 32)
>>> bytes(se.finalize())[:3].hex()
'd92078'

The data is not validated, the encoder only cares about its byte length. Text that was already encoded can be given
as `bytes`, and lone surrogates in a `str` are passed through as they are:

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, b'\xff\xfe')
>>> encode_utf8(se, '\ud800')
>>> bytes(se.finalize()).hex()
'a2fffea3eda080'
"""

from typing import Union

from msgpack_append import consts
from msgpack_append.serialization import Serializer

from .length import encode_tiered_length


def encode_utf8_length(serializer: Serializer, size: int) -> None:
    """ Write only the str header for a UTF-8 byte sequence of `size` bytes.
    """
    if size <= consts.FIXSTR_MAX_LENGTH:
        serializer.write_byte(consts.FIXSTR_PREFIX | size)
    else:
        encode_tiered_length(serializer, size, tag8=consts.STR8, tag16=consts.STR16, tag32=consts.STR32)


def encode_utf8(serializer: Serializer, value: Union[str, bytes]) -> None:
    """ Encodes a string using UTF-8 and adding a length prefix.

    This modules's docstring has more details and examples.
    """
    data = value.encode('utf-8', 'surrogatepass') if isinstance(value, str) else value
    encode_utf8_length(serializer, len(data))
    serializer.write_bytes(data)
