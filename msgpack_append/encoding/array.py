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
This module implements the header of the MessagePack array type.

Only the element count is written, the caller must append exactly that many encoded values right after it:

- N < 16: a single fixarray byte, 0b1001xxxx where xxxx is N
- N < 65536: `dc` followed by N as 2 bytes
- otherwise: `dd` followed by N as 4 bytes

>>> from msgpack_append.encoding.bool import encode_bool
>>> se = Serializer.build_bytes_serializer()
>>> encode_array_length(se, 2)  # writes 92
>>> encode_bool(se, True)  # writes c3
>>> encode_bool(se, False)  # writes c2
>>> bytes(se.finalize()).hex()
'92c3c2'

>>> se = Serializer.build_bytes_serializer()
>>> encode_array_length(se, 16)  # writes dc0010
>>> encode_array_length(se, 65536)  # writes dd00010000
>>> bytes(se.finalize()).hex()
'dc0010dd00010000'

`msgpack_append.compound_encoding.array` has a helper that writes the header and the elements together.
"""

from msgpack_append import consts
from msgpack_append.serialization import Serializer

from .length import encode_tiered_length


def encode_array_length(serializer: Serializer, size: int) -> None:
    """ Write the header of an array of `size` elements, without any element.

    This modules's docstring has more details and examples.
    """
    if size <= consts.FIXARRAY_MAX_LENGTH:
        serializer.write_byte(consts.FIXARRAY_PREFIX | size)
    else:
        encode_tiered_length(serializer, size, tag8=None, tag16=consts.ARRAY16, tag32=consts.ARRAY32)
