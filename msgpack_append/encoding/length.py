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
Length prefixes shared by the variable-length types (str, bin, array and ext).

Every one of these types picks the narrowest of up to three tagged headers: a tag followed by the length as a 1, 2 or
4 byte big-endian unsigned integer. The inline forms (fixstr, fixarray, fixext) are specific to each type and are
checked by the caller before falling back to these helpers.

>>> se = Serializer.build_bytes_serializer()
>>> encode_tiered_length(se, 3, tag8=0xc4, tag16=0xc5, tag32=0xc6)  # writes c403
>>> encode_tiered_length(se, 300, tag8=0xc4, tag16=0xc5, tag32=0xc6)  # writes c5012c
>>> encode_tiered_length(se, 70000, tag8=0xc4, tag16=0xc5, tag32=0xc6)  # writes c600011170
>>> bytes(se.finalize()).hex()
'c403c5012cc600011170'

When a type has no 8-bit header the 16-bit one is used for every length below 65536:

>>> se = Serializer.build_bytes_serializer()
>>> encode_tiered_length(se, 20, tag8=None, tag16=0xdc, tag32=0xdd)
>>> bytes(se.finalize()).hex()
'dc0014'
"""

from typing import Optional

from msgpack_append.serialization import Serializer

from .int import encode_int

MAX_LENGTH8 = 0xff
MAX_LENGTH16 = 0xffff


def encode_length(serializer: Serializer, tag: int, size: int, *, length: int) -> None:
    """ Write `tag` followed by `size` as a big-endian unsigned integer of `length` bytes.

    Sizes that do not fit are truncated to their lowest `length` bytes.
    """
    serializer.write_byte(tag)
    encode_int(serializer, size, length=length, signed=False)


def encode_tiered_length(
    serializer: Serializer,
    size: int,
    *,
    tag8: Optional[int],
    tag16: int,
    tag32: int,
) -> None:
    """ Write the narrowest tagged header that can hold `size`.

    This modules's docstring has more details and examples.
    """
    if tag8 is not None and size <= MAX_LENGTH8:
        encode_length(serializer, tag8, size, length=1)
    elif size <= MAX_LENGTH16:
        encode_length(serializer, tag16, size, length=2)
    else:
        encode_length(serializer, tag32, size, length=4)
