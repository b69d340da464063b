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
MessagePack type tags.

These values come from the MessagePack specification (https://github.com/msgpack/msgpack/blob/master/spec.md) and must
not be changed, any decoder relies on them byte-for-byte.
"""

from typing import Final

NIL: Final[int] = 0xc0
FALSE: Final[int] = 0xc2
TRUE: Final[int] = 0xc3

BIN8: Final[int] = 0xc4
BIN16: Final[int] = 0xc5
BIN32: Final[int] = 0xc6

EXT8: Final[int] = 0xc7
EXT16: Final[int] = 0xc8
EXT32: Final[int] = 0xc9

FLOAT32: Final[int] = 0xca
FLOAT64: Final[int] = 0xcb

UINT8: Final[int] = 0xcc
UINT16: Final[int] = 0xcd
UINT32: Final[int] = 0xce
UINT64: Final[int] = 0xcf

INT8: Final[int] = 0xd0
INT16: Final[int] = 0xd1
INT32: Final[int] = 0xd2
INT64: Final[int] = 0xd3

FIXEXT1: Final[int] = 0xd4
FIXEXT2: Final[int] = 0xd5
FIXEXT4: Final[int] = 0xd6
FIXEXT8: Final[int] = 0xd7
FIXEXT16: Final[int] = 0xd8

STR8: Final[int] = 0xd9
STR16: Final[int] = 0xda
STR32: Final[int] = 0xdb

ARRAY16: Final[int] = 0xdc
ARRAY32: Final[int] = 0xdd

# inline-length forms: the tag's high bits are fixed and the low bits hold the length
FIXSTR_PREFIX: Final[int] = 0b101_00000
FIXSTR_MAX_LENGTH: Final[int] = 0b000_11111
FIXARRAY_PREFIX: Final[int] = 0b1001_0000
FIXARRAY_MAX_LENGTH: Final[int] = 0b0000_1111

# payload size -> dedicated fixext tag
FIXEXT_TAGS: Final[dict[int, int]] = {
    1: FIXEXT1,
    2: FIXEXT2,
    4: FIXEXT4,
    8: FIXEXT8,
    16: FIXEXT16,
}

TIMESTAMP_EXT_KIND: Final[int] = 1
TIMESTAMP_NANOSECONDS_SHIFT: Final[int] = 34
TIMESTAMP_SECONDS_MASK: Final[int] = (1 << TIMESTAMP_NANOSECONDS_SHIFT) - 1
