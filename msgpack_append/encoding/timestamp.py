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
This module implements timestamps as an ext value of kind 1.

A timestamp is a number of seconds since the Unix epoch plus a nanosecond remainder. There are two layouts:

- nanoseconds == 0: fixext4 (`d6 01`) followed by the seconds as a 32-bit big-endian integer
- otherwise: fixext8 (`d7 01`) followed by one 64-bit big-endian word, nanoseconds in the upper 30 bits and seconds in
  the lower 34 bits, that is `nanoseconds << 34 | seconds`

>>> se = Serializer.build_bytes_serializer()
>>> encode_timestamp(se, 1700000000)  # writes d6 01 6553f100
>>> encode_timestamp(se, 1700000000, 500)  # writes d7 01 000007d06553f100
>>> bytes(se.finalize()).hex()
'd6016553f100d701000007d06553f100'

A decoder gets the fields back with `nanoseconds = word >> 34` and `seconds = word & (2**34 - 1)`.

The 4-byte layout keeps only the lowest 32 bits of the seconds, larger values are silently truncated. The 8-byte
layout does not mask the seconds to 34 bits either, a value that does not fit overlaps the nanoseconds. Callers are
expected to only give values that fit:

>>> se = Serializer.build_bytes_serializer()
>>> encode_timestamp(se, 2**32 + 7)
>>> bytes(se.finalize()).hex()
'd60100000007'

`datetime` objects are converted with microsecond precision, naive ones are taken as UTC:

>>> from datetime import datetime, timezone
>>> se = Serializer.build_bytes_serializer()
>>> encode_datetime(se, datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc))
>>> bytes(se.finalize()).hex()
'd6016553f100'
"""

from datetime import datetime, timezone
from typing import NamedTuple

from msgpack_append import consts
from msgpack_append.serialization import Serializer

from .int import encode_int

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Timestamp(NamedTuple):
    seconds: int
    nanoseconds: int = 0

    @classmethod
    def from_datetime(cls, dt: datetime) -> 'Timestamp':
        """Split `dt` into whole seconds since the epoch (floored) and a non-negative nanosecond remainder."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        delta = dt - EPOCH
        return cls(delta.days * 86400 + delta.seconds, delta.microseconds * 1000)


def encode_timestamp(serializer: Serializer, seconds: int, nanoseconds: int = 0) -> None:
    """ Encodes a timestamp given as seconds since the epoch and a nanosecond remainder.

    This modules's docstring has more details and examples.
    """
    if nanoseconds == 0:
        serializer.write_byte(consts.FIXEXT4)
        serializer.write_byte(consts.TIMESTAMP_EXT_KIND)
        encode_int(serializer, seconds, length=4, signed=False)
    else:
        word = (nanoseconds << consts.TIMESTAMP_NANOSECONDS_SHIFT) | seconds
        serializer.write_byte(consts.FIXEXT8)
        serializer.write_byte(consts.TIMESTAMP_EXT_KIND)
        encode_int(serializer, word, length=8, signed=False)


def encode_datetime(serializer: Serializer, dt: datetime) -> None:
    """ Encodes a `datetime` as a timestamp.
    """
    seconds, nanoseconds = Timestamp.from_datetime(dt)
    encode_timestamp(serializer, seconds, nanoseconds)
