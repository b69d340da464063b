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
This module implements encoding of IEEE-754 floats, single (float32) and double (float64) precision.

The layout is a tag followed by the raw bit pattern of the value in big-endian order. The bits are taken with `struct`,
so NaN payloads, signed zeros and subnormals are kept exactly:

>>> se = Serializer.build_bytes_serializer()
>>> encode_float64(se, 1.5)  # writes cb3ff8000000000000
>>> encode_float64(se, -0.0)  # writes cb8000000000000000
>>> encode_float32(se, 1.5)  # writes ca3fc00000
>>> bytes(se.finalize()).hex()
'cb3ff8000000000000cb8000000000000000ca3fc00000'

Python floats are double precision, `encode_float32` narrows them using the usual round-to-nearest rule, which means
values too large for a float32 become an infinity of the same sign:

>>> se = Serializer.build_bytes_serializer()
>>> encode_float32(se, 1e300)
>>> encode_float32(se, -1e300)
>>> bytes(se.finalize()).hex()
'ca7f800000caff800000'

NaNs are narrowed by keeping the sign and the top 23 bits of the payload, a signalling NaN stays signalling:

>>> se = Serializer.build_bytes_serializer()
>>> encode_float32(se, struct.unpack('>d', bytes.fromhex('7ff0000020000000'))[0])
>>> bytes(se.finalize()).hex()
'ca7f800001'
"""

import math
import struct

from msgpack_append import consts
from msgpack_append.serialization import Serializer

FLOAT64_MANTISSA_MASK = (1 << 52) - 1
FLOAT32_EXPONENT_MASK = 0x7f800000
FLOAT32_QUIET_BIT = 0x00400000


def _narrow_nan(value: float) -> int:
    """Return the float32 bit pattern of a NaN, keeping its sign and the top 23 bits of its payload."""
    bits, = struct.unpack('>Q', struct.pack('>d', value))
    payload = (bits & FLOAT64_MANTISSA_MASK) >> 29
    if payload == 0:
        # the payload only had low bits, fall back to the default quiet NaN
        payload = FLOAT32_QUIET_BIT
    return (bits >> 63) << 31 | FLOAT32_EXPONENT_MASK | payload


def encode_float32(serializer: Serializer, value: float) -> None:
    """ Encode a float as a single precision IEEE-754 value.

    This modules's docstring has more details and examples.
    """
    serializer.write_byte(consts.FLOAT32)
    if math.isnan(value):
        serializer.write_struct((_narrow_nan(value),), '>I')
        return
    try:
        serializer.write_struct((value,), '>f')
    except OverflowError:
        serializer.write_struct((math.copysign(math.inf, value),), '>f')


def encode_float64(serializer: Serializer, value: float) -> None:
    """ Encode a float as a double precision IEEE-754 value.

    This modules's docstring has more details and examples.
    """
    serializer.write_byte(consts.FLOAT64)
    serializer.write_struct((value,), '>d')
