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
This modules implements the MessagePack bin type: a byte sequence prefixed by its length.

Unlike str there is no inline form, the header is always explicit: `c4` + 1 byte length up to 255 bytes, `c5` + 2 bytes
up to 65535 and `c6` + 4 bytes above that. An empty sequence still takes the 2-byte header.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test')  # will prepend b'\xc4\x04' before writing b'test'
>>> encode_bytes(se, b'')  # writes c400
>>> bytes(se.finalize()).hex()
'c40474657374c400'

>>> se = Serializer.build_bytes_serializer()
>>> raw_data = b'test' * 64
>>> len(raw_data)
256
>>> encode_bytes(se, raw_data)  # prepends b'\xc5\x01\x00' before raw_data
>>> encoded_data = bytes(se.finalize())
>>> len(encoded_data)
259
>>> encoded_data[:7].hex()
'c5010074657374'
"""

from msgpack_append import consts
from msgpack_append.serialization import Serializer
from msgpack_append.serialization.types import Buffer

from .length import encode_tiered_length


def encode_bytes_length(serializer: Serializer, size: int) -> None:
    """ Write only the bin header for a byte sequence of `size` bytes.
    """
    encode_tiered_length(serializer, size, tag8=consts.BIN8, tag16=consts.BIN16, tag32=consts.BIN32)


def encode_bytes(serializer: Serializer, data: Buffer) -> None:
    """ Encodes a byte-sequence adding a length prefix.

    This modules's docstring has more details and examples.
    """
    data_view = memoryview(data)
    encode_bytes_length(serializer, data_view.nbytes)
    serializer.write_bytes(data_view)
