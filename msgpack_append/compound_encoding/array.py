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
An array is basically any value that has a known size and is iterable.

Layout: [array header for N][value_0]...[value_N-1]

>>> from msgpack_append.encoding.utf8 import encode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> value = ['foobar', 'π', 'test']
>>> encode_array(se, value, encode_utf8)
>>> bytes(se.finalize()).hex()
'93a6666f6f626172a2cf80a474657374'

Breakdown of the result:

    93: fixarray with 3 elements
    a6666f6f626172: 'foobar' (fixstr header + data)
    a2cf80: 'π' (fixstr header + data)
    a474657374: 'test' (fixstr header + data)
"""

from collections.abc import Collection
from typing import TypeVar

from msgpack_append.encoding.array import encode_array_length
from msgpack_append.serialization import Serializer

from . import Encoder

T = TypeVar('T')


def encode_array(serializer: Serializer, values: Collection[T], encoder: Encoder[T]) -> None:
    encode_array_length(serializer, len(values))
    for value in values:
        encoder(serializer, value)
