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
This module implements nil, it is a single `b'\xc0'` byte with no payload.

>>> se = Serializer.build_bytes_serializer()
>>> encode_nil(se)
>>> bytes(se.finalize())
b'\xc0'
"""

from msgpack_append import consts
from msgpack_append.serialization import Serializer


def encode_nil(serializer: Serializer) -> None:
    serializer.write_byte(consts.NIL)
