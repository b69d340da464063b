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
MessagePack encoder that appends values to a caller-owned output buffer.

- `msgpack_append.encoding`: one encoder per MessagePack type, writing to a `Serializer`
- `msgpack_append.compound_encoding`: arrays of values and dispatch on Python types
- `msgpack_append.append`: the same encoders as `append_x(dst, value) -> bytes` functions
"""

__version__ = '0.1.0'
