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
This module was made to hold compound encoding implementations.

Compound encoders are encoders that are generic in some way and will delegate the encoding of some portion to another
encoder. For example an array encoder writes the array header and delegates each element to an encoder that knows how
to encode the element type.

The general organization should be that each submodule `x` deals with a single kind of value and look like this:

    def encode_x(serializer: Serializer, value: ValueType, ...config params...) -> None:
        ...
"""

from typing import Protocol, TypeVar

from msgpack_append.serialization import Serializer

T_contra = TypeVar('T_contra', contravariant=True)


class Encoder(Protocol[T_contra]):
    def __call__(self, serializer: Serializer, value: T_contra, /) -> None:
        ...
