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

from typing import TypeVar

from typing_extensions import override

from msgpack_append.serialization.exceptions import TooLongError
from msgpack_append.serialization.serializer import Serializer

from ..types import Buffer
from .generic_adapter import GenericSerializerAdapter

S = TypeVar('S', bound=Serializer)


class MaxBytesExceededError(TooLongError):
    """ This error is raised when the adapted serializer reached its maximum bytes write.

    After this exception is raised the adapted serializer cannot be used anymore. Handlers of this exception are
    expected to either bubble up the exception (or an equivalent exception) or return an error. Handlers should not
    try to write again on the same serializer.

    The inner serializer may have received part of a value before the limit was hit, so whatever it holds should be
    considered a failed encoding overall, not simply a failed write.
    """
    pass


class MaxBytesSerializer(GenericSerializerAdapter[S]):
    """Caps the number of bytes that can be appended through this adapter.

    Bytes already present in the inner serializer when it is wrapped do not count towards the limit.
    """

    def __init__(self, serializer: S, max_bytes: int) -> None:
        super().__init__(serializer)
        self._bytes_left = max_bytes

    @property
    def bytes_left(self) -> int:
        return max(self._bytes_left, 0)

    def _check_update_exceeds(self, write_size: int) -> None:
        self._bytes_left -= write_size
        if self._bytes_left < 0:
            raise MaxBytesExceededError('result is too long')

    @override
    def write_byte(self, data: int) -> None:
        self._check_update_exceeds(1)
        super().write_byte(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        data_view = memoryview(data)
        self._check_update_exceeds(len(data_view))
        super().write_bytes(data_view)
