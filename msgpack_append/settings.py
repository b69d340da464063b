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

import base64
from enum import Enum
from typing import Optional

from pydantic import Field
from typing_extensions import assert_never

from msgpack_append.serialization import Serializer
from msgpack_append.serialization.types import Buffer
from msgpack_append.utils.pydantic import BaseModel


class OutputFormat(str, Enum):
    HEX = 'hex'
    BASE64 = 'base64'
    RAW = 'raw'


class EncoderSettings(BaseModel):
    # Maximum number of bytes a single encoding run may append, None means unlimited
    max_bytes: Optional[int] = Field(default=None, ge=0)

    # How encoded output is rendered by the CLI
    output_format: OutputFormat = OutputFormat.HEX

    def build_serializer(self) -> Serializer:
        """Build an in-memory serializer honoring `max_bytes`."""
        return Serializer.build_bytes_serializer().with_optional_max_bytes(self.max_bytes)

    def format_output(self, data: Buffer) -> bytes:
        raw = bytes(data)
        match self.output_format:
            case OutputFormat.HEX:
                return raw.hex().encode('ascii')
            case OutputFormat.BASE64:
                return base64.b64encode(raw)
            case OutputFormat.RAW:
                return raw
            case _:
                assert_never(self.output_format)
