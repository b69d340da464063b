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
Encode values given on the command line, each as `type:value`:

    int8:20  uint64:0xff  float64:1.5  str:hello  bin:deadbeef  nil  bool:true
    array:3  ext:5:0102  timestamp:1700000000  timestamp:1700000000:500  time:2023-11-14T22:13:20+00:00

`array:N` only writes the header, the N elements must follow as the next arguments.
"""

import sys
from argparse import ArgumentParser
from datetime import datetime
from typing import Callable, Optional

from pydantic import ValidationError
from structlog import get_logger

from msgpack_append.cli.util import create_parser
from msgpack_append.encoding.array import encode_array_length
from msgpack_append.encoding.bool import encode_bool
from msgpack_append.encoding.bytes import encode_bytes
from msgpack_append.encoding.ext import encode_ext
from msgpack_append.encoding.float import encode_float32, encode_float64
from msgpack_append.encoding.int import (
    encode_int8,
    encode_int16,
    encode_int32,
    encode_int64,
    encode_uint8,
    encode_uint16,
    encode_uint32,
    encode_uint64,
)
from msgpack_append.encoding.nil import encode_nil
from msgpack_append.encoding.timestamp import encode_datetime, encode_timestamp
from msgpack_append.encoding.utf8 import encode_utf8
from msgpack_append.serialization import Serializer, TooLongError
from msgpack_append.settings import EncoderSettings, OutputFormat

logger = get_logger()

ValueWriter = Callable[[Serializer], None]

INT_ENCODERS: dict[str, Callable[[Serializer, int], None]] = {
    'int8': encode_int8,
    'int16': encode_int16,
    'int32': encode_int32,
    'int64': encode_int64,
    'uint8': encode_uint8,
    'uint16': encode_uint16,
    'uint32': encode_uint32,
    'uint64': encode_uint64,
}

FLOAT_ENCODERS: dict[str, Callable[[Serializer, float], None]] = {
    'float32': encode_float32,
    'float64': encode_float64,
}

BOOL_VALUES = {'true': True, 'false': False}


class InvalidValueSpecError(ValueError):
    """Raised when a `type:value` argument cannot be parsed."""
    pass


def parse_value_spec(spec: str) -> ValueWriter:
    """Parse a `type:value` argument into a function that writes the value to a serializer."""
    type_, sep, text = spec.partition(':')
    try:
        if type_ in INT_ENCODERS:
            int_encoder, number = INT_ENCODERS[type_], int(text, 0)
            return lambda se: int_encoder(se, number)
        if type_ in FLOAT_ENCODERS:
            float_encoder, fl = FLOAT_ENCODERS[type_], float(text)
            return lambda se: float_encoder(se, fl)
        if type_ == 'str':
            return lambda se: encode_utf8(se, text)
        if type_ == 'bin':
            data = bytes.fromhex(text)
            return lambda se: encode_bytes(se, data)
        if type_ == 'nil' and not sep:
            return encode_nil
        if type_ == 'bool' and text.lower() in BOOL_VALUES:
            flag = BOOL_VALUES[text.lower()]
            return lambda se: encode_bool(se, flag)
        if type_ == 'array':
            size = int(text, 0)
            if size < 0:
                raise ValueError('array length cannot be negative')
            return lambda se: encode_array_length(se, size)
        if type_ == 'ext':
            kind_text, _, payload_text = text.partition(':')
            kind, payload = int(kind_text, 0), bytes.fromhex(payload_text)
            return lambda se: encode_ext(se, kind, payload)
        if type_ == 'timestamp':
            seconds_text, _, nanoseconds_text = text.partition(':')
            seconds, nanoseconds = int(seconds_text, 0), int(nanoseconds_text or '0', 0)
            return lambda se: encode_timestamp(se, seconds, nanoseconds)
        if type_ == 'time':
            dt = datetime.fromisoformat(text)
            return lambda se: encode_datetime(se, dt)
    except ValueError as e:
        raise InvalidValueSpecError(f'invalid value {spec!r}: {e}') from e
    raise InvalidValueSpecError(f'wrong data type {spec!r}')


def encode_specs(specs: list[str], settings: EncoderSettings) -> bytes:
    writers = [parse_value_spec(spec) for spec in specs]
    se = settings.build_serializer()
    for writer in writers:
        writer(se)
    return bytes(se.finalize())


def build_parser() -> ArgumentParser:
    parser = create_parser()
    parser.add_argument('values', nargs='+', help='Values to encode, as type:value.')
    parser.add_argument('--max-bytes', type=int, help='Fail if the encoded output would be longer than this.')
    parser.add_argument('--output-format', choices=[f.value for f in OutputFormat], default=OutputFormat.HEX.value,
                        help='How to print the encoded output.')
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    log = logger.new(command='encode')

    try:
        settings = EncoderSettings(max_bytes=args.max_bytes, output_format=args.output_format)
    except ValidationError as e:
        print(e, file=sys.stderr)
        return 1

    try:
        data = encode_specs(args.values, settings)
    except InvalidValueSpecError as e:
        print(*e.args, file=sys.stderr)
        return 1
    except TooLongError:
        print(f'encoded output is longer than {settings.max_bytes} bytes', file=sys.stderr)
        return 1

    log.debug('encoded values', count=len(args.values), size=len(data))
    output = settings.format_output(data)
    if settings.output_format is OutputFormat.RAW:
        sys.stdout.buffer.write(output)
        sys.stdout.buffer.flush()
    else:
        print(output.decode('ascii'))
    return 0
