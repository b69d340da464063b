import pytest
from pydantic import ValidationError

from msgpack_append.serialization import TooLongError
from msgpack_append.serialization.adapters import MaxBytesSerializer
from msgpack_append.settings import EncoderSettings, OutputFormat


def test_defaults() -> None:
    settings = EncoderSettings()
    assert settings.max_bytes is None
    assert settings.output_format is OutputFormat.HEX
    assert not isinstance(settings.build_serializer(), MaxBytesSerializer)


def test_max_bytes() -> None:
    se = EncoderSettings(max_bytes=1).build_serializer()
    se.write_byte(0xc0)
    with pytest.raises(TooLongError):
        se.write_byte(0xc0)


def test_output_formats() -> None:
    data = b'\x92\xc3\xc2'
    assert EncoderSettings(output_format='hex').format_output(data) == b'92c3c2'
    assert EncoderSettings(output_format='base64').format_output(data) == b'ksPC'
    assert EncoderSettings(output_format='raw').format_output(data) == data


def test_validation() -> None:
    with pytest.raises(ValidationError):
        EncoderSettings(max_bytes=-1)
    with pytest.raises(ValidationError):
        EncoderSettings(output_format='yaml')
    with pytest.raises(ValidationError):
        EncoderSettings(unknown=True)


def test_frozen() -> None:
    settings = EncoderSettings()
    with pytest.raises(ValidationError):
        settings.max_bytes = 10
