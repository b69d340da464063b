import doctest
import importlib

import pytest

MODULES_WITH_DOCTESTS = [
    'msgpack_append.append',
    'msgpack_append.compound_encoding.array',
    'msgpack_append.compound_encoding.value',
    'msgpack_append.encoding.array',
    'msgpack_append.encoding.bool',
    'msgpack_append.encoding.bytes',
    'msgpack_append.encoding.ext',
    'msgpack_append.encoding.float',
    'msgpack_append.encoding.int',
    'msgpack_append.encoding.length',
    'msgpack_append.encoding.nil',
    'msgpack_append.encoding.timestamp',
    'msgpack_append.encoding.utf8',
]


@pytest.mark.parametrize('module_name', MODULES_WITH_DOCTESTS)
def test_doctests(module_name: str) -> None:
    module = importlib.import_module(module_name)
    result = doctest.testmod(module)
    assert result.attempted > 0
    assert result.failed == 0
