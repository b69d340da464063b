import json
import unittest
from contextlib import redirect_stderr
from io import StringIO

import structlog

from msgpack_append.cli.util import (
    LoggingOptions,
    LoggingOutput,
    process_logging_options,
    process_logging_output,
    setup_logging,
)


class LoggingSetupTest(unittest.TestCase):
    def tearDown(self):
        setup_logging(logging_output=LoggingOutput.NULL, logging_options=LoggingOptions(debug=False))

    def test_logging_flags_are_consumed(self):
        argv = ['msgpack-append encode', '--json-logs', '--debug', 'nil']
        self.assertEqual(process_logging_output(argv), LoggingOutput.JSON)
        self.assertEqual(process_logging_options(argv), LoggingOptions(debug=True))
        self.assertEqual(argv, ['msgpack-append encode', 'nil'])

    def test_default_logging_flags(self):
        argv = ['msgpack-append encode', 'nil']
        self.assertEqual(process_logging_output(argv), LoggingOutput.PRETTY)
        self.assertEqual(process_logging_options(argv), LoggingOptions(debug=False))
        self.assertEqual(argv, ['msgpack-append encode', 'nil'])

    def test_json_logs_go_to_stderr(self):
        err = StringIO()
        with redirect_stderr(err):
            setup_logging(logging_output=LoggingOutput.JSON, logging_options=LoggingOptions(debug=False))
            log = structlog.get_logger('msgpack_append.test')
            log.debug('not shown')
            log.info('encoded {count} values', count=2)

        lines = err.getvalue().strip().splitlines()
        self.assertEqual(len(lines), 1)
        entry = json.loads(lines[0])
        self.assertEqual(entry['event'], 'encoded 2 values')
        self.assertEqual(entry['level'], 'info')
        self.assertEqual(entry['count'], 2)
