"""
Logging Test Suite

Tests for JSON formatting, logging setup and request logging.
"""

import json
import logging
import shutil
import sys
import tempfile
import unittest
from pathlib import Path

from daybook.logging_monitoring import (
    LOG_FILE_NAME,
    JSONFormatter,
    RequestLogger,
    setup_logging,
)


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


class TestJSONFormatter(unittest.TestCase):

    def _record(self, **kwargs):
        return logging.LogRecord(
            name="daybook.test",
            level=kwargs.get("level", logging.INFO),
            pathname=__file__,
            lineno=10,
            msg=kwargs.get("msg", "Task %s added"),
            args=kwargs.get("args", (3,)),
            exc_info=kwargs.get("exc_info"),
        )

    def test_format_basic_record(self):
        data = json.loads(JSONFormatter().format(self._record()))

        self.assertEqual(data["message"], "Task 3 added")
        self.assertEqual(data["level"], "INFO")
        self.assertEqual(data["logger_name"], "daybook.test")
        self.assertEqual(data["line_number"], 10)
        self.assertEqual(data["extra"], {})

    def test_timestamp_is_timezone_aware(self):
        data = json.loads(JSONFormatter().format(self._record()))
        self.assertTrue(data["timestamp"].endswith("+00:00"))

    def test_format_includes_extra(self):
        record = self._record()
        record.extra = {"path": "/tasks", "status_code": 200}

        data = json.loads(JSONFormatter().format(record))

        self.assertEqual(data["extra"]["path"], "/tasks")
        self.assertEqual(data["extra"]["status_code"], 200)

    def test_format_includes_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = self._record(level=logging.ERROR, exc_info=sys.exc_info())

        data = json.loads(JSONFormatter().format(record))

        self.assertEqual(data["extra"]["exception"]["type"], "ValueError")
        self.assertEqual(data["extra"]["exception"]["message"], "boom")


class TestSetupLogging(unittest.TestCase):

    def setUp(self):
        self.root = logging.getLogger()
        self.original_level = self.root.level
        self.original_handlers = list(self.root.handlers)
        self.temp_dir = tempfile.mkdtemp(prefix="daybook_logs_")

    def tearDown(self):
        for handler in list(self.root.handlers):
            if handler not in self.original_handlers:
                self.root.removeHandler(handler)
                handler.close()
        self.root.setLevel(self.original_level)
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_writes_json_file(self):
        setup_logging("DEBUG", self.temp_dir)
        logging.getLogger("daybook.test").info("hello %s", "file")
        for handler in self.root.handlers:
            handler.flush()

        lines = (Path(self.temp_dir) / LOG_FILE_NAME).read_text(encoding="utf-8").splitlines()
        messages = [json.loads(line)["message"] for line in lines]
        self.assertIn("hello file", messages)

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging("INFO")
        count = len(self.root.handlers)
        setup_logging("INFO")
        self.assertEqual(len(self.root.handlers), count)

    def test_keeps_foreign_handlers(self):
        foreign = ListHandler()
        self.root.addHandler(foreign)
        try:
            setup_logging("INFO")
            self.assertIn(foreign, self.root.handlers)
        finally:
            self.root.removeHandler(foreign)


class TestRequestLogger(unittest.TestCase):

    def setUp(self):
        self.logger = logging.getLogger("daybook.test.access")
        self.logger.propagate = False
        self.logger.setLevel(logging.DEBUG)
        self.handler = ListHandler()
        self.logger.addHandler(self.handler)

    def tearDown(self):
        self.logger.removeHandler(self.handler)

    def test_log_request(self):
        RequestLogger(self.logger).log_request("GET", "/tasks", 200, 0.0123, "127.0.0.1")

        record = self.handler.records[0]
        self.assertEqual(record.levelno, logging.INFO)
        self.assertTrue(record.getMessage().startswith("GET /tasks - 200"))
        self.assertEqual(record.extra["status_code"], 200)
        self.assertAlmostEqual(record.extra["duration_ms"], 12.3)

    def test_server_errors_log_as_warning(self):
        RequestLogger(self.logger).log_request("POST", "/goals", 500, 0.001)
        self.assertEqual(self.handler.records[0].levelno, logging.WARNING)


if __name__ == "__main__":
    unittest.main()
