"""Tests for log context binding and formatters."""

import json
import logging

from django.test import SimpleTestCase, tag

from storefront.logging import (
    DevFormatter,
    JsonFormatter,
    RequestContextFilter,
    bind_log_context,
    current_log_context,
    reset_log_context,
)


def make_record(msg="hello", **extra):
    record = logging.LogRecord("storefront.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@tag("logging")
class LogContextTests(SimpleTestCase):
    def test_bind_skips_empty_values(self):
        token = bind_log_context(request_id="abc", utm_source="", user_id=None)
        try:
            self.assertEqual(current_log_context(), {"request_id": "abc"})
        finally:
            reset_log_context(token)
        self.assertEqual(current_log_context(), {})

    def test_filter_copies_context_onto_record(self):
        token = bind_log_context(host="shop.example")
        try:
            record = make_record()
            self.assertTrue(RequestContextFilter().filter(record))
        finally:
            reset_log_context(token)
        self.assertEqual(record.host, "shop.example")


@tag("logging")
class FormatterTests(SimpleTestCase):
    def test_json_formatter_includes_extras(self):
        record = make_record(utm_source="fb", helper=object())
        data = json.loads(JsonFormatter().format(record))

        self.assertEqual(data["message"], "hello")
        self.assertEqual(data["level"], "INFO")
        self.assertEqual(data["logger"], "storefront.test")
        self.assertEqual(data["utm_source"], "fb")
        # Non-serializable extras are stringified
        self.assertIsInstance(data["helper"], str)
        self.assertNotIn("lineno", data)

    def test_dev_formatter_appends_extras(self):
        line = DevFormatter().format(make_record(host="shop.example"))
        self.assertIn("INFO", line)
        self.assertIn("hello | host='shop.example'", line)
