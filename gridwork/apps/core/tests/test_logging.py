"""Tests for log formatters, request-context binding and the request middleware."""

import json
import logging

from django.http import HttpResponse
from django.test import RequestFactory, SimpleTestCase, TestCase, tag

from gridwork.apps.core.test_utils import create_staff_user
from gridwork.logging import (
    DevFormatter,
    JsonFormatter,
    RequestContextFilter,
    bind_log_context,
    current_log_context,
    reset_log_context,
)
from gridwork.middleware import RequestContextMiddleware


def make_record(msg="reservation_created", **extra):
    record = logging.LogRecord(
        name="gridwork.apps.reservations.views",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@tag("unit")
class LogContextTests(SimpleTestCase):
    def test_bind_drops_empty_values(self):
        token = bind_log_context(request_id="abc", user_id=None, username="")
        try:
            self.assertEqual(current_log_context(), {"request_id": "abc"})
        finally:
            reset_log_context(token)
        self.assertEqual(current_log_context(), {})

    def test_filter_attaches_context(self):
        token = bind_log_context(request_id="abc", path="/tickets/")
        try:
            record = make_record()
            self.assertTrue(RequestContextFilter().filter(record))
        finally:
            reset_log_context(token)
        self.assertEqual(record.request_id, "abc")
        self.assertEqual(record.path, "/tickets/")


@tag("unit")
class FormatterTests(SimpleTestCase):
    def test_json_formatter_includes_extras(self):
        output = json.loads(JsonFormatter().format(make_record(reservation_id=7)))
        self.assertEqual(output["message"], "reservation_created")
        self.assertEqual(output["level"], "INFO")
        self.assertEqual(output["reservation_id"], 7)

    def test_json_formatter_stringifies_unserializable(self):
        output = json.loads(JsonFormatter().format(make_record(obj=object())))
        self.assertTrue(output["obj"].startswith("<object object"))

    def test_dev_formatter_appends_extras(self):
        line = DevFormatter().format(make_record(ticket_id=3))
        self.assertIn("reservation_created | ticket_id=3", line)


@tag("views")
class RequestContextMiddlewareTests(TestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def test_binds_context_during_request(self):
        seen = {}

        def get_response(request):
            seen.update(current_log_context())
            return HttpResponse("ok")

        request = self.factory.get("/reservations/", HTTP_X_REQUEST_ID="req-1")
        request.user = create_staff_user(username="sam")
        response = RequestContextMiddleware(get_response)(request)

        self.assertEqual(seen["request_id"], "req-1")
        self.assertEqual(seen["path"], "/reservations/")
        self.assertEqual(seen["method"], "GET")
        self.assertEqual(seen["username"], "sam")
        self.assertEqual(response["X-Request-ID"], "req-1")
        self.assertEqual(current_log_context(), {})

    def test_generates_request_id(self):
        response = self.client.get("/healthz")
        self.assertEqual(len(response["X-Request-ID"]), 32)
