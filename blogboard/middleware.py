"""
Request correlation for blogboard.

Add to MIDDLEWARE to give every request an id that shows up on the error
page, in the response headers and, with RequestIdLogFilter, in the logs:

    MIDDLEWARE = [
        ...
        "blogboard.middleware.RequestIdMiddleware",
    ]
"""
import logging
import re
import uuid
from contextvars import ContextVar

from .conf import blog_settings

TRACEPARENT_RE = re.compile(r"^[0-9a-f]{2}-[0-9a-f]{32}-[0-9a-f]{16}-[0-9a-f]{2}$")

request_id_var = ContextVar("blogboard_request_id", default=None)


def new_request_id():
    return uuid.uuid4().hex


def request_id_from_headers(headers):
    """
    Return the incoming trace context if it is well formed.

    Returns:
        The traceparent value, or a new random id
    """
    traceparent = headers.get(blog_settings.TRACE_HEADER, "").strip().lower()
    if TRACEPARENT_RE.match(traceparent):
        return traceparent
    return new_request_id()


class RequestIdMiddleware:
    """Attach a correlation id to each request and its response."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.request_id = request_id_from_headers(request.headers)
        token = request_id_var.set(request.request_id)
        try:
            response = self.get_response(request)
        finally:
            request_id_var.reset(token)

        response[blog_settings.REQUEST_ID_HEADER] = request.request_id
        return response


class RequestIdLogFilter(logging.Filter):
    """Add request_id to log records; "-" outside a request."""

    def filter(self, record):
        record.request_id = request_id_var.get() or "-"
        return True
