"""Filters that print requests and responses.

The stream filters write a human-readable rendition of the HTTP message to a
text stream (``sys.stdout`` unless told otherwise); :func:`logging_filter`
sends a one-line summary through stdlib logging instead.
"""

import logging
import sys
from enum import Enum
from typing import TYPE_CHECKING, TextIO

from ..models import Response

if TYPE_CHECKING:
    from ..chain import FilterContext
    from ..request_spec import RequestSpecification
    from ..response_spec import ResponseSpecification
    from ..types import Filter


class LogDetail(str, Enum):
    ALL = "all"
    METHOD = "method"
    URI = "uri"
    PARAMS = "params"
    PATH = "path"
    HEADERS = "headers"
    COOKIES = "cookies"
    BODY = "body"
    STATUS = "status"


class _StreamFilter:
    def __init__(self, detail: LogDetail = LogDetail.ALL, stream: TextIO | None = None):
        self.detail = LogDetail(detail)
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # resolved per call so pytest's capsys sees the output
        return self._stream or sys.stdout

    def _wants(self, *details: LogDetail) -> bool:
        return self.detail is LogDetail.ALL or self.detail in details

    def _print_response(self, response: Response) -> None:
        lines: list[str] = []
        if self._wants(LogDetail.STATUS):
            lines.append(response.status_line)
        if self._wants(LogDetail.HEADERS):
            encoding = response.headers.encoding
            lines.extend(f"{name.decode(encoding)}: {value.decode(encoding)}" for name, value in response.headers.raw)
        if self._wants(LogDetail.COOKIES) and self.detail is not LogDetail.ALL:
            lines.extend(response.headers.get_list("set-cookie"))
        if self._wants(LogDetail.BODY):
            if self.detail is LogDetail.ALL:
                lines.append("")
            lines.append(response.as_string())
        print("\n".join(lines), file=self.stream)


class RequestLoggingFilter(_StreamFilter):
    def __call__(
        self,
        request_spec: "RequestSpecification",
        response_spec: "ResponseSpecification",
        ctx: "FilterContext",
    ) -> Response:
        lines: list[str] = []
        if self._wants(LogDetail.METHOD):
            lines.append(f"Request method:\t{request_spec.get_method()}")
        if self._wants(LogDetail.URI):
            lines.append(f"Request URI:\t{request_spec.get_uri()}")
        if self._wants(LogDetail.PARAMS):
            lines.append(_section("Request params:", request_spec.get_request_params()))
            lines.append(_section("Query params:", request_spec.get_query_params()))
            lines.append(_section("Form params:", request_spec.get_form_params()))
        if self._wants(LogDetail.PARAMS, LogDetail.PATH):
            lines.append(_section("Path params:", request_spec.get_path_params()))
        if self._wants(LogDetail.HEADERS):
            headers = request_spec.get_headers()
            content_type = request_spec.get_request_content_type()
            if content_type:
                headers.append(("Content-Type", content_type))
            lines.append(_section("Headers:", headers))
        if self._wants(LogDetail.COOKIES):
            lines.append(_section("Cookies:", request_spec.get_cookies()))
        if self._wants(LogDetail.BODY):
            body = request_spec.get_body()
            lines.append(_section("Body:", {} if body is None else {"": body}))
        print("\n".join(lines), file=self.stream)
        return ctx.next(request_spec, response_spec)


class ResponseLoggingFilter(_StreamFilter):
    def __call__(
        self,
        request_spec: "RequestSpecification",
        response_spec: "ResponseSpecification",
        ctx: "FilterContext",
    ) -> Response:
        response = ctx.next(request_spec, response_spec)
        self._print_response(response)
        return response


class ErrorLoggingFilter(_StreamFilter):
    """Prints the response only when its status is 400 or above."""

    def __call__(
        self,
        request_spec: "RequestSpecification",
        response_spec: "ResponseSpecification",
        ctx: "FilterContext",
    ) -> Response:
        response = ctx.next(request_spec, response_spec)
        if 400 <= response.status_code <= 599:
            self._print_response(response)
        return response


def log_request_to(stream: TextIO, detail: LogDetail = LogDetail.ALL) -> RequestLoggingFilter:
    return RequestLoggingFilter(detail, stream)


def log_response_to(stream: TextIO, detail: LogDetail = LogDetail.ALL) -> ResponseLoggingFilter:
    return ResponseLoggingFilter(detail, stream)


def log_errors_to(stream: TextIO) -> ErrorLoggingFilter:
    return ErrorLoggingFilter(LogDetail.ALL, stream)


def logging_filter(logger: logging.Logger | None = None) -> "Filter":
    log = logger or logging.getLogger(__name__)

    def logging_filter(
        request_spec: "RequestSpecification",
        response_spec: "ResponseSpecification",
        ctx: "FilterContext",
    ) -> Response:
        log.info(f"-> {request_spec.get_method()} {request_spec.get_uri()}")
        response = ctx.next(request_spec, response_spec)
        log.info(f"<- {response.status_code} ({response.latency_ms}ms)")
        return response

    return logging_filter


class RequestLogSpecification:
    """``given().log().all()`` and friends: attach a request logging filter."""

    def __init__(self, request_spec: "RequestSpecification"):
        self._request_spec = request_spec

    def all(self) -> "RequestSpecification":
        return self._log(LogDetail.ALL)

    def method(self) -> "RequestSpecification":
        return self._log(LogDetail.METHOD)

    def uri(self) -> "RequestSpecification":
        return self._log(LogDetail.URI)

    def params(self) -> "RequestSpecification":
        return self._log(LogDetail.PARAMS)

    def headers(self) -> "RequestSpecification":
        return self._log(LogDetail.HEADERS)

    def cookies(self) -> "RequestSpecification":
        return self._log(LogDetail.COOKIES)

    def body(self) -> "RequestSpecification":
        return self._log(LogDetail.BODY)

    def _log(self, detail: LogDetail) -> "RequestSpecification":
        return self._request_spec.filter(RequestLoggingFilter(detail))


class ResponseLogSpecification:
    def __init__(self, request_spec: "RequestSpecification", response_spec: "ResponseSpecification"):
        self._request_spec = request_spec
        self._response_spec = response_spec

    def all(self) -> "ResponseSpecification":
        return self._log(ResponseLoggingFilter(LogDetail.ALL))

    def status(self) -> "ResponseSpecification":
        return self._log(ResponseLoggingFilter(LogDetail.STATUS))

    def headers(self) -> "ResponseSpecification":
        return self._log(ResponseLoggingFilter(LogDetail.HEADERS))

    def body(self) -> "ResponseSpecification":
        return self._log(ResponseLoggingFilter(LogDetail.BODY))

    def if_error(self) -> "ResponseSpecification":
        return self._log(ErrorLoggingFilter())

    def _log(self, f: _StreamFilter) -> "ResponseSpecification":
        self._request_spec.filter(f)
        return self._response_spec


def _section(title: str, values: dict | list) -> str:
    items = list(values.items()) if isinstance(values, dict) else list(values)
    if not items:
        return f"{title}\t<none>"
    rendered = [f"{name}={value}" if name else str(value) for name, value in items]
    return f"{title}\t" + "\n\t\t".join(rendered)
