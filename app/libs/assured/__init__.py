"""Fluent HTTP testing DSL with a request/response filter chain."""

from .builder import RequestSpecBuilder
from .chain import FilterContext, execute_filter_chain
from .config import EncoderConfig, HttpClientConfig, RestAssuredConfig
from .defaults import GlobalDefaults, defaults
from .dsl import configure, configure_logging, expect, filters, given, reset, when, with_
from .exceptions import (
    AssuredError,
    ContinuationAlreadyUsedError,
    FilterChainError,
    InvalidFilterResultError,
    InvalidRequestError,
    PathParamError,
    ResponseValidationError,
)
from .models import Request, Response
from .request_spec import RequestSpecification
from .response_spec import ResponseSpecification
from .transport import HttpxTransport, Transport
from .types import DispatchFn, Filter

__all__ = [
    "given",
    "when",
    "with_",
    "expect",
    "filters",
    "configure",
    "configure_logging",
    "reset",
    "defaults",
    "GlobalDefaults",
    "RequestSpecification",
    "ResponseSpecification",
    "RequestSpecBuilder",
    "FilterContext",
    "execute_filter_chain",
    "Filter",
    "DispatchFn",
    "Request",
    "Response",
    "Transport",
    "HttpxTransport",
    "RestAssuredConfig",
    "EncoderConfig",
    "HttpClientConfig",
    "AssuredError",
    "PathParamError",
    "FilterChainError",
    "ContinuationAlreadyUsedError",
    "InvalidFilterResultError",
    "ResponseValidationError",
    "InvalidRequestError",
]
