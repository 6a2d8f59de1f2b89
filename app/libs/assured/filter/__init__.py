"""Built-in filters."""

from .auth import AuthSpecification, BasicAuthFilter, FormAuthConfig, FormAuthFilter, OAuth2Filter
from .common import headers_filter, timeout_filter
from .log import (
    ErrorLoggingFilter,
    LogDetail,
    RequestLoggingFilter,
    ResponseLoggingFilter,
    log_errors_to,
    log_request_to,
    log_response_to,
    logging_filter,
)

__all__ = [
    "AuthSpecification",
    "BasicAuthFilter",
    "FormAuthConfig",
    "FormAuthFilter",
    "OAuth2Filter",
    "LogDetail",
    "RequestLoggingFilter",
    "ResponseLoggingFilter",
    "ErrorLoggingFilter",
    "log_request_to",
    "log_response_to",
    "log_errors_to",
    "logging_filter",
    "headers_filter",
    "timeout_filter",
]
