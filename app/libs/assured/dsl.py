"""Module-level entry points of the DSL.

    from libs import assured

    assured.given().path_param("firstName", "John").get("/{firstName}/{lastName}", "Doe")
"""

from collections.abc import Iterable
from typing import Any

from configs import AppConfig
from extensions.ext_logging import init_logging

from .defaults import defaults
from .request_spec import RequestSpecification
from .response_spec import ResponseSpecification
from .types import Filter


def given() -> RequestSpecification:
    request_spec = RequestSpecification(defaults)
    if defaults.request_specification is not None:
        request_spec.spec(defaults.request_specification)
    if defaults.response_specification is not None:
        request_spec.expect().merge(defaults.response_specification)
    return request_spec


def when() -> RequestSpecification:
    return given()


def with_() -> RequestSpecification:
    return given()


def expect() -> ResponseSpecification:
    return given().expect()


def filters(*filters: Filter | Iterable[Filter]) -> None:
    """Replace the filters applied to every request."""
    defaults.set_filters(*filters)


def configure(**options: Any) -> None:
    defaults.configure(**options)


def reset() -> None:
    defaults.reset()


def configure_logging(config: AppConfig | None = None) -> None:
    """Send log records to stdout (and ``LOG_FILE`` when set), each one
    tagged with the request id, method, path and filter of the chain that
    emitted it."""
    init_logging(config)
