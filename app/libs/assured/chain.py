"""Filter chain execution.

Filters run in order over one shared, mutable request specification. Each
filter either returns a response itself, which ends the chain, or calls
``ctx.next(request_spec, response_spec)`` to hand over to the next filter.
Past the last filter, ``next`` performs the dispatch.

The request specification is not copied between filters: a change
made by one filter is seen by every later filter and by the dispatch.
"""

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from extensions.ext_logging import chain_context_var, chain_log_context

from .exceptions import ContinuationAlreadyUsedError, InvalidFilterResultError
from .models import Response
from .types import DispatchFn, Filter

if TYPE_CHECKING:
    from .request_spec import RequestSpecification
    from .response_spec import ResponseSpecification

logger = logging.getLogger(__name__)


class FilterContext:
    def __init__(
        self,
        filters: tuple[Filter, ...],
        index: int,
        dispatch: DispatchFn,
        values: dict[str, Any],
    ):
        self._filters = filters
        self._index = index
        self._dispatch = dispatch
        self._used = False
        # shared by every context of one chain execution
        self.values = values

    def has_next(self) -> bool:
        return self._index < len(self._filters)

    def next(
        self,
        request_spec: "RequestSpecification",
        response_spec: "ResponseSpecification",
    ) -> Response:
        if self._used:
            raise ContinuationAlreadyUsedError()
        self._used = True
        return _execute(self._filters, self._index, request_spec, response_spec, self._dispatch, self.values)


def execute_filter_chain(
    filters: Sequence[Filter],
    request_spec: "RequestSpecification",
    response_spec: "ResponseSpecification",
    dispatch: DispatchFn,
) -> Response:
    with chain_log_context(request_spec.get_method(), request_spec.get_user_defined_path()):
        return _execute(tuple(filters), 0, request_spec, response_spec, dispatch, {})


def _execute(
    filters: tuple[Filter, ...],
    index: int,
    request_spec: "RequestSpecification",
    response_spec: "ResponseSpecification",
    dispatch: DispatchFn,
    values: dict[str, Any],
) -> Response:
    if index >= len(filters):
        with _running(""):
            return dispatch(request_spec, response_spec)

    current = filters[index]
    ctx = FilterContext(filters, index + 1, dispatch, values)
    logger.debug(f"filter {index + 1}/{len(filters)}: {describe_filter(current)}")

    with _running(describe_filter(current)):
        response = current(request_spec, response_spec, ctx)
    if not isinstance(response, Response):
        raise InvalidFilterResultError(
            f"Filter {describe_filter(current)} returned {type(response).__name__}, expected Response."
        )
    return response


def describe_filter(f: Filter) -> str:
    return getattr(f, "__qualname__", None) or type(f).__name__


@contextmanager
def _running(filter_name: str) -> Iterator[None]:
    context = chain_context_var.get()
    if context is None:
        yield
        return
    previous, context.filter_name = context.filter_name, filter_name
    try:
        yield
    finally:
        context.filter_name = previous
