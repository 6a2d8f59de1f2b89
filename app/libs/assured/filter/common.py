from typing import TYPE_CHECKING

from ..models import Response

if TYPE_CHECKING:
    from ..chain import FilterContext
    from ..request_spec import RequestSpecification
    from ..response_spec import ResponseSpecification
    from ..types import Filter


def headers_filter(**headers: str) -> "Filter":
    """Set headers on every request, replacing ones with the same name."""

    def headers_filter(
        request_spec: "RequestSpecification",
        response_spec: "ResponseSpecification",
        ctx: "FilterContext",
    ) -> Response:
        for name, value in headers.items():
            request_spec.replace_header(name.replace("_", "-"), value)
        return ctx.next(request_spec, response_spec)

    return headers_filter


def timeout_filter(timeout: float) -> "Filter":
    def timeout_filter(
        request_spec: "RequestSpecification",
        response_spec: "ResponseSpecification",
        ctx: "FilterContext",
    ) -> Response:
        config = request_spec.get_config()
        http_client_config = config.http_client_config.model_copy(update={"timeout": timeout})
        request_spec.config(config.with_http_client_config(http_client_config))
        return ctx.next(request_spec, response_spec)

    return timeout_filter
