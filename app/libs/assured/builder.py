from collections.abc import Mapping
from typing import Any

from .config import RestAssuredConfig
from .defaults import GlobalDefaults
from .request_spec import RequestSpecification
from .transport import Transport
from .types import Filter


class RequestSpecBuilder:
    """Builds a reusable request specification to merge with ``spec()``.

    Example:
        shared = RequestSpecBuilder().add_header("X-Team", "qa").add_filter(my_filter).build()
        given().spec(shared).get("/greet")
    """

    def __init__(self, registry: GlobalDefaults | None = None):
        self._spec = RequestSpecification(registry)

    def set_base_uri(self, base_uri: str) -> "RequestSpecBuilder":
        self._spec.base_uri(base_uri)
        return self

    def set_base_path(self, base_path: str) -> "RequestSpecBuilder":
        self._spec.base_path(base_path)
        return self

    def set_port(self, port: int) -> "RequestSpecBuilder":
        self._spec.port(port)
        return self

    def set_config(self, config: RestAssuredConfig) -> "RequestSpecBuilder":
        self._spec.config(config)
        return self

    def set_transport(self, transport: Transport) -> "RequestSpecBuilder":
        self._spec.transport(transport)
        return self

    def set_content_type(self, content_type: str) -> "RequestSpecBuilder":
        self._spec.content_type(content_type)
        return self

    def set_body(self, body: Any) -> "RequestSpecBuilder":
        self._spec.body(body)
        return self

    def add_header(self, name: str, value: Any) -> "RequestSpecBuilder":
        self._spec.header(name, value)
        return self

    def add_headers(self, headers: Mapping[str, Any]) -> "RequestSpecBuilder":
        self._spec.headers(headers)
        return self

    def add_cookie(self, name: str, value: Any = "") -> "RequestSpecBuilder":
        self._spec.cookie(name, value)
        return self

    def add_param(self, name: str, *values: Any) -> "RequestSpecBuilder":
        self._spec.param(name, *values)
        return self

    def add_query_param(self, name: str, *values: Any) -> "RequestSpecBuilder":
        self._spec.query_param(name, *values)
        return self

    def add_form_param(self, name: str, *values: Any) -> "RequestSpecBuilder":
        self._spec.form_param(name, *values)
        return self

    def add_path_param(self, name: str, value: Any) -> "RequestSpecBuilder":
        self._spec.path_param(name, value)
        return self

    def add_filter(self, f: Filter) -> "RequestSpecBuilder":
        self._spec.filter(f)
        return self

    def add_filters(self, filters: list[Filter]) -> "RequestSpecBuilder":
        self._spec.filters(filters)
        return self

    def build(self) -> RequestSpecification:
        return self._spec.copy()
