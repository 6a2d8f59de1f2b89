import json
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

import httpx

from libs.path import JsonPath, XmlPath, XmlPathConfig

if TYPE_CHECKING:
    from .response_spec import ResponseSpecification


@dataclass(frozen=True)
class Request:
    method: str
    url: str
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: bytes = b""
    timeout: float = 30.0


@dataclass(frozen=True)
class Response:
    status_code: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    body: bytes = b""
    latency_ms: int = 0
    request: Request | None = None
    http_version: str = "HTTP/1.1"
    xml_path_config: XmlPathConfig = field(default_factory=XmlPathConfig, repr=False, compare=False)

    @classmethod
    def of(
        cls,
        status_code: int = 200,
        body: bytes | str | dict | list | None = None,
        content_type: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> "Response":
        """Build a response from scratch, e.g. to short-circuit a filter chain."""
        merged = httpx.Headers(headers or {})
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
            content_type = content_type or "application/json"
        if isinstance(body, str):
            body = body.encode("utf-8")
        if content_type:
            merged["Content-Type"] = content_type
        return cls(status_code=status_code, headers=merged, body=body or b"")

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    @property
    def reason_phrase(self) -> str:
        return httpx.codes.get_reason_phrase(self.status_code)

    @property
    def status_line(self) -> str:
        return f"{self.http_version} {self.status_code} {self.reason_phrase}".rstrip()

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "")

    def header(self, name: str) -> str | None:
        return self.headers.get(name)

    def json(self) -> Any:
        return json.loads(self.body)

    def text(self) -> str:
        return self.body.decode(self._charset(), errors="replace")

    def as_string(self) -> str:
        return self.text()

    def json_path(self) -> JsonPath:
        return JsonPath(self.body)

    def xml_path(self) -> XmlPath:
        return XmlPath(self.body, self.xml_path_config)

    def path(self, path: str) -> Any:
        """Evaluate ``path`` with the evaluator matching the content type."""
        mime = self.content_type.lower()
        if "xml" in mime or "html" in mime:
            return self.xml_path().get(path)
        return self.json_path().get(path)

    def then(self) -> "ResponseSpecification":
        from .response_spec import ResponseSpecification

        return ResponseSpecification.bound_to(self)

    def with_status_code(self, status_code: int) -> "Response":
        return replace(self, status_code=status_code)

    def with_body(self, body: bytes | str) -> "Response":
        if isinstance(body, str):
            body = body.encode(self._charset())
        headers = httpx.Headers(self.headers)
        if "content-length" in headers:
            headers["Content-Length"] = str(len(body))
        return replace(self, body=body, headers=headers)

    def with_headers(self, **headers: str) -> "Response":
        merged = httpx.Headers(self.headers)
        merged.update(headers)
        return replace(self, headers=merged)

    def with_content_type(self, content_type: str) -> "Response":
        merged = httpx.Headers(self.headers)
        merged["Content-Type"] = content_type
        return replace(self, headers=merged)

    def _charset(self) -> str:
        for part in self.content_type.split(";")[1:]:
            key, _, value = part.strip().partition("=")
            if key.lower() == "charset" and value:
                return value.strip('"')
        return "utf-8"
