import logging
import time
from typing import Any, Protocol, runtime_checkable

import httpx

from .config import HttpClientConfig
from .models import Request, Response

logger = logging.getLogger(__name__)


@runtime_checkable
class Transport(Protocol):
    def execute(self, request: Request) -> Response: ...


class HttpxTransport:
    """Sends requests through an ``httpx.Client``.

    An injected client is shared and never closed here; a client created on
    demand belongs to the transport and is closed by :meth:`close`.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        config: HttpClientConfig | None = None,
    ):
        self._config = config or HttpClientConfig()
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.Client:
        return self._ensure_client()

    def _ensure_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                timeout=self._config.timeout,
                follow_redirects=self._config.follow_redirects,
            )
        return self._client

    def close(self) -> None:
        if self._client and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "HttpxTransport":
        self._ensure_client()
        return self

    def __exit__(self, *_args: Any) -> None:
        self.close()

    def execute(self, request: Request) -> Response:
        client = self._ensure_client()
        logger.info(f"-> {request.method} {request.url}")
        start_time = time.time()

        http_response = client.request(
            method=request.method,
            url=request.url,
            headers=request.headers,
            content=request.body or None,
            timeout=request.timeout,
        )

        latency_ms = int((time.time() - start_time) * 1000)
        logger.info(f"<- {http_response.status_code} ({latency_ms}ms)")

        return Response(
            status_code=http_response.status_code,
            headers=httpx.Headers(http_response.headers),
            body=http_response.content,
            latency_ms=latency_ms,
            request=request,
            http_version=http_response.http_version,
        )
