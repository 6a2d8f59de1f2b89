"""Process-wide request defaults.

One :class:`GlobalDefaults` instance, ``defaults``, seeds every request
created by ``given()``. It is plain shared state with no locking: callers
mutate it through :meth:`GlobalDefaults.configure` / :meth:`set_filters`
and restore it with :meth:`reset` at test boundaries. Default filters are
not copied into request specifications; they are prepended once when a
request is dispatched.
"""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from configs import AppConfig, app_config

from .config import RestAssuredConfig
from .transport import HttpxTransport, Transport
from .types import Filter

if TYPE_CHECKING:
    from .request_spec import RequestSpecification
    from .response_spec import ResponseSpecification

logger = logging.getLogger(__name__)

_OPTIONS = frozenset(
    {
        "base_uri",
        "port",
        "base_path",
        "url_encoding_enabled",
        "config",
        "request_specification",
        "response_specification",
        "transport",
        "filters",
    }
)


class GlobalDefaults:
    def __init__(self, settings: AppConfig | None = None):
        self._settings = settings or app_config
        self._transport: Transport | None = None
        self._owns_transport = False
        self.reset()

    def reset(self) -> None:
        settings = self._settings
        self.base_uri: str = settings.ASSURED_BASE_URI
        self.port: int = settings.ASSURED_PORT
        self.base_path: str = settings.ASSURED_BASE_PATH
        self.url_encoding_enabled: bool = settings.ASSURED_URL_ENCODING_ENABLED
        self.config: RestAssuredConfig = RestAssuredConfig.from_settings(settings)
        self.request_specification: "RequestSpecification | None" = None
        self.response_specification: "ResponseSpecification | None" = None
        self._filters: tuple[Filter, ...] = ()
        self._release_transport()

    @property
    def filters(self) -> tuple[Filter, ...]:
        return self._filters

    def set_filters(self, *filters: Filter | Iterable[Filter]) -> None:
        """Replace the default filters; accepts filters or a single iterable."""
        if len(filters) == 1 and not callable(filters[0]):
            filters = tuple(filters[0])
        self._filters = tuple(filters)
        logger.debug(f"default filters set to {len(self._filters)} filter(s)")

    def configure(self, **options: Any) -> None:
        unknown = set(options) - _OPTIONS
        if unknown:
            raise TypeError(f"Unknown default option(s): {', '.join(sorted(unknown))}")
        for name, value in options.items():
            if name == "filters":
                self.set_filters(value)
            elif name == "transport":
                self.transport = value
            else:
                setattr(self, name, value)

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            self._transport = HttpxTransport(config=self.config.http_client_config)
            self._owns_transport = True
        return self._transport

    @transport.setter
    def transport(self, transport: Transport) -> None:
        self._release_transport()
        self._transport = transport

    def _release_transport(self) -> None:
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            self._transport.close()
        self._transport = None
        self._owns_transport = False


defaults = GlobalDefaults()
