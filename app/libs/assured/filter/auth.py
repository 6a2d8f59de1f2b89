import base64
import logging
from http.cookies import SimpleCookie
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from ..models import Response

if TYPE_CHECKING:
    from ..chain import FilterContext
    from ..request_spec import RequestSpecification
    from ..response_spec import ResponseSpecification

logger = logging.getLogger(__name__)


class BasicAuthFilter:
    def __init__(self, username: str, password: str):
        self.username = username
        self.password = password

    def __call__(
        self,
        request_spec: "RequestSpecification",
        response_spec: "ResponseSpecification",
        ctx: "FilterContext",
    ) -> Response:
        credentials = base64.b64encode(f"{self.username}:{self.password}".encode("utf-8")).decode("ascii")
        request_spec.replace_header("Authorization", f"Basic {credentials}")
        return ctx.next(request_spec, response_spec)


class OAuth2Filter:
    def __init__(self, access_token: str):
        self.access_token = access_token

    def __call__(
        self,
        request_spec: "RequestSpecification",
        response_spec: "ResponseSpecification",
        ctx: "FilterContext",
    ) -> Response:
        request_spec.replace_header("Authorization", f"Bearer {self.access_token}")
        return ctx.next(request_spec, response_spec)


class FormAuthConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    form_action: str = "/j_spring_security_check"
    username_field: str = "j_username"
    password_field: str = "j_password"


class FormAuthFilter:
    """Logs in through a login form and sends the session cookies it receives.

    The login post goes straight to the request's transport, outside the
    filter chain, to the same server as the request being filtered.
    """

    def __init__(self, username: str, password: str, config: FormAuthConfig | None = None):
        self.username = username
        self.password = password
        self.config = config or FormAuthConfig()

    def __call__(
        self,
        request_spec: "RequestSpecification",
        response_spec: "ResponseSpecification",
        ctx: "FilterContext",
    ) -> Response:
        from ..request_spec import RequestSpecification

        login = (
            RequestSpecification()
            .base_uri(request_spec.get_base_uri())
            .port(request_spec.get_port())
            .base_path("")
            .config(request_spec.get_config())
            .path(self.config.form_action)
            .form_param(self.config.username_field, self.username)
            .form_param(self.config.password_field, self.password)
        )
        login_response = request_spec.get_http_client().execute(login.to_request("POST"))

        cookies = SimpleCookie()
        for header in login_response.headers.get_list("set-cookie"):
            cookies.load(header)
        if not cookies:
            logger.warning(
                f"form login at {self.config.form_action} returned {login_response.status_code} without cookies"
            )
        request_spec.cookies({name: morsel.value for name, morsel in cookies.items()})
        return ctx.next(request_spec, response_spec)


class AuthSpecification:
    """``given().auth().basic(...)`` and friends: attach an auth filter."""

    def __init__(self, request_spec: "RequestSpecification"):
        self._request_spec = request_spec

    def basic(self, username: str, password: str) -> "RequestSpecification":
        return self._request_spec.filter(BasicAuthFilter(username, password))

    def oauth2(self, access_token: str) -> "RequestSpecification":
        return self._request_spec.filter(OAuth2Filter(access_token))

    def form(self, username: str, password: str, config: FormAuthConfig | None = None) -> "RequestSpecification":
        return self._request_spec.filter(FormAuthFilter(username, password, config))
