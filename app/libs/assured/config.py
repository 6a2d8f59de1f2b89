from pydantic import BaseModel, ConfigDict, Field, PositiveFloat

from configs import AppConfig, app_config
from libs.path import XmlPathConfig


class EncoderConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    default_content_charset: str = "ISO-8859-1"
    append_default_content_charset_to_content_type_if_undefined: bool = True
    default_charset_for_content_type: dict[str, str] = Field(
        default_factory=lambda: {"application/json": "UTF-8"}
    )

    def charset_for(self, content_type: str) -> str:
        mime = content_type.split(";", 1)[0].strip().lower()
        return self.default_charset_for_content_type.get(mime, self.default_content_charset)

    def with_content_charset_appended(self, enabled: bool) -> "EncoderConfig":
        return self.model_copy(
            update={"append_default_content_charset_to_content_type_if_undefined": enabled}
        )


class HttpClientConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    timeout: PositiveFloat = 30.0
    follow_redirects: bool = True


class RestAssuredConfig(BaseModel):
    """Immutable per-request configuration; ``with_*`` returns a modified copy."""

    model_config = ConfigDict(frozen=True)

    encoder_config: EncoderConfig = Field(default_factory=EncoderConfig)
    http_client_config: HttpClientConfig = Field(default_factory=HttpClientConfig)
    xml_path_config: XmlPathConfig = Field(default_factory=XmlPathConfig)

    @classmethod
    def from_settings(cls, settings: AppConfig | None = None) -> "RestAssuredConfig":
        settings = settings or app_config
        return cls(
            encoder_config=EncoderConfig(
                default_content_charset=settings.ASSURED_DEFAULT_CONTENT_CHARSET,
                append_default_content_charset_to_content_type_if_undefined=(
                    settings.ASSURED_APPEND_DEFAULT_CONTENT_CHARSET
                ),
            ),
            http_client_config=HttpClientConfig(
                timeout=settings.ASSURED_HTTP_TIMEOUT,
                follow_redirects=settings.ASSURED_FOLLOW_REDIRECTS,
            ),
        )

    def with_encoder_config(self, encoder_config: EncoderConfig) -> "RestAssuredConfig":
        return self.model_copy(update={"encoder_config": encoder_config})

    def with_http_client_config(self, http_client_config: HttpClientConfig) -> "RestAssuredConfig":
        return self.model_copy(update={"http_client_config": http_client_config})

    def with_xml_path_config(self, xml_path_config: XmlPathConfig) -> "RestAssuredConfig":
        return self.model_copy(update={"xml_path_config": xml_path_config})
