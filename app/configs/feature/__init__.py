from pydantic import Field, PositiveFloat, PositiveInt
from pydantic_settings import BaseSettings


class LoggingConfig(BaseSettings):
    """
    Configuration for library logging
    """

    LOG_LEVEL: str = Field(
        description="Logging level, default to INFO. Set to DEBUG to trace every filter invocation.",
        default="INFO",
    )

    LOG_FILE: str | None = Field(
        description="File path for log output.",
        default=None,
    )

    LOG_FILE_MAX_SIZE: PositiveInt = Field(
        description="Maximum file size for file rotation retention, the unit is megabytes (MB)",
        default=20,
    )

    LOG_FILE_BACKUP_COUNT: PositiveInt = Field(
        description="Maximum file backup count file rotation retention",
        default=5,
    )

    LOG_FORMAT: str = Field(
        description="Format string for log messages",
        default=(
            "%(asctime)s.%(msecs)03d %(levelname)s [%(threadName)s] "
            "[%(filename)s:%(lineno)d] [%(request_id)s %(request_method)s %(request_path)s %(filter_name)s] "
            "- %(message)s"
        ),
    )

    LOG_DATEFORMAT: str | None = Field(
        description="Date format string for log timestamps",
        default=None,
    )

    LOG_TZ: str | None = Field(
        description="Timezone for log timestamps (e.g., 'America/New_York')",
        default=None,
    )


class RequestDefaultsConfig(BaseSettings):
    """
    Process-wide request defaults restored by ``reset()``
    """

    ASSURED_BASE_URI: str = Field(
        description="Base URI prepended to relative request paths",
        default="http://localhost",
    )

    ASSURED_PORT: PositiveInt = Field(
        description="Port used when neither the base URI nor the request names one",
        default=8080,
    )

    ASSURED_BASE_PATH: str = Field(
        description="Path prefix inserted between the base URI and the request path",
        default="",
    )

    ASSURED_URL_ENCODING_ENABLED: bool = Field(
        description="Whether path parameter values are percent-encoded",
        default=True,
    )


class EncoderDefaultsConfig(BaseSettings):
    """
    Request body encoding defaults
    """

    ASSURED_DEFAULT_CONTENT_CHARSET: str = Field(
        description="Charset appended to content types that do not declare one",
        default="ISO-8859-1",
    )

    ASSURED_APPEND_DEFAULT_CONTENT_CHARSET: bool = Field(
        description="Whether to append the default charset to a charset-less content type",
        default=True,
    )


class HttpClientDefaultsConfig(BaseSettings):
    """
    Transport defaults
    """

    ASSURED_HTTP_TIMEOUT: PositiveFloat = Field(
        description="Timeout in seconds for a single request",
        default=30.0,
    )

    ASSURED_FOLLOW_REDIRECTS: bool = Field(
        description="Whether the transport follows redirects",
        default=True,
    )


class FeatureConfig(
    LoggingConfig,
    RequestDefaultsConfig,
    EncoderDefaultsConfig,
    HttpClientDefaultsConfig,
):
    pass
