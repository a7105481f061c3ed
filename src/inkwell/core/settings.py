"""Application settings and configuration.

This module defines all configuration options for the Inkwell application.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Inkwell", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    admin_email: str | None = Field(default=None, alias="ADMIN_EMAIL")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Security and authentication
    secret_key: str = Field(alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24 * 7,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )
    password_min_length: int = Field(default=8, alias="PASSWORD_MIN_LENGTH")

    # Document store
    database_url: str = Field(default="sqlite:///./inkwell.db", alias="DATABASE_URL")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Local query cache. Earlier builds used five minutes; fifteen is current.
    cache_ttl_seconds: float = Field(default=15 * 60, alias="CACHE_TTL_SECONDS")

    # Client-wide request throttle (sliding window)
    rate_limit_window_seconds: float = Field(default=5 * 60, alias="RATE_LIMIT_WINDOW_SECONDS")
    rate_limit_requests: int = Field(default=100, alias="RATE_LIMIT_REQUESTS")

    # Listing sizes
    feed_page_size: int = Field(default=20, alias="FEED_PAGE_SIZE")
    explore_limit: int = Field(default=50, alias="EXPLORE_LIMIT")
    chat_history_limit: int = Field(default=50, alias="CHAT_HISTORY_LIMIT")

    # Content limits
    title_max_length: int = Field(default=100, alias="TITLE_MAX_LENGTH")
    excerpt_max_length: int = Field(default=160, alias="EXCERPT_MAX_LENGTH")
    comment_max_length: int = Field(default=1000, alias="COMMENT_MAX_LENGTH")
    chat_message_max_length: int = Field(default=500, alias="CHAT_MESSAGE_MAX_LENGTH")

    # Remote image checks for article cover images
    image_url_probe_enabled: bool = Field(default=False, alias="IMAGE_URL_PROBE_ENABLED")
    image_url_probe_timeout_seconds: float = Field(
        default=5.0,
        alias="IMAGE_URL_PROBE_TIMEOUT_SECONDS",
    )

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()  # type: ignore[call-arg]
