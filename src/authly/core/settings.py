"""Application settings and configuration.

This module defines all configuration options for the Authly service.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Secrets (``AUTH_SECRET`` and ``CDN_TOKEN``) are optional here so the
    process can boot without them; the components that need them raise
    ``ConfigurationError`` at the point of use.
    """

    # Application metadata
    app_name: str = Field(default="Authly", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Listener and public address
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3001, alias="PORT")
    base_url: str = Field(default="http://localhost:3001", alias="BASE_URL")

    # Database configuration
    database_url: str = Field(default="sqlite:///./authly.db", alias="DATABASE_URL")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Token signing
    auth_secret: str | None = Field(default=None, alias="AUTH_SECRET")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    token_issuer: str = Field(default="authly-rhythm", alias="TOKEN_ISSUER")
    token_ttl_seconds: int = Field(default=60 * 60 * 24, alias="TOKEN_TTL_SECONDS")

    # Rhythm matching
    rhythm_tolerance_ms: float = Field(default=200, alias="RHYTHM_TOLERANCE_MS")

    # CDN push uploads
    cdn_token: str | None = Field(default=None, alias="CDN_TOKEN")
    cdn_api_url: str = Field(
        default="https://cdn.hackclub.com/api/v3/new",
        alias="CDN_API_URL",
    )
    cdn_timeout_seconds: float = Field(default=30.0, alias="CDN_TIMEOUT_SECONDS")
    max_upload_bytes: int = Field(default=25 * 1024 * 1024, alias="MAX_UPLOAD_BYTES")

    # Chart listing
    default_page_limit: int = Field(default=10, alias="DEFAULT_PAGE_LIMIT")
    max_page_limit: int = Field(default=50, alias="MAX_PAGE_LIMIT")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    def upload_callback_url(self, upload_id: str) -> str:
        """Return the public URL the CDN pulls a staged upload from."""
        return f"{self.base_url.rstrip('/')}/auth/upload/{upload_id}"


settings = Settings()
