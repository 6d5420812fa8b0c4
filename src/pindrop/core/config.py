"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pindrop.lib.pincodec import Region


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Codec
    default_region: str = Field(
        default="india",
        description="Region used when a request does not name one (india or world)",
    )

    @field_validator("default_region")
    @classmethod
    def validate_default_region(cls, v: str) -> str:
        return Region.parse(v).value

    # Batch conversion
    batch_max_rows: int = Field(
        default=100_000,
        description="Maximum rows accepted by a batch CSV conversion",
        gt=0,
    )
    batch_max_items: int = Field(
        default=1000,
        description="Maximum items accepted by a batch HTTP request",
        gt=0,
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for rotating log files (disabled when unset)",
    )

    # CORS
    cors_origins: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins (must be explicitly configured)",
    )
    cors_origin_regex: str = Field(
        default="",
        description="Regex pattern for allowed CORS origins",
    )

    # API
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API version prefix",
    )
    rate_limit_per_minute: int = Field(
        default=200,
        description="Maximum API requests per minute per IP address",
        gt=0,
    )
    trusted_proxy_headers: str = Field(
        default="",
        description=(
            "Comma-separated headers, in priority order, that a fronting proxy sets to the client IP. "
            "Leave empty when clients connect directly"
        ),
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        if not self.cors_origins.strip():
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def trusted_proxy_header_list(self) -> list[str]:
        """Parse trusted proxy headers string into a list."""
        return [h.strip() for h in self.trusted_proxy_headers.split(",") if h.strip()]


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
