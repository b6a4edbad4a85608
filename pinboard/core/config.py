"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Search tuning (cache TTL, suggestion sample size,
facet top-N) lives here so the search service is constructed with
explicit values instead of module-level constants.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults. database_url is only required when a
    database session is actually requested (see persistence.database).
    """

    # App
    app_name: str = "pinboard"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (PostgreSQL via asyncpg)
    database_url: str = ""
    database_echo: bool = False
    # Optional pool overrides (None = use defaults in database.py)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # CORS
    allowed_origins: str = "http://localhost:3000"

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    # Search
    search_cache_ttl_seconds: int = 300
    search_suggestion_sample_size: int = 100
    search_facet_top_n: int = 10
    search_default_limit: int = 20
    search_max_limit: int = 100

    # Search analytics (best-effort event sink)
    analytics_enabled: bool = True
    analytics_batch_size: int = 10
    analytics_flush_interval_seconds: float = 30.0

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_search_tuning(self) -> "Settings":
        """Reject non-positive search and analytics tuning values."""
        positive = {
            "search_cache_ttl_seconds": self.search_cache_ttl_seconds,
            "search_suggestion_sample_size": self.search_suggestion_sample_size,
            "search_facet_top_n": self.search_facet_top_n,
            "search_default_limit": self.search_default_limit,
            "search_max_limit": self.search_max_limit,
            "analytics_batch_size": self.analytics_batch_size,
        }
        for name, value in positive.items():
            if value <= 0:
                raise ValueError(f"{name.upper()} must be positive, got {value}")
        if self.search_default_limit > self.search_max_limit:
            raise ValueError(
                "SEARCH_DEFAULT_LIMIT must not exceed SEARCH_MAX_LIMIT "
                f"({self.search_default_limit} > {self.search_max_limit})"
            )
        if self.analytics_flush_interval_seconds <= 0:
            raise ValueError("ANALYTICS_FLUSH_INTERVAL_SECONDS must be positive")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    In tests, call get_settings.cache_clear() before overriding env vars so
    the next get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
