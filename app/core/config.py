"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here. No scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_sql: Emit SQLAlchemy statement logs.
        database_url: SQLAlchemy database URL.
        default_locale: Locale used when the client sends no usable
            Accept-Language header.
        supported_locales: Locales the message catalogs are offered in.
        messages_dir: Directory holding messages*.yml catalogs. Defaults
            to the catalogs shipped with the package.
        rate_limit_enabled: Toggle per-client rate limiting.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Money API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_sql: bool = False

    database_url: str = "sqlite:///./money.db"

    default_locale: str = "en"
    supported_locales: list[str] = ["en", "pt_BR"]
    messages_dir: str | None = None

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"


settings = Settings()
