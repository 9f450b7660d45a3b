"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, with no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from user_service import __version__

DEFAULT_SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
    "X-XSS-Protection": "1; mode=block",
}


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string, reported by /health.
        environment: Deployment environment (development, test, production).
            Internal error messages are only exposed in development.
        debug: Serve interactive docs when True. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_dir: Optional directory for error.log and combined.log files.
        host: Bind address used by the ``serve`` command.
        port: Bind port used by the ``serve`` command.
        api_prefix: Path prefix under which all routes are mounted.
        cors_origins: Origins allowed to call the API from a browser.
        rate_limit_enabled: Toggle request rate limiting.
        rate_limit_default: Per-client limit for API routes, e.g. "100/15minutes".
        security_headers: Headers stamped on every response. An empty
            value drops that header.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "User Service"
    version: str = __version__
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    host: str = "0.0.0.0"
    port: int = 4000
    api_prefix: str = "/api"

    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8081"]
    rate_limit_enabled: bool = True
    rate_limit_default: str = "100/15minutes"

    security_headers: dict[str, str] = DEFAULT_SECURITY_HEADERS

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


settings = Settings()
