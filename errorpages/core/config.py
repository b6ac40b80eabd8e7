"""
Application configuration.

Loads settings from environment variables and .env file.
Maintenance override content is NOT configured here: it is read
live from the process environment on every request.
"""

from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from errorpages.domain.pages.entities import OverrideRoute

REFRESH_SERVICE_NAME = "refresh"

REFRESH_ROUTES: tuple[OverrideRoute, ...] = (
    OverrideRoute(
        match_key="/version-checks/fresha",
        filename="refresh-fresha.json",
        env_var="REFRESH_FRESHA_MAINTENANCE",
    ),
    OverrideRoute(
        match_key="/version-checks/shedul",
        filename="refresh-shedul.json",
        env_var="REFRESH_SHEDUL_MAINTENANCE",
    ),
)


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the service.
        version: Current service version string.
        error_files_path: Directory holding the error page files.
        debug: Echo the proxy metadata headers back on every error response.
            Enabled by any non-empty DEBUG value.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        access_log: Keep uvicorn access lines in the log output.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    project_name: str = "Custom Error Pages"
    version: str = "0.1.0"
    error_files_path: str = "/www"
    debug: bool = False
    log_level: str = "INFO"
    access_log: bool = False
    host: str = "0.0.0.0"
    port: int = 8080

    @field_validator("debug", mode="before")
    @classmethod
    def _any_value_enables_debug(cls, value: Any) -> Any:
        """Any non-empty DEBUG value turns header echo on, "false" included."""
        if isinstance(value, str):
            return bool(value.strip())
        return value


settings = Settings()
