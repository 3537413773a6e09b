"""Configuration settings for todo_store.

Uses pydantic-settings for config parsing from environment variables
and defaults. Configuration precedence: CLI flags > env vars > defaults.
"""

from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DB_URL = "sqlite:///../todos.db"


def sqlite_url_from_connection_string(value: str) -> str:
    """Turn a ``Data Source=<path>`` connection string into a SQLite URL.

    Values that are already SQLAlchemy URLs are returned unchanged.

    Args:
        value: Connection string or database URL.

    Returns:
        SQLAlchemy database URL.
    """
    if "://" in value:
        return value
    for part in value.split(";"):
        key, sep, path = part.partition("=")
        if sep and key.strip().lower() in ("data source", "datasource", "filename"):
            return f"sqlite:///{path.strip()}"
    return value


class Settings(BaseSettings):
    """Application settings.

    Settings are loaded from environment variables with the TODO_STORE_
    prefix. The connection string can also be given through the named
    entry CONNECTIONSTRINGS__TODODB.
    """

    model_config = SettingsConfigDict(
        env_prefix="TODO_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    db_url: str = Field(
        default=DEFAULT_DB_URL,
        validation_alias=AliasChoices(
            "TODO_STORE_DB_URL", "CONNECTIONSTRINGS__TODODB"
        ),
        description=(
            "Database connection URL, or a SQLite 'Data Source=<path>' string"
        ),
    )
    environment: Literal["development", "production"] = Field(
        default="production",
        description="Hosting environment; development shows full error detail",
    )

    # Listen binding
    host: str = Field(default="127.0.0.1", description="Address to bind")
    port: int = Field(default=5000, ge=1, le=65535, description="Port to bind")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("db_url")
    @classmethod
    def normalize_db_url(cls, v: str) -> str:
        """Accept SQLite connection strings in Data Source form."""
        return sqlite_url_from_connection_string(v)

    @property
    def is_development(self) -> bool:
        """Whether the service runs in the development environment."""
        return self.environment == "development"


def get_settings() -> Settings:
    """Get the application settings.

    Returns:
        Settings instance loaded from environment.
    """
    return Settings()


def print_settings_json(settings: Settings | None = None) -> str:
    """Render effective settings as JSON.

    Args:
        settings: Optional settings instance; uses default if not provided.

    Returns:
        JSON string of effective settings.
    """
    if settings is None:
        settings = get_settings()
    return settings.model_dump_json(indent=2)


__all__ = [
    "DEFAULT_DB_URL",
    "Settings",
    "get_settings",
    "print_settings_json",
    "sqlite_url_from_connection_string",
]
