"""Fixture user settings using pydantic-settings.

Settings are loaded from environment variables with defaults suited to a
local run against SQLite. Explicit constructor values (for example pytest
command-line options) take precedence over the environment.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Identity store database settings.

    Environment variables:
        FIXTURE_USERS_DB_URL: SQLAlchemy URL of the user store (default: sqlite://)
        FIXTURE_USERS_DB_ECHO: Log emitted SQL (default: false)
        FIXTURE_USERS_DB_CREATE_SCHEMA: Create missing user tables on start (default: false)
        FIXTURE_USERS_DB_BCRYPT_ROUNDS: bcrypt work factor for stored passwords (default: 12)
    """

    model_config = SettingsConfigDict(
        env_prefix="FIXTURE_USERS_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    url: str = Field(default="sqlite://", description="SQLAlchemy database URL")
    echo: bool = Field(default=False, description="Log emitted SQL statements")
    create_schema: bool = Field(
        default=False,
        description="Create the user tables if they do not exist",
    )
    bcrypt_rounds: int = Field(
        default=12,
        description="bcrypt work factor used when storing passwords",
        ge=4,
        le=31,
    )


class FixtureUsersSettings(BaseSettings):
    """Fixture user module settings.

    Environment variables:
        FIXTURE_USERS_CONFIG_FILE: Path to the YAML suite configuration
        FIXTURE_USERS_LANGCODE: Language code written to created accounts (default: en)
        FIXTURE_USERS_CONFIGURE_LOGGING: Configure structlog on start (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="FIXTURE_USERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    config_file: Path | None = Field(
        default=None,
        description="YAML file declaring the fixture users",
    )
    langcode: str = Field(
        default="en",
        description="Language code for created accounts",
        min_length=2,
    )
    configure_logging: bool = Field(
        default=False,
        description="Configure structlog output when the plugin starts",
    )
