"""Settings sourced directly from environment variables.

This module handles only simple environment values (strings, numbers).
Structured configuration lives in config.yaml and is parsed by the models in
``webform.runtime.config``; these settings are the fallback used when no
config file is present.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from webform.runtime.config.config_data import (
    AppConfig,
    ConfigData,
    DatabaseConfig,
    LoggingConfig,
)


class EnvironmentVariables(BaseSettings):
    """Simple primitive values loaded from environment variables and .env files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Environment and deployment
    environment: Literal["development", "production", "test"] = Field(
        default="development", validation_alias="APP_ENVIRONMENT"
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    config_file: str = Field(default="config.yaml", validation_alias="APP_CONFIG_FILE")

    # Database connection
    mysql_host: str = Field(default="localhost", validation_alias="MYSQL_HOST")
    mysql_user: str = Field(default="root", validation_alias="MYSQL_USER")
    mysql_password: str | None = Field(default=None, validation_alias="MYSQL_PASSWORD")
    database_url: str | None = Field(default=None, validation_alias="DATABASE_URL")

    def to_config(self) -> ConfigData:
        """Build a full configuration from the environment alone."""
        return ConfigData(
            app=AppConfig(environment=self.environment),
            logging=LoggingConfig(level=self.log_level, format="plain", file=None),
            database=DatabaseConfig(
                url=self.database_url,
                host=self.mysql_host,
                user=self.mysql_user,
                password=self.mysql_password,
            ),
        )
