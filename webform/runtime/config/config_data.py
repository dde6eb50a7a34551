"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field
from sqlalchemy.engine import URL, make_url

# The schema name and table are part of the program, not of the deployment.
DATABASE_NAME = "webapp_db"
TABLE_NAME = "users"


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="json", description="Log format")
    file: str | None = Field(default="logs/app.log", description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL; overrides the host/user/password fields",
    )
    driver: str = Field(default="mysql+pymysql", description="SQLAlchemy driver name")
    host: str = Field(default="localhost", description="Database host")
    port: int | None = Field(default=None, description="Database port")
    user: str = Field(default="root", description="Database username")
    password: str | None = Field(default=None, description="Database password")
    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    connect_timeout: int = Field(
        default=10, description="Driver connect timeout in seconds"
    )

    @property
    def name(self) -> str:
        """Name of the database holding the submissions table."""
        return DATABASE_NAME

    @property
    def table(self) -> str:
        return TABLE_NAME

    @property
    def is_sqlite(self) -> bool:
        return self.connection_string.startswith("sqlite")

    def _url(self) -> URL:
        if self.url:
            return make_url(self.url)
        return URL.create(
            self.driver,
            username=self.user,
            password=self.password or None,
            host=self.host,
            port=self.port,
            database=DATABASE_NAME,
        )

    @computed_field
    @property
    def connection_string(self) -> str:
        """Construct the database connection string.

        An explicit ``url`` wins. Otherwise the URL is assembled from the
        individual fields with ``URL.create`` so that credentials containing
        reserved characters are escaped correctly.
        """
        if self.url:
            return self.url
        # Render manually to avoid SQLAlchemy's password masking
        return self._url().render_as_string(hide_password=False)

    @property
    def safe_connection_string(self) -> str:
        """Connection string with the password masked, suitable for logs."""
        return self._url().render_as_string(hide_password=True)


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="0.0.0.0", description="Application host")
    port: int = Field(default=8000, description="Application port")


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
