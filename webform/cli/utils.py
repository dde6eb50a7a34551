"""Shared helpers for CLI commands."""

from rich.console import Console

from webform.core.services import DbSessionService
from webform.runtime.context import get_config

console = Console()


def get_db_service() -> DbSessionService:
    """Build a database service from the resolved configuration."""
    config = get_config()
    return DbSessionService(config.database, config.app.environment)
