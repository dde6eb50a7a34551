"""Database CLI commands."""

import typer
from rich.table import Table

from webform.core.services import DbManageService
from webform.entities.user_submission import UserSubmissionRepository

from .utils import console, get_db_service

db_app = typer.Typer(help="Manage the submissions database")


@db_app.command("init")
def init_db() -> None:
    """Create the submissions table if it does not exist."""
    db_service = get_db_service()
    try:
        DbManageService(db_service).create_all()
    finally:
        db_service.dispose()
    console.print(f"[green]Table '{db_service.config.table}' is ready[/green]")


@db_app.command("check")
def check_db() -> None:
    """Check database connectivity and show pool status."""
    db_service = get_db_service()
    try:
        healthy = db_service.health_check()
        pool = db_service.get_pool_status()
    finally:
        db_service.dispose()

    table = Table(title=db_service.config.safe_connection_string)
    table.add_column("Check", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("reachable", "yes" if healthy else "[red]no[/red]")
    for key, value in pool.items():
        table.add_row(f"pool.{key}", str(value))
    console.print(table)

    if not healthy:
        raise typer.Exit(code=1)


@db_app.command("count")
def count_submissions() -> None:
    """Print the number of stored submissions."""
    db_service = get_db_service()
    try:
        with db_service.session_scope() as session:
            total = UserSubmissionRepository(session).count()
    finally:
        db_service.dispose()
    console.print(f"{total} submission(s) stored")
