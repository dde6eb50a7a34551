"""FastAPI dependency implementations."""

from __future__ import annotations

from fastapi import Request

from webform.api.http.app_data import ApplicationDependencies
from webform.core.services import DbSessionService, SubmissionService


def get_db_service(request: Request) -> DbSessionService:
    """Get the database service owning the connection pool."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_submission_service(request: Request) -> SubmissionService:
    """Get the submission service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.submission_service
