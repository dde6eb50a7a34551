"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from webform.api.http.deps import get_db_service
from webform.core.services import DbSessionService
from webform.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


def _database_type(db_service: DbSessionService) -> str:
    return "sqlite" if db_service.config.is_sqlite else "mysql"


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe.

    Returns 200 OK as long as the process is running; dependencies are not
    checked.
    """
    return {"status": "healthy", "service": "webform"}


@router.get("/ready", response_model=None)
def readiness(
    db_service: DbSessionService = Depends(get_db_service),
) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 200 when the database answers, 503 otherwise."""
    db_healthy = db_service.health_check()
    response = {
        "status": "ready" if db_healthy else "not_ready",
        "environment": get_config().app.environment,
        "checks": {
            "database": {
                "status": "healthy" if db_healthy else "unhealthy",
                "type": _database_type(db_service),
            }
        },
    }

    if not db_healthy:
        return JSONResponse(status_code=503, content=response)

    return response


@router.get("/database", response_model=None)
def health_database(
    db_service: DbSessionService = Depends(get_db_service),
) -> dict[str, Any] | JSONResponse:
    """Database-specific health check with connection pool status."""
    healthy = db_service.health_check()
    content = {
        "status": "healthy" if healthy else "unhealthy",
        "type": _database_type(db_service),
        "pool": db_service.get_pool_status(),
    }
    if not healthy:
        return JSONResponse(status_code=503, content=content)
    return content
