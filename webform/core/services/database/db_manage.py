"""Schema management for the submissions database."""

from loguru import logger
from sqlmodel import SQLModel

from webform.core.services.database.db_session import DbSessionService


class DbManageService:
    def __init__(self, db_service: DbSessionService):
        self._engine = db_service.engine

    def create_all(self) -> None:
        """Create the submissions table if it does not exist yet."""
        from webform.entities.user_submission import UserSubmissionTable

        SQLModel.metadata.create_all(
            self._engine, tables=[UserSubmissionTable.__table__]
        )
        logger.info("Database initialized with tables.")
