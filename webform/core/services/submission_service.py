"""Form submission to database write."""

from collections.abc import Mapping
from typing import Any

from loguru import logger
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from webform.core.exceptions import (
    DatabaseConnectionError,
    SubmissionValidationError,
    SubmissionWriteError,
    driver_message,
)
from webform.core.services.database.db_session import DbSessionService
from webform.entities.user_submission import (
    SEX_CHOICES,
    UserSubmission,
    UserSubmissionRepository,
)
from webform.entities.user_submission.entity import FORM_FIELDS

SUCCESS_MESSAGE = "Data submitted successfully!"

_COLUMN_TO_FORM = {column: form for form, column in FORM_FIELDS.items()}


def describe_validation_error(exc: ValidationError) -> list[str]:
    """Turn pydantic errors into one readable line per form field."""
    problems = []
    for error in exc.errors():
        loc = str(error["loc"][0]) if error["loc"] else "form"
        field = _COLUMN_TO_FORM.get(loc, loc)
        if error["type"] == "missing":
            problems.append(f"missing required field '{field}'")
        elif error["type"] == "literal_error":
            problems.append(
                f"invalid value for '{field}': must be one of {', '.join(SEX_CHOICES)}"
            )
        elif error["type"] == "value_error":
            problems.append(f"field '{field}' must not be blank")
        else:
            problems.append(f"invalid value for '{field}': {error['msg']}")
    return problems


class SubmissionService:
    """Validates a submitted form and writes it as one row.

    Each call checks a connection out of the shared pool, runs a single
    parameterized insert and returns the connection, whatever the outcome.
    There is no retry and no deduplication.
    """

    def __init__(self, db_service: DbSessionService) -> None:
        self._db = db_service

    @staticmethod
    def validate(form: Mapping[str, Any]) -> UserSubmission:
        try:
            return UserSubmission.model_validate(dict(form))
        except ValidationError as e:
            problems = describe_validation_error(e)
            logger.bind(problems=problems).warning("submission.rejected")
            raise SubmissionValidationError(problems) from e

    def submit(self, form: Mapping[str, Any]) -> UserSubmission:
        """Store one submission.

        Raises:
            SubmissionValidationError: a field is missing, blank or invalid.
            DatabaseConnectionError: no connection could be opened.
            SubmissionWriteError: the insert was rejected.
        """
        submission = self.validate(form)

        session = self._db.get_session()
        try:
            try:
                session.connection()
            except SQLAlchemyError as e:
                message = driver_message(e)
                logger.bind(error_type=type(e).__name__).error(
                    "submission.connection_failed: {}", message
                )
                raise DatabaseConnectionError(message) from e

            try:
                UserSubmissionRepository(session).create(submission)
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                message = driver_message(e)
                logger.bind(error_type=type(e).__name__).error(
                    "submission.write_failed: {}", message
                )
                raise SubmissionWriteError(message) from e
        finally:
            session.close()

        logger.info("submission.stored")
        return submission
