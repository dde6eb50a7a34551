"""Errors raised along the submission path."""

from sqlalchemy.exc import DBAPIError, SQLAlchemyError


def driver_message(exc: BaseException) -> str:
    """Extract the database driver's own message from an exception.

    MySQL drivers raise ``(code, message)`` pairs; only the message is kept.
    Other drivers fall back to ``str()`` of the underlying DBAPI error.
    """
    orig = exc.orig if isinstance(exc, DBAPIError) and exc.orig is not None else exc
    args = getattr(orig, "args", ())
    if len(args) == 2 and isinstance(args[0], int) and isinstance(args[1], str):
        return args[1]
    if isinstance(orig, SQLAlchemyError) and orig is exc:
        # SQLAlchemy's own str() appends background links; keep the first line
        return str(orig).splitlines()[0]
    return str(orig)


class SubmissionError(Exception):
    """Base class for submission failures."""


class SubmissionValidationError(SubmissionError):
    """The submitted form data is missing fields or has invalid values."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("; ".join(problems))


class DatabaseConnectionError(SubmissionError):
    """No connection to the database could be obtained."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class SubmissionWriteError(SubmissionError):
    """The insert statement was rejected by the database."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
