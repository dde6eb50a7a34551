"""Data access for UserSubmission."""

from sqlalchemy import func, insert
from sqlmodel import Session, select

from .entity import UserSubmission
from .table import UserSubmissionTable


class UserSubmissionRepository:
    """Data-access layer for form submissions."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, submission: UserSubmission) -> None:
        """Insert one row.

        The statement is compiled with bound parameters; submitted values
        never become part of the SQL text. The caller owns the transaction.
        """
        statement = insert(UserSubmissionTable).values(**submission.column_values())
        self._session.connection().execute(statement)

    def count(self) -> int:
        statement = select(func.count()).select_from(UserSubmissionTable)
        return self._session.exec(statement).one()

    def list_all(self) -> list[UserSubmission]:
        rows = self._session.exec(
            select(UserSubmissionTable).order_by(UserSubmissionTable.id)
        ).all()
        return [UserSubmission.model_validate(row, from_attributes=True) for row in rows]
