"""UserSubmission database table model."""

from sqlmodel import Field, SQLModel

from webform.runtime.config.config_data import TABLE_NAME


class UserSubmissionTable(SQLModel, table=True):
    """Database persistence model for form submissions.

    The primary key is assigned by the database on insert. Text columns carry
    an explicit length so the DDL is valid on MySQL.
    """

    __tablename__ = TABLE_NAME

    id: int | None = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=255)
    last_name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    phone: str = Field(max_length=255)
    sex: str = Field(max_length=255)
