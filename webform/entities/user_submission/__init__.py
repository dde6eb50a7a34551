"""Entity package: UserSubmission."""

from .entity import SEX_CHOICES, UserSubmission
from .repository import UserSubmissionRepository
from .table import UserSubmissionTable

__all__ = [
    "SEX_CHOICES",
    "UserSubmission",
    "UserSubmissionRepository",
    "UserSubmissionTable",
]
