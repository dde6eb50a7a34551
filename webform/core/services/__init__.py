from .database import DbManageService, DbSessionService
from .submission_service import SUCCESS_MESSAGE, SubmissionService

__all__ = [
    "DbManageService",
    "DbSessionService",
    "SUCCESS_MESSAGE",
    "SubmissionService",
]
