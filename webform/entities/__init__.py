"""Entities organised by business concept.

Each entity has its own package containing:
- entity.py: Domain model with validation
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .user_submission import (
    UserSubmission,
    UserSubmissionRepository,
    UserSubmissionTable,
)

__all__ = [
    "UserSubmission",
    "UserSubmissionTable",
    "UserSubmissionRepository",
]
