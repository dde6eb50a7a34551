from dataclasses import dataclass

from webform.core.services import DbSessionService, SubmissionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    submission_service: SubmissionService
