"""Router accepting form posts and writing them to the database."""

from typing import Annotated

from fastapi import APIRouter, Depends, Form
from fastapi.responses import PlainTextResponse

from webform.api.http.deps import get_submission_service
from webform.core.exceptions import (
    DatabaseConnectionError,
    SubmissionValidationError,
    SubmissionWriteError,
)
from webform.core.services import SUCCESS_MESSAGE, SubmissionService

router = APIRouter(tags=["submission"])

OptionalFormField = Annotated[str | None, Form()]


@router.post("/submit", response_class=PlainTextResponse)
def submit(
    firstname: OptionalFormField = None,
    lastname: OptionalFormField = None,
    email: OptionalFormField = None,
    phone: OptionalFormField = None,
    sex: OptionalFormField = None,
    service: SubmissionService = Depends(get_submission_service),
) -> PlainTextResponse:
    """Store one form submission.

    Fields are optional at the HTTP layer so that missing ones are reported
    by the entity validation as a plain-text 422 rather than FastAPI's JSON.

    The reply texts are the classic ones, but each failure also carries its
    own status code on purpose: 422 for rejected fields, 503 when no database
    connection can be made and 500 when the insert fails.
    """
    form = {
        name: value
        for name, value in {
            "firstname": firstname,
            "lastname": lastname,
            "email": email,
            "phone": phone,
            "sex": sex,
        }.items()
        if value is not None
    }

    try:
        service.submit(form)
    except SubmissionValidationError as e:
        return PlainTextResponse(f"Error: {e}", status_code=422)
    except DatabaseConnectionError as e:
        return PlainTextResponse(f"Connection failed: {e.message}", status_code=503)
    except SubmissionWriteError as e:
        return PlainTextResponse(f"Error: {e.message}", status_code=500)

    return PlainTextResponse(SUCCESS_MESSAGE)
