"""
API v1 routes.

Defines the REST endpoint for the registration API. This is the
boundary layer: it audits requests and maps domain outcomes and
storage errors to HTTP responses.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api import responses
from src.api.dependencies import get_audit_log, get_registration_service
from src.api.models import FORM_FIELD_NAMES, ErrorResponse, RegisterRequest, SuccessResponse
from src.domain.exceptions import StorageWriteFailure
from src.domain.ports import AuditLog, OutcomeStatus
from src.domain.registration import RegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])

MSG_REGISTERED = "user was registered"
MSG_DUPLICATE = "user with this email already registered"
MSG_STORAGE_FAILURE = "Can't save data into file"


@router.post(
    "/register",
    response_model=SuccessResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Field validation failed"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
        500: {"model": ErrorResponse, "description": "Record could not be stored"},
    },
    summary="Register a new user",
    description="Submit name, company name, email and a confirmed password. "
    "The user is stored unless the email is already registered.",
)
def register(
    request_data: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
    audit_log: AuditLog = Depends(get_audit_log),
) -> JSONResponse:
    """
    Register a new user.

    - **name**: 3-30 characters
    - **coname**: company name, 3-30 characters
    - **mail**: email address
    - **pass** / **pass2**: password (8-30 characters) and its confirmation
    """
    audit_log.record({"event": "request", "body": request_data.masked()})

    try:
        outcome = service.register(request_data.to_submission())
    except StorageWriteFailure:
        audit_log.record({"event": "storage_failure", "email": request_data.mail})
        return responses.error(status.HTTP_500_INTERNAL_SERVER_ERROR, MSG_STORAGE_FAILURE)

    if outcome.status is OutcomeStatus.REJECTED_VALIDATION:
        fields = [FORM_FIELD_NAMES.get(field, field) for field in outcome.failed_fields]
        audit_log.record({"event": "rejected", "fields": fields})
        return responses.error(status.HTTP_400_BAD_REQUEST, "Incorrect data " + ", ".join(fields))

    if outcome.status is OutcomeStatus.REJECTED_DUPLICATE:
        audit_log.record({"event": "duplicate", "email": request_data.mail})
        return responses.error(status.HTTP_409_CONFLICT, MSG_DUPLICATE)

    audit_log.record({"event": "registered", "email": outcome.record.email})
    return responses.success(status.HTTP_201_CREATED, MSG_REGISTERED)
