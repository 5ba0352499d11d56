"""
JSON response formatting.

Builds the response envelope used by every endpoint:

    {"response": true, "data": ...}     on success
    {"response": false, "error": ...}   on failure
"""

from fastapi.responses import JSONResponse

from src.api.models import ErrorResponse, SuccessResponse


def success(status_code: int, data: str) -> JSONResponse:
    """Build a success envelope with the given HTTP status."""
    return JSONResponse(status_code=status_code, content=SuccessResponse(data=data).model_dump())


def error(status_code: int, message: str) -> JSONResponse:
    """Build an error envelope with the given HTTP status."""
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())
