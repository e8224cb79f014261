"""Interface layer errors and the registration error envelope."""

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from exchange.domain.value import ErrorCode


class InterfaceError(Exception):
    """Base interface error."""

    pass


ERROR_STATUS: dict[ErrorCode, int] = {
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.REGISTRATION_CLOSED: status.HTTP_403_FORBIDDEN,
    ErrorCode.INVALID_INVITE_CODE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.SERVER_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Messages shown to users; underlying causes are only logged
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_CREDENTIALS: "Email and password are required",
    ErrorCode.REGISTRATION_CLOSED: "Registration is closed",
    ErrorCode.INVALID_INVITE_CODE: "Invalid or already used invite code",
    ErrorCode.EMAIL_ALREADY_EXISTS: "An account with this email already exists",
    ErrorCode.SERVER_ERROR: "Something went wrong. Please try again.",
}


class ErrorDetail(BaseModel):
    """Machine-readable error kind plus user-facing message."""

    code: ErrorCode
    message: str


class ErrorEnvelope(BaseModel):
    """Failure response body."""

    success: bool = False
    error: ErrorDetail


def error_response(code: ErrorCode) -> JSONResponse:
    """Build the failure envelope and status for an error code."""
    envelope = ErrorEnvelope(error=ErrorDetail(code=code, message=ERROR_MESSAGES[code]))
    return JSONResponse(
        status_code=ERROR_STATUS[code], content=envelope.model_dump(mode="json")
    )
