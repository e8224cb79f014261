"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from exchange.application.usecase.auth import (
    RegisteredUser,
    RegisterRequest,
    RegisterUseCase,
)
from exchange.domain.error import RegistrationError
from exchange.domain.value import ErrorCode
from exchange.interface.error import ERROR_STATUS, ErrorEnvelope, error_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class RegisterBody(BaseModel):
    """Registration request body.

    Accepts ``inviteCode`` as sent by the web client.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: str | None = None
    password: str | None = None
    name: str | None = None
    invite_code: str | None = Field(default=None, alias="inviteCode")


class RegisterData(BaseModel):
    """Registration payload."""

    user: RegisteredUser


class RegisterSuccess(BaseModel):
    """Success response body."""

    success: bool = True
    data: RegisterData


@router.post(
    "/register",
    response_model=RegisterSuccess,
    responses={
        status_code: {"model": ErrorEnvelope}
        for status_code in sorted(set(ERROR_STATUS.values()))
    },
)
async def register(
    body: RegisterBody,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterSuccess | JSONResponse:
    """Register a new account with email and password.

    Args:
        body: Email, password, optional display name and invite code
        register_use_case: Register use case from DI

    Returns:
        The created user, or an error envelope

    Examples:
        POST /auth/register
        {
            "email": "a@x.com",
            "password": "pw123456",
            "name": "Ann",
            "inviteCode": "FRIEND42"
        }

        Response:
        {
            "success": true,
            "data": {"user": {"id": "...", "email": "a@x.com", "name": "Ann",
                              "profile_complete": false}}
        }
    """
    try:
        result = await register_use_case.execute(
            RegisterRequest(
                email=body.email,
                password=body.password,
                name=body.name,
                invite_code=body.invite_code,
            )
        )
    except RegistrationError as e:
        if e.code == ErrorCode.SERVER_ERROR:
            logger.error(f"Registration failed: {e}", exc_info=e)
        else:
            logger.info(f"Registration rejected: {e.code.value}")
        return error_response(e.code)
    except Exception as e:
        logger.exception(f"Unexpected error during registration: {e}")
        return error_response(ErrorCode.SERVER_ERROR)

    logger.info(f"Registered user {result.user.id}")
    return RegisterSuccess(data=RegisterData(user=result.user))
