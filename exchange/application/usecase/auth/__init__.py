"""Authentication use cases."""

from .register import (
    RegisteredUser,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)

__all__ = [
    "RegisteredUser",
    "RegisterRequest",
    "RegisterResponse",
    "RegisterUseCase",
]
