"""Client-side session management."""

from .error import ClientError, NotAuthenticatedError, RegistrationFailedError
from .gateway import ProfileGateway, RepositoryProfileGateway, RestProfileGateway
from .registration import (
    HttpRegistrationClient,
    RegisteredAccount,
    RegistrationClient,
)
from .session import SessionClient
from .state import ProfileUpdate, SessionState, UserProfile
from .synchronizer import SessionSynchronizer

__all__ = [
    "ClientError",
    "HttpRegistrationClient",
    "NotAuthenticatedError",
    "ProfileGateway",
    "ProfileUpdate",
    "RegisteredAccount",
    "RegistrationClient",
    "RegistrationFailedError",
    "RepositoryProfileGateway",
    "RestProfileGateway",
    "SessionClient",
    "SessionState",
    "SessionSynchronizer",
    "UserProfile",
]
