"""Client layer errors."""

from exchange.domain.value import ErrorCode


class ClientError(Exception):
    """Base client error."""

    pass


class NotAuthenticatedError(ClientError):
    """Raised when an operation needs a session and there is none."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class RegistrationFailedError(ClientError):
    """Raised when the registration endpoint rejects a request.

    Carries the server's error code and human-readable message.
    """

    def __init__(self, code: ErrorCode | str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)
