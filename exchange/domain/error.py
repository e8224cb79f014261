"""Domain layer errors."""

from exchange.domain.value import ErrorCode


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DuplicateIdentityError(DomainError):
    """Raised by identity providers when the email already has an account."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already registered: {email}")


class RegistrationError(DomainError):
    """Base class for registration failures reported to the caller."""

    code: ErrorCode = ErrorCode.SERVER_ERROR


class InvalidCredentialsError(RegistrationError):
    """Email or password missing."""

    code = ErrorCode.INVALID_CREDENTIALS


class RegistrationClosedError(RegistrationError):
    """Event is not accepting registrations."""

    code = ErrorCode.REGISTRATION_CLOSED


class InvalidInviteCodeError(RegistrationError):
    """Invite code unknown, already used, or lookup failed."""

    code = ErrorCode.INVALID_INVITE_CODE


class EmailAlreadyExistsError(RegistrationError):
    """An identity account already exists for the email."""

    code = ErrorCode.EMAIL_ALREADY_EXISTS


class ServerError(RegistrationError):
    """Unexpected failure, including data-integrity violations.

    The underlying exception, when there is one, is chained as __cause__.
    """

    code = ErrorCode.SERVER_ERROR
