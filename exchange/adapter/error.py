"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class AuthProviderError(ProviderError):
    """Identity provider rejected or failed a request.

    The message is the provider's own, suitable for showing to the user.
    """

    pass


class DataStoreError(ProviderError):
    """REST data API request failed."""

    pass


class EmailDeliveryError(ProviderError):
    """Email API request failed."""

    pass
