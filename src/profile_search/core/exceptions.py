"""Domain exceptions for profile search."""


class ProfileSearchError(Exception):
    """Base exception for all profile search errors."""

    def __init__(self, message: str, recoverable: bool = True):
        super().__init__(message)
        self.recoverable = recoverable


class ProviderError(ProfileSearchError):
    """Error while calling the completion provider."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        recoverable: bool = True,
    ):
        super().__init__(message, recoverable)
        self.provider = provider


class ProviderUnavailableError(ProviderError):
    """Provider is missing a credential or is not configured."""

    def __init__(self, message: str, provider: str | None = None):
        super().__init__(message, provider=provider, recoverable=False)


class ProviderTimeoutError(ProviderError):
    """Provider call exceeded its time budget."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        timeout_seconds: float | None = None,
    ):
        super().__init__(message, provider=provider, recoverable=True)
        self.timeout_seconds = timeout_seconds
