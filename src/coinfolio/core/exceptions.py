"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class ProviderError(AppError):
    """Raised by a price provider when a lookup cannot be completed."""

    def __init__(self, message: str, code: str = "PROVIDER_ERROR"):
        super().__init__(message, code=code)


class RateLimitedError(ProviderError):
    """Raised when the price provider throttles the request (HTTP 429)."""

    def __init__(self, message: str = "Price provider rate limit reached"):
        super().__init__(message, code="RATE_LIMITED")
