"""Core utilities and shared functionality."""

from coinfolio.core.timezone import (
    now_utc,
    now_millis,
    UTC_TZ,
)
from coinfolio.core.exceptions import (
    AppError,
    ValidationError,
    ProviderError,
    RateLimitedError,
)

__all__ = [
    "now_utc",
    "now_millis",
    "UTC_TZ",
    "AppError",
    "ValidationError",
    "ProviderError",
    "RateLimitedError",
]
