"""View models for service outputs."""

from coinfolio.domain.views.prices import FetchResult

__all__ = [
    "FetchResult",
]
