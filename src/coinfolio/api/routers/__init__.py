"""API routers package."""

from coinfolio.api.routers.prices import router as prices_router

__all__ = [
    "prices_router",
]
