"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from coinfolio.config.settings import get_settings
from coinfolio.config.logging_config import setup_logging
from coinfolio.repositories.sqlalchemy.database import init_db
from coinfolio.api.routers import prices_router
from coinfolio.core.exceptions import AppError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    init_db()
    yield
    # Shutdown (price cache is discarded with the process)


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Portfolio tracking with cached live crypto prices",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(prices_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=400,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
