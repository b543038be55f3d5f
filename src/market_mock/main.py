"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from market_mock.app_context import get_app_context
from market_mock.config.settings import get_settings
from market_mock.config.logging_config import setup_logging
from market_mock.api.routers import assets_router, prices_router, portfolios_router
from market_mock.core.exceptions import AppError, InternalFailureError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: build the record store once, before serving requests
    setup_logging()
    context = get_app_context()
    origin = "supplied" if context.is_loaded else "generated"
    store = context.store
    logger.info(
        "Record store %s: %d assets, %d prices, %d positions",
        origin,
        len(store.assets),
        len(store.historical_prices),
        len(store.positions),
    )
    yield
    # Shutdown (nothing to clean up)


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Mock financial data: assets, historical prices and portfolio positions",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    allow_credentials=True,
)

# Include routers
app.include_router(assets_router)
app.include_router(prices_router)
app.include_router(portfolios_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for client-fault application errors."""
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=400,
        content={"error": exc.code, "message": exc.message},
    )


@app.exception_handler(InternalFailureError)
async def internal_failure_handler(request: Request, exc: InternalFailureError) -> JSONResponse:
    """Handler for faults raised while selecting records."""
    logger.error(
        "%s %s failed", request.method, request.url.path, exc_info=exc.__cause__ or exc
    )
    return JSONResponse(
        status_code=500,
        content={"error": exc.code, "message": exc.message},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for anything not raised as an AppError."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": "Something went wrong!"},
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
