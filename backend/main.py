"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:3001",
]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _init_sentry(settings)

    app = FastAPI(
        title="Adaptive Training API",
        description="Muscle recovery, weekly volume and adaptive workout generation",
        version="1.0.0",
    )

    _configure_cors(app, settings)
    _include_routers(app)
    _log_engine_settings(settings)

    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
            profiles_sample_rate=0.1,
        )
        logger.info("Sentry initialized for adaptive-training-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = DEFAULT_CORS_ORIGINS + settings.cors_origins_list

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        adaptive_workouts_router,
        health_router,
        recovery_router,
        volume_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    app.include_router(recovery_router)
    app.include_router(volume_router)
    app.include_router(adaptive_workouts_router)


def _log_engine_settings(settings: Settings) -> None:
    """Log the engine tunables at startup."""
    logger.info(
        f"Adaptive engine: {settings.minutes_per_exercise}min/exercise, "
        f"min {settings.min_session_exercises} exercises, "
        f"recovery window {settings.recovery_window_hours:g}h"
    )
    if settings.distinguish_duration_failures:
        logger.info("DISTINGUISH_DURATION_FAILURES is active")


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
