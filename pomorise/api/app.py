"""
FastAPI application factory.

create_app() wires together:
1. Provider clients and services (built once from Settings)
2. Router registration
3. Middleware configuration (audit logging, CORS)
4. Exception handlers
5. Startup/shutdown logging
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pomorise.api.deps import ServiceContainer, build_services
from pomorise.api.routes import (
    action_router,
    auth_router,
    health_router,
    insights_router,
    speech_router,
)
from pomorise.core.audit import AuditMiddleware
from pomorise.core.config import Settings, get_settings
from pomorise.core.exceptions import AuthenticationError, PomoriseException
from pomorise.core.logging_config import get_logger
from pomorise.models.api import ErrorResponse

logger = get_logger(__name__)

APP_VERSION = "1.0.0"


def create_app(
    settings: Optional[Settings] = None,
    services: Optional[ServiceContainer] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Application settings. Read from the environment if omitted.
        services: Pre-built services. Built from settings if omitted.

    Returns:
        Configured FastAPI instance

    Raises:
        ConfigurationError: If a required provider credential is missing
    """
    settings = settings or get_settings()
    services = services or build_services(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")
        logger.info(f"Action model: {settings.action_model}")
        logger.info(f"Insights model: {settings.insights_model}")
        logger.info(f"Speech-to-text: {'enabled' if services.speech_transcriber else 'disabled'}")
        logger.info(f"Auth relay: {'enabled' if services.auth_service else 'disabled'}")

        yield

        logger.info(f"Shutting down {settings.app_name}")

    app = FastAPI(
        title="Pomorise API",
        description="""
    Backend for the Pomorise productivity app.

    ## Features

    - **Actions**: Turn plain-language instructions into habit, task or journal actions
    - **Insights**: Motivational summaries of habits and pomodoro tasks
    - **Speech**: Speech-to-text for voice input
    - **Auth**: Sign-in, sign-up and logout relayed to the identity provider
    """,
        version=APP_VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        responses={500: {"model": ErrorResponse, "description": "Unexpected error"}},
    )

    app.state.settings = settings
    app.state.services = services

    # ============================================================
    # Middleware Configuration
    # ============================================================

    if settings.enable_audit_logging:
        app.add_middleware(AuditMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=True,
        allow_methods=["POST", "GET", "OPTIONS", "PUT", "DELETE", "PATCH"],
        allow_headers=["*"],
        max_age=600,
    )

    # ============================================================
    # Exception Handlers
    # ============================================================

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(PomoriseException)
    async def pomorise_exception_handler(request: Request, exc: PomoriseException):
        """Handle all custom exceptions not translated by a route."""
        content = exc.to_dict()
        if not settings.is_development():
            content["details"] = None
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Handle uncaught exceptions globally.

        Detailed error information is only included in development mode.
        """
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_error",
                "message": "An unexpected error occurred",
                "details": str(exc) if settings.is_development() else None,
            }
        )

    # ============================================================
    # Routers
    # ============================================================

    app.include_router(health_router)
    app.include_router(health_router, prefix="/api")
    app.include_router(action_router)
    app.include_router(insights_router)
    app.include_router(speech_router)
    app.include_router(auth_router)

    return app
