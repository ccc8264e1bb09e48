# 📄 File: garden_assistant/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the gardening assistant, connects the photo
# recognition, chat and reminder parts together, and gets everything ready for requests.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point: lifespan-managed service construction,
# middleware setup, router registration and exception handlers that render every
# GardenAssistantException in one error envelope.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - garden_assistant.shared.config.settings
# - garden_assistant.shared.core.dependencies (service wiring)
# - garden_assistant.api (router, middleware)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - `garden-assistant` console script
# - tests (create_application with injected services)

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from garden_assistant.api.middleware.logging import RequestLoggingMiddleware
from garden_assistant.api.v1.router import api_v1_router
from garden_assistant.shared.config.settings import get_settings
from garden_assistant.shared.core.dependencies import AppServices, build_services
from garden_assistant.shared.core.exceptions import GardenAssistantException
from garden_assistant.shared.utils.logging import (
    get_logger,
    log_shutdown_event,
    log_startup_event,
    setup_logging,
)

settings = get_settings()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Builds the service objects unless they were injected, opens the first
    conversation handle, and releases the model client on shutdown.
    """
    setup_logging(settings)
    log_startup_event(settings.APP_NAME, settings.APP_VERSION, extra={"environment": settings.ENVIRONMENT})

    if getattr(app.state, "services", None) is None:
        app.state.services = build_services(settings)
    services: AppServices = app.state.services

    services.conversation.start()
    logger.info("✅ Garden Assistant startup complete")

    try:
        yield
    finally:
        try:
            await services.model_service.close()
        except Exception as e:
            logger.error(f"❌ Shutdown error: {e}", exc_info=True)
        log_shutdown_event(settings.APP_NAME)


def _error_response(request: Request, status_code: int, code: str, message: str, details: dict) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details,
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "request_id": getattr(request.state, "request_id", None),
            }
        },
    )


def create_application(services: Optional[AppServices] = None) -> FastAPI:
    """
    Application factory function.

    Args:
        services: Prebuilt service objects; built from settings at startup when omitted

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )
    app.state.services = services

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    if not settings.is_testing:
        app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router, prefix="/api/v1")

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(GardenAssistantException)
    async def garden_assistant_exception_handler(
        request: Request,
        exc: GardenAssistantException
    ) -> JSONResponse:
        """Handle custom Garden Assistant exceptions."""
        if exc.status_code >= 500:
            logger.warning(
                f"{exc.error_code}: {exc.message}",
                extra={"path": request.url.path, "details": exc.details},
            )
        return _error_response(request, exc.status_code, exc.error_code, exc.message, exc.details)

    @app.exception_handler(Exception)
    async def internal_server_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected errors."""
        logger.error(f"Internal server error: {exc}", exc_info=True)
        return _error_response(
            request,
            500,
            "INTERNAL_SERVER_ERROR",
            "An internal server error occurred",
            {"error_type": type(exc).__name__} if settings.DEBUG else {},
        )

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.DEBUG else None,
            "health_check": "/api/v1/health",
            "api_base": "/api/v1",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)

    return app


app = create_application()


def main():
    """Run the development server (`garden-assistant` or `python -m garden_assistant.main`)."""
    uvicorn.run(
        "garden_assistant.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
