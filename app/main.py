# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts up our Plant Care app, connects all the different parts together,
# and makes sure everything is ready to handle reminder and care-log requests from the mobile app.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with logging setup, middleware, router registration
# and the JSON error envelope for PlantCareException subclasses.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - app.shared.config.settings
# - app.shared.utils.logging
# - app.api.v1.router (health + care management routes)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Docker container entry point
# - tests (TestClient)

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from app.api.middleware.logging import RequestLoggingMiddleware
from app.api.v1 import API_TAGS
from app.api.v1.router import api_v1_router
from app.modules.care_management.presentation.dependencies import get_catalog_repository
from app.shared.config.settings import get_settings
from app.shared.core.exceptions import PlantCareException
from app.shared.utils.logging import get_logger, log_startup_event, setup_logging

# Get application settings
settings = get_settings()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Configures logging and loads the plant catalog; a broken catalog
    file fails startup.
    """
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT, settings.LOG_FILE)
    log_startup_event(
        settings.APP_NAME,
        settings.APP_VERSION,
        extra={"environment": settings.ENVIRONMENT, "default_timezone": settings.DEFAULT_TIMEZONE},
    )

    try:
        catalog = await get_catalog_repository().list_all()
        logger.info(f"✅ Plant catalog ready ({len(catalog)} entries)")
    except PlantCareException as e:
        logger.error(f"❌ Startup failed: {e.message}", details=e.details)
        raise

    logger.info("✅ Plant Care API startup complete")
    yield
    logger.info("🔄 Plant Care API shutting down...")


def create_application() -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application with middleware,
    routers and exception handlers based on the current environment.

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
        openapi_tags=API_TAGS,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    if not settings.is_testing:
        app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()],
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router, prefix=settings.API_V1_PREFIX)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(PlantCareException)
    async def plant_care_exception_handler(
        request: Request,
        exc: PlantCareException
    ) -> JSONResponse:
        """Handle custom Plant Care application exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": {
                    "code": exc.error_code,
                    "message": exc.message,
                    "details": exc.details,
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                    "request_id": getattr(request.state, "request_id", None),
                }
            },
        )

    @app.exception_handler(Exception)
    async def internal_server_error_handler(
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        """Handle unexpected errors."""
        logger.error(f"Internal server error: {exc}", exc_info=True, path=request.url.path)

        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_SERVER_ERROR",
                    "message": "An internal server error occurred",
                    "details": {"error_type": type(exc).__name__} if settings.DEBUG else {},
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                    "request_id": getattr(request.state, "request_id", None),
                }
            },
        )

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.DEBUG else None,
            "health_check": f"{settings.API_V1_PREFIX}/health",
            "api_base": settings.API_V1_PREFIX,
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Favicon endpoint to prevent 404 errors."""
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Main function for running the application in development.

    This function is used when running the application directly
    with python -m app.main or as a script entry point.
    """
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
