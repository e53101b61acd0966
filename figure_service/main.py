# figure_service/main.py
"""
Entry point for the Figure HTTP API.

Intended usage:
    uvicorn figure_service.main:app --host 127.0.0.1 --port 3030
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from figure_service import __version__
from figure_service.adapters.api import dependencies
from figure_service.adapters.api.routers import figure_router, health_router
from figure_service.core.domain.exceptions import CoordinateError
from figure_service.shared.config import settings
from figure_service.shared.container import container
from figure_service.shared.logging_config import configure_logging
from figure_service.shared.telemetry import instrument_fastapi, setup_telemetry

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application Lifecycle Manager.
    Handles startup (Telemetry) and shutdown.
    """
    setup_telemetry(settings.OTEL_SERVICE_NAME)
    logger.info("app_startup", app=settings.APP_NAME, env=settings.APP_ENV.value)

    yield

    logger.info("app_shutdown")


def create_app() -> FastAPI:
    """
    Factory function to create the FastAPI application.
    """
    configure_logging()

    # Routes resolve the use case through Provide[...] markers.
    container.wire(modules=[dependencies])

    app = FastAPI(
        title="Figure Service",
        version=__version__,
        description="Classifies integer points as inside, on the border of, or outside a fixed figure.",
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
        lifespan=lifespan,
    )

    instrument_fastapi(app)

    # Global Exception Handlers
    @app.exception_handler(CoordinateError)
    async def coordinate_error_handler(request: Request, exc: CoordinateError):
        """
        Rejected coordinates are a client error, answered with the rendered message.
        """
        logger.info("request_rejected", path=request.url.path, reason=exc.reason)
        return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "status": "error",
                "code": exc.status_code,
                "message": exc.detail,
            },
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catches unhandled exceptions to prevent leaking stack traces in Prod.
        """
        logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "code": 500,
                "message": "Internal Server Error" if not settings.DEBUG else str(exc),
            },
        )

    app.include_router(health_router)
    app.include_router(figure_router)

    return app


# Entry point for Uvicorn
app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(
        "figure_service.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
    )


if __name__ == "__main__":
    run()
