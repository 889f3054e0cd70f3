"""
Main entrypoint for the GymChain API.

``create_app`` configures logging, registers the error handlers and
includes the versioned routers.  The resulting app is instantiated at
import time as ``app`` so it can be served directly, e.g.::

    uvicorn gymchain_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .services.exceptions import InvalidReferenceError, NotFoundError, PermissionDeniedError


logger = logging.getLogger(__name__)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Map service and validation errors to HTTP responses."""

    @app.exception_handler(PermissionDeniedError)
    async def permission_denied_handler(request: Request, exc: PermissionDeniedError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"detail": "Insufficient permissions"},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> Response:
        logger.debug("%s %s: %s", request.method, request.url.path, exc.message)
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(InvalidReferenceError)
    async def invalid_reference_handler(request: Request, exc: InvalidReferenceError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": _format_validation_errors(exc),
                "errors": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured application instance.  The database schema is
        migrated on startup.
    """
    # Logging first so that everything below may log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        init_db()

    return app


app = create_app()
