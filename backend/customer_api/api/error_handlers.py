"""Error Handlers - global exception handlers that render failures as envelopes.

Invariants:
    - CustomerApiError → envelope from exc.to_response() with exc.http_status
    - RequestValidationError → 400 envelope naming each offending field
    - Exception (catch-all) → 500 envelope, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (CustomerApiError), validation (Pydantic), catch-all (Exception)
    - Kept out of main.py so tests can build an app with the same handlers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from customer_api.core.errors import CustomerApiError, ErrorSeverity
from customer_api.schemas.envelope import ApiResponse

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(CustomerApiError)
    async def customer_api_error_handler(
        request: Request, exc: CustomerApiError,
    ):
        """Handle all customer API domain/persistence errors."""
        log = {
            ErrorSeverity.WARNING: logger.warning,
            ErrorSeverity.CRITICAL: logger.critical,
        }.get(exc.severity, logger.error)
        log(
            f"CustomerApiError: {exc.message}",
            extra={
                "error_code": exc.code,
                "error_category": exc.category.value,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ApiResponse.failure(
                "An unexpected error occurred",
            ).model_dump(),
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build envelope listing field-level validation problems."""
    problems = []
    for e in exc.errors():
        # "body" prefix is noise for clients; int parts are JSON decode offsets
        field = ".".join(
            loc for loc in e["loc"] if isinstance(loc, str) and loc != "body"
        )
        problems.append(f"{field}: {e['msg']}" if field else e["msg"])
    return ApiResponse.failure(
        f"Invalid request data: {'; '.join(problems)}",
    ).model_dump()
