"""
Error hierarchy and global error handlers for the RadarCol API.

Upstream failures are raised by the contracts client as RemoteApiError
subclasses and surface unmodified; the handlers here only translate
them into consistent JSON error responses.
Never exposes internal details to clients.
"""
import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = structlog.get_logger("radarcol.api.errors")


class DomainError(Exception):
    """Base class for domain-level errors."""
    status_code: int = 400
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class RemoteApiError(DomainError):
    """The contracts API could not produce a usable answer."""
    status_code = 502
    error_code = "UPSTREAM_ERROR"


class NetworkError(RemoteApiError):
    """Host unreachable: connection refused, DNS failure or timeout."""
    status_code = 503
    error_code = "UPSTREAM_UNREACHABLE"


class HttpError(RemoteApiError):
    """Upstream answered with a non-2xx status."""
    status_code = 502
    error_code = "UPSTREAM_HTTP_ERROR"

    def __init__(self, message: str, status: int, details: dict | None = None):
        self.status = status
        super().__init__(message, {"upstream_status": status, **(details or {})})


class NotFoundError(HttpError):
    """Upstream reported 404 for a single-contract lookup."""
    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(self, contract_id: str):
        self.contract_id = contract_id
        super().__init__(
            f'Contract "{contract_id}" not found',
            status=404,
            details={"contract_id": contract_id},
        )


class SchemaError(RemoteApiError):
    """Upstream body is not JSON or lacks the expected structure."""
    status_code = 502
    error_code = "UPSTREAM_SCHEMA_ERROR"


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers on the FastAPI app."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        if isinstance(exc, RemoteApiError) and not isinstance(exc, NotFoundError):
            logger.warning(
                "upstream_error",
                error_code=exc.error_code,
                error=exc.message,
                path=request.url.path,
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": {
                    "code": exc.error_code,
                    "message": exc.message,
                    "details": exc.details if exc.details else None,
                }
            },
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        logger.warning("validation_error", error=str(exc), path=request.url.path)
        return JSONResponse(
            status_code=422,
            content={
                "error": {
                    "code": "INVALID_INPUT",
                    "message": str(exc),
                }
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "unhandled_error",
            error_type=type(exc).__name__,
            error=str(exc),
            path=request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred.",
                }
            },
        )
