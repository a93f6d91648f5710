"""API errors and the handlers that render them as error envelopes."""

from typing import Any

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.portfolio.core.config import get_settings
from src.portfolio.core.logging import get_logger

logger = get_logger(__name__)

# Fallback error codes for framework-raised HTTP errors
_STATUS_CODES: dict[int, str] = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
    413: "PAYLOAD_TOO_LARGE",
    429: "RATE_LIMITED",
}


class ApiError(Exception):
    """Error surfaced to the client with a status code and a stable error code."""

    def __init__(
        self,
        status_code: int,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code
        self.details = details

    @classmethod
    def bad_request(cls, message: str, details: dict[str, Any] | None = None) -> "ApiError":
        return cls(status.HTTP_400_BAD_REQUEST, message, "BAD_REQUEST", details)

    @classmethod
    def unauthorized(cls, message: str = "Unauthorized") -> "ApiError":
        return cls(status.HTTP_401_UNAUTHORIZED, message, "UNAUTHORIZED")

    @classmethod
    def invalid_token(cls) -> "ApiError":
        return cls(status.HTTP_401_UNAUTHORIZED, "Invalid authentication token", "INVALID_TOKEN")

    @classmethod
    def token_expired(cls) -> "ApiError":
        return cls(
            status.HTTP_401_UNAUTHORIZED, "Authentication token has expired", "TOKEN_EXPIRED"
        )

    @classmethod
    def not_found(cls, resource: str = "Resource") -> "ApiError":
        return cls(status.HTTP_404_NOT_FOUND, f"{resource} not found", "NOT_FOUND")

    @classmethod
    def conflict(cls, message: str) -> "ApiError":
        return cls(status.HTTP_409_CONFLICT, message, "CONFLICT")

    @classmethod
    def payload_too_large(cls, message: str) -> "ApiError":
        return cls(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, message, "PAYLOAD_TOO_LARGE")


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the error envelope, tagged with the request's correlation id."""
    error: dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "request_id": correlation_id.get(),
        },
        headers=headers,
    )


def _format_validation_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    errors = []
    for err in exc.errors():
        # Drop the "body"/"query"/"path" location prefix
        loc = [str(part) for part in err.get("loc", ())[1:]]
        errors.append({"field": ".".join(loc), "message": err.get("msg", "Invalid value")})
    return errors


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that render the error envelope."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("API error", code=exc.code, message=exc.message, path=request.url.path)
        return error_response(exc.status_code, exc.code, exc.message, exc.details)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        code = _STATUS_CODES.get(exc.status_code, "INTERNAL_ERROR")
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        if exc.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
            message = f"Route {request.method} {request.url.path} not found"
        return error_response(exc.status_code, code, message, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "VALIDATION_ERROR",
            "Validation failed",
            {"errors": _format_validation_errors(exc)},
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        logger.warning("Integrity error", path=request.url.path, error=str(exc.orig))
        return error_response(
            status.HTTP_409_CONFLICT,
            "DUPLICATE_ENTRY",
            "A record with this value already exists",
        )

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
        logger.warning("Rate limit exceeded", path=request.url.path, limit=str(exc.detail))
        return error_response(
            status.HTTP_429_TOO_MANY_REQUESTS,
            "RATE_LIMITED",
            "Too many requests. Please try again later.",
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=correlation_id.get(),
            path=request.url.path,
        )
        settings = get_settings()
        message = (
            "An unexpected error occurred" if settings.app_env == "production" else str(exc)
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "INTERNAL_ERROR",
            message,
        )
