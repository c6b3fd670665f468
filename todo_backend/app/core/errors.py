# todo_backend/app/core/errors.py
"""
Error taxonomy and the exception handlers that render it.

Every handler resolves a failure into one of these kinds. The handlers
installed by `install_exception_handlers` turn them into the uniform
envelope, so no stack trace crosses the HTTP boundary.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_backend.app.schemas.envelope import envelope

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request payload"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    message = "Conflict"


class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"


class InternalError(AppError):
    pass


class HashError(InternalError):
    message = "Error hashing password"


class SigningError(InternalError):
    message = "Error generating token"


class StoreError(InternalError):
    message = "Database error"


class TokenError(AuthError):
    """Token verification failure. `reason` is for logs, never for clients."""

    MALFORMED = "malformed"
    WRONG_ALGORITHM = "wrong-algorithm"
    BAD_SIGNATURE = "bad-signature"
    EXPIRED = "expired"
    MISSING_SUBJECT = "missing-subject-claim"
    INVALID_CLAIMS = "invalid-claims"

    message = "Invalid token"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__()


def _render(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=envelope(status_code, message).model_dump(mode="json"),
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, InternalError):
        logger.error("%s %s failed: %r", request.method, request.url.path, exc)
    return _render(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected payload on %s %s: %s", request.method, request.url.path, exc.errors())
    return _render(status.HTTP_400_BAD_REQUEST, ValidationError.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _render(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _render(status.HTTP_500_INTERNAL_SERVER_ERROR, InternalError.message)


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
