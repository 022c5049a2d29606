"""Error Handlers: global exception handlers, all answering with the envelope shape.

Invariants:
    - RequestValidationError -> 400 "Invalid input: ..." envelope
    - UsersApiError -> its own envelope and http_status
    - Exception (catch-all) -> 500 envelope, never leaks internal details
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from users_api.api.validation import invalid_input_response
from users_api.core.errors import UsersApiError
from users_api.core.service_response import failure

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)
    _register_users_api_error_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "method": request.method},
        )
        envelope = invalid_input_response(exc.errors())
        return JSONResponse(
            status_code=envelope.status_code, content=envelope.to_dict(),
        )


def _register_users_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(UsersApiError)
    async def users_api_error_handler(request: Request, exc: UsersApiError):
        logger.error(
            f"UsersApiError: {exc.message}",
            extra={**exc.log_extra(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        envelope = failure(
            UNEXPECTED_ERROR_MESSAGE, None, HTTPStatus.INTERNAL_SERVER_ERROR,
        )
        return JSONResponse(
            status_code=envelope.status_code, content=envelope.to_dict(),
        )
