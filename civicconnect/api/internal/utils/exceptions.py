# Third-party imports
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import sentry_sdk
from starlette.exceptions import HTTPException

# Local application imports
from civicconnect.core.errors import CivicError, RemoteFailure
from civicconnect.core.monitoring.logging import get_logger
from civicconnect.schemas.common import BaseResponse

logger = get_logger(__name__)

# Map specific HTTP status codes to custom error codes
ERROR_MAP = {
    400: "bad_request",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    409: "conflict",
    422: "unprocessable_entity",
    429: "too_many_requests",
    500: "internal_server_error",
    502: "remote_failure",
}


def _failure(status_code: int, code: str, message: str) -> JSONResponse:
    response = BaseResponse.failure(code=code, message=message)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(status_code=status_code, content=response.model_dump(), headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(CivicError)
    async def civic_error_handler(
        request: Request,
        exc: CivicError,
    ) -> JSONResponse:
        if isinstance(exc, RemoteFailure):
            # Opaque to the caller, full detail for diagnostics
            logger.error(f"Remote failure on {request.method} {request.url.path}: {exc.cause or exc.message}")
        else:
            logger.info(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
        return _failure(exc.status_code, exc.code, exc.message)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request,  # noqa
        exc: HTTPException,
    ) -> JSONResponse:
        error_code = ERROR_MAP.get(exc.status_code, "error")
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        return _failure(exc.status_code, error_code, detail)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,  # noqa
        exc: RequestValidationError,
    ) -> JSONResponse:
        error_details = []
        for error in exc.errors():
            message = error.get("msg", "")

            # Strip pydantic's "Value error, " prefix from custom validator messages
            val_error_prefix = "Value error, "
            if message.startswith(val_error_prefix):
                message = message[len(val_error_prefix) :]

            field = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query"))
            error_details.append(f"{field}: {message}" if field else message)

        max_errors = 5
        shown = error_details[:max_errors]
        if len(error_details) > max_errors:
            shown.append("...and more errors")
        detail = "; ".join(shown) if shown else "Invalid request data"

        return _failure(400, "bad_request", detail)

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        sentry_sdk.capture_exception(exc)
        return _failure(500, "internal_server_error", "An unexpected error occurred. Please try again later.")
