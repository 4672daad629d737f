import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ebookstore.errors import (
    DomainError,
    DuplicateKey,
    EntityNotFound,
    Forbidden,
    NotValid,
    OrderNotPaid,
    Unauthorized,
    WrongPassword,
)
from ebookstore.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

INVALID_PAYLOAD_MESSAGE = "The provided payload is not valid"
UNEXPECTED_MESSAGE = "Some unexpected error happened"


def _status_and_message(exc: DomainError):
    if isinstance(exc, NotValid):
        return 400, INVALID_PAYLOAD_MESSAGE
    if isinstance(exc, Unauthorized):
        return 401, "You are not authorized."
    if isinstance(exc, WrongPassword):
        return 401, "the provided password is invalid"
    if isinstance(exc, OrderNotPaid):
        return 402, "you are not allowed to download unpaid orders"
    if isinstance(exc, Forbidden):
        return 403, "You are not allowed to perform this action"
    if isinstance(exc, EntityNotFound):
        return 404, f"{exc.entity} with the provided parameters could not be found"
    if isinstance(exc, DuplicateKey):
        return 409, f"this {exc.key} is already being used"
    return 500, UNEXPECTED_MESSAGE


def _envelope(status_code: int, message: str, details) -> JSONResponse:
    body = ErrorResponse(message=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _log(request: Request, status_code: int, detail: str, exc: Exception = None) -> None:
    # detail is the already sanitized text of the envelope, never the raw input
    logger.warning(
        "%s %s failed with %s: %s",
        request.method, request.url.path, status_code, detail,
        exc_info=exc if status_code >= 500 else None,
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code, message = _status_and_message(exc)
    _log(request, status_code, str(exc), exc)
    return _envelope(status_code, message, str(exc))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        details.append(f"{location}: {error.get('msg')}")

    _log(request, 400, "; ".join(details))
    return _envelope(400, INVALID_PAYLOAD_MESSAGE, details)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = str(exc.detail)
    _log(request, exc.status_code, detail)
    response = _envelope(exc.status_code, detail, detail)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    _log(request, 500, type(exc).__name__, exc)
    # raw driver messages may carry SQL parameters
    return _envelope(500, UNEXPECTED_MESSAGE, type(exc).__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
