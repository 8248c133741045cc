"""Exception handlers that render errors in the response envelope."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException

from society_cms.exceptions import ServiceError, StorageError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
    )


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if isinstance(exc, StorageError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
    return error_response(exc.status_code, exc.message)


async def http_error_handler(request: Request, exc: HTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return error_response(status.HTTP_400_BAD_REQUEST, ", ".join(messages))


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} database error: {exc}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error")


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope handlers on an application."""
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(HTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
