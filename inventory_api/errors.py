"""
Error types raised by the Inventory API and their HTTP mapping.

Every error response uses the envelope ``{"message": str | list[str]}``.
"""
import logging
from typing import List, Union
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class InventoryAPIError(Exception):
    """Base class for errors that map to an HTTP response."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    @property
    def message(self) -> Union[str, List[str]]:
        return str(self)


class ValidationError(InventoryAPIError):
    """A payload violated one or more field rules."""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, messages: List[str]):
        super().__init__("; ".join(messages))
        self.messages = list(messages)

    @property
    def message(self) -> List[str]:
        return self.messages


class NotFoundError(InventoryAPIError):
    """No record of the resource has the requested identifier."""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, label: str):
        super().__init__(f"{label} not found")
        self.label = label


class PersistenceError(InventoryAPIError):
    """
    The document store failed to complete an operation.

    Write paths report it as 400, read and delete paths as 500.
    """

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(message)
        self.status_code = status_code


def error_response(status_code: int, message, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


async def inventory_api_error_handler(request: Request, exc: InventoryAPIError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, exc.detail, headers=getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return error_response(status.HTTP_400_BAD_REQUEST, messages)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the ``{"message": ...}`` envelope for every error the API raises."""
    app.add_exception_handler(InventoryAPIError, inventory_api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
