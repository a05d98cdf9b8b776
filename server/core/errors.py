# server/core/errors.py

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


# -------------------------------
# Error Taxonomy
# -------------------------------

class BlogApiError(Exception):
    """
    Base class for errors that map directly onto an HTTP response.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(BlogApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class MalformedReference(BlogApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthRequired(BlogApiError):
    status_code = status.HTTP_401_UNAUTHORIZED


class AuthInvalid(BlogApiError):
    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(BlogApiError):
    # Ownership mismatch answers 401, like a missing credential.
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(BlogApiError):
    status_code = status.HTTP_404_NOT_FOUND


# -------------------------------
# Central Handlers
# -------------------------------

def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _format_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = [str(item) for item in err.get("loc", ()) if item != "body"]
        field = ".".join(loc)
        parts.append(f"{field}: {err.get('msg')}" if field else err.get("msg", "invalid request"))
    return "; ".join(parts) or "invalid request"


async def blog_api_error_handler(request: Request, exc: BlogApiError):
    return error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return error_response(status.HTTP_400_BAD_REQUEST, _format_validation_error(exc))


async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.info("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return error_response(status.HTTP_400_BAD_REQUEST, "constraint violation")


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = "unknown endpoint" if exc.status_code == 404 else str(exc.detail)
    return error_response(exc.status_code, message)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal server error")


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(BlogApiError, blog_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
