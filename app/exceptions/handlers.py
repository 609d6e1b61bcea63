import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.exceptions.exceptions import DomainError, NotFoundError, ValidationError
from app.schemas.common import INVALID_BODY

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal error"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def describe_validation_errors(request: Request, exc: RequestValidationError) -> str:
    """Summarise request validation failures as one message.

    Path parameter failures win over body failures so a malformed identifier
    is always reported as such.
    """
    errors = exc.errors()
    if any(error["loc"] and error["loc"][0] == "path" for error in errors):
        return "Invalid ids" if len(request.path_params) > 1 else "Invalid id"

    parts = []
    for error in errors:
        if error["type"] == INVALID_BODY:
            parts.append(error["msg"])
            continue
        field = ".".join(str(part) for part in error["loc"] if part != "body") or "body"
        parts.append(f"{field}: {error['msg']}")
    return "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def _not_found_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(ValidationError)
    async def _validation_handler(_request: Request, exc: ValidationError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(DomainError)
    async def _domain_handler(_request: Request, exc: DomainError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(RequestValidationError)
    async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = describe_validation_errors(request, exc)
        logger.warning("Rejected request %s %s: %s", request.method, request.url.path, message)
        return _error(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StarletteHTTPException)
    async def _http_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return _error(exc.status_code, "Not found")
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(SQLAlchemyError)
    async def _store_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    @app.exception_handler(Exception)
    async def _unhandled_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
