from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .exceptions import BackendError, DecodeError, InvalidInput, NetworkError, TranslationError

logger = logging.getLogger(__name__)


def standard_error(status: int, code: str, message: str, details: dict | None = None):
    return {"error": {"status": status, "code": code, "message": message, "details": details or {}}}


def translation_error_status(exc: TranslationError) -> int:
    if isinstance(exc, InvalidInput):
        return 400
    if isinstance(exc, BackendError):
        return 429 if exc.status_code == 429 else 502
    if isinstance(exc, NetworkError):
        return 503
    if isinstance(exc, DecodeError):
        return 502
    return 500


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(TranslationError)
    async def translation_exception_handler(request: Request, exc: TranslationError):
        status = translation_error_status(exc)
        details: dict = {"retryable": exc.retryable}
        if isinstance(exc, BackendError) and exc.status_code is not None:
            details["backend_status"] = exc.status_code
        payload = standard_error(status, exc.code, str(exc), details)
        return JSONResponse(status_code=status, content=payload)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        payload = standard_error(exc.status_code, "http_error", exc.detail if exc.detail else "HTTP error")
        return JSONResponse(status_code=exc.status_code, content=payload)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        details = {"errors": jsonable_errors(exc)}
        payload = standard_error(422, "validation_error", "Validation failed", details)
        return JSONResponse(status_code=422, content=payload)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        payload = standard_error(500, "server_error", "Internal server error")
        return JSONResponse(status_code=500, content=payload)


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    # ctx may hold exception instances that JSONResponse cannot serialise
    return [{k: v for k, v in err.items() if k != "ctx"} for err in exc.errors()]
