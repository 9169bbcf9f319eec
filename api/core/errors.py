"""
Exception handlers that render every failure as `{"error": "<message>"}`.

Feature code raises `fastapi.HTTPException` (or lets `db.StoreError`
propagate); these handlers only decide the response shape.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import db

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=headers)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid input."
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Malformed JSON body."
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query")]
    field = ".".join(loc)
    msg = str(first.get("msg") or "invalid value")
    return f"Invalid input: {field}: {msg}" if field else f"Invalid input: {msg}"


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = exc.detail if isinstance(exc.detail, str) else "Request failed."
    return error_response(exc.status_code, detail, headers=getattr(exc, "headers", None))


async def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(400, _validation_message(exc))


async def store_error_handler(request: Request, exc: db.StoreError) -> JSONResponse:
    logger.error(
        "store_error method=%s path=%s error=%s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return error_response(500, "Database error.")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error method=%s path=%s error=%r", request.method, request.url.path, exc)
    return error_response(500, "Internal server error.")


def register(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(db.StoreError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
