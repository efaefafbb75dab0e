"""Exception handlers that render every failure as the standard error envelope."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from inclusive_hub.schemas.common import ErrorResponse

INVALID_JSON_MESSAGE = "Invalid JSON body"


def error_response(status_code: int, message: str, errors: Optional[List[str]] = None) -> JSONResponse:
    body = ErrorResponse(message=message, errors=errors)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) or "body"


def format_validation_errors(errors: Iterable[dict]) -> List[str]:
    """Turn pydantic error dicts into short ``"<field> <problem>"`` strings."""
    messages: List[str] = []
    for err in errors:
        field = _field_name(err.get("loc", ()))
        if err.get("type") == "missing":
            messages.append(f"{field} is required")
            continue
        ctx_error = (err.get("ctx") or {}).get("error")
        detail = str(ctx_error) if ctx_error is not None else err.get("msg", "is invalid")
        messages.append(f"{field}: {detail}")
    return messages


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        return error_response(status.HTTP_400_BAD_REQUEST, INVALID_JSON_MESSAGE)
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Validation failed",
        format_validation_errors(errors),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    response = error_response(exc.status_code, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error("unhandled_error")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def init_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope-producing handlers to the app."""

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
