"""Request validation errors rendered as 400 responses."""

from typing import Any, cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from slowapi.util import get_remote_address
from starlette.status import HTTP_400_BAD_REQUEST

from bloglist.monitoring import get_logger

logger = get_logger(__name__)


def _serializable_ctx(ctx: dict[str, Any]) -> dict[str, Any]:
    return {key: str(value) if isinstance(value, Exception) else value for key, value in ctx.items()}


def format_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Flatten pydantic error dicts into ``{field, message, type}`` entries.

    The leading location segment (``body``, ``query``...) is dropped.
    """
    formatted_errors = []
    for error in errors:
        formatted_error: dict[str, Any] = {
            "field": ".".join(str(loc) for loc in error.get("loc", [])[1:]),
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        if "ctx" in error:
            formatted_error["context"] = _serializable_ctx(error["ctx"])
        formatted_errors.append(formatted_error)
    return formatted_errors


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle request validation errors.

    Missing or malformed fields are a client error, reported as 400 with one
    entry per failing field.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)
    formatted_errors = format_validation_errors(list(exec_error.errors()))

    logger.warning(
        f"Validation error for ip: {get_remote_address(request)} at endpoint {request.url.path}",
        errors=formatted_errors,
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "detail": "Validation failed",
            "errors": formatted_errors,
        },
    )

