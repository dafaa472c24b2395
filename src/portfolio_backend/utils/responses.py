"""Builders for the JSON envelope wrapped around every response."""

import time
from collections.abc import Sequence
from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from portfolio_backend.schemas.envelope import ErrorEnvelope, SuccessEnvelope


def current_millis() -> int:
    """Return the current time as epoch milliseconds."""
    return int(time.time() * 1000)


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    return value


def success_response(data: Any, status_code: int = 200) -> JSONResponse:
    """
    Wrap a payload in the success envelope.

    Args:
        data: A schema instance, a list of them, or plain JSON values
        status_code: HTTP status to send

    Returns:
        JSON response ``{success, data, count, timestamp}``; ``count`` is the
        list length for sequences and 1 otherwise

    Examples:
        >>> success_response(["Backend", "Frontend"]).body
        b'{"success":true,"data":["Backend","Frontend"],"count":2,...}'
    """
    is_list = isinstance(data, Sequence) and not isinstance(data, (str, bytes))
    envelope = SuccessEnvelope(
        data=_to_jsonable(data),
        count=len(data) if is_list else 1,
        timestamp=current_millis(),
    )
    return JSONResponse(status_code=status_code, content=envelope.model_dump(mode="json"))


def error_response(error: str, details: str, status_code: int) -> JSONResponse:
    """
    Wrap a failure in the error envelope.

    Args:
        error: Short description of what failed
        details: Underlying message
        status_code: HTTP status to send

    Returns:
        JSON response ``{success: false, error, details, timestamp}``
    """
    envelope = ErrorEnvelope(error=error, details=details, timestamp=current_millis())
    return JSONResponse(status_code=status_code, content=envelope.model_dump(mode="json"))
