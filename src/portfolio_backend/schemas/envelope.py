"""Response envelope schemas shared by every endpoint."""

from typing import Any

from pydantic import BaseModel


class SuccessEnvelope(BaseModel):
    """Wrapper for a successful response."""

    success: bool = True
    data: Any
    count: int
    timestamp: int


class ErrorEnvelope(BaseModel):
    """Wrapper for a failed response."""

    success: bool = False
    error: str
    details: str
    timestamp: int
