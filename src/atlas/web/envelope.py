"""
Response envelopes.

Every non-preflight response body is one of these two shapes.
"""

from typing import Any, Literal

from fastapi.responses import JSONResponse
from pydantic import BaseModel


class SuccessEnvelope(BaseModel):
    """Object for point operations, array for list operations."""
    success: Literal[True] = True
    data: Any


class ErrorEnvelope(BaseModel):
    success: Literal[False] = False
    error: str
    details: str | None = None  # Internal errors only


def success_response(data: Any) -> JSONResponse:
    return JSONResponse(status_code=200, content=SuccessEnvelope(data=data).model_dump())


def error_response(
    status_code: int,
    message: str,
    details: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    envelope = ErrorEnvelope(error=message, details=details)
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(exclude_none=True),
        headers=headers,
    )
