"""
Response envelopes shared by every endpoint.

Success: {"success": true, "data": ..., "message": ...}
Failure: {"success": false, "error": "..."}
"""
from typing import Generic, Literal, Optional, TypeVar

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel
from starlette.responses import JSONResponse


T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Successful result, optionally carrying data and a human message."""
    success: Literal[True] = True
    data: Optional[T] = None
    message: Optional[str] = None


class ErrorResponse(BaseModel):
    """Failed result with a single user-facing error message."""
    success: Literal[False] = False
    error: str


def error_response(status_code: int, error: str, headers: dict | None = None) -> JSONResponse:
    """Build a JSON failure envelope with the given HTTP status."""
    payload = ErrorResponse(error=error)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(payload),
        headers=headers,
    )
