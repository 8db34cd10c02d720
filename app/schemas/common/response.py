# --- File: app/schemas/common/response.py ---
"""
Standard API response wrappers.
"""

from typing import Any, Dict, Union

from pydantic import Field

from app.schemas.common.base import BaseSchema

__all__ = [
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
]


class MessageResponse(BaseSchema):
    """Simple message response."""

    message: str = Field(..., description="Response message")


class ErrorDetail(BaseSchema):
    message: str = Field(..., description="Error message")
    code: str = Field(..., description="Error code")
    details: Dict[str, Any] = Field(default_factory=dict)
    type: Union[str, None] = Field(default=None, description="Exception class")


class ErrorResponse(BaseSchema):
    """Error envelope returned by every exception handler."""

    error: ErrorDetail
