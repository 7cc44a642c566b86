"""
Base schemas shared by all API responses.
"""

from datetime import datetime, UTC
from typing import Optional

from pydantic import BaseModel, Field


class BaseResponse(BaseModel):
    """Base response model with common fields."""

    success: bool = Field(True, description="Whether the operation succeeded")
    message: Optional[str] = Field(None, description="Optional response message")


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Error type or code")
    detail: str = Field(..., description="Human-readable error description")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
