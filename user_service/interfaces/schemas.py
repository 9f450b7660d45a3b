"""
Pydantic schemas shared by all routers: the error envelope and health.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorBody(BaseModel):
    """Inner error object of the error envelope."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    status_code: int = Field(..., alias="statusCode")
    code: Optional[str] = None
    details: Optional[Any] = None


class ErrorResponse(BaseModel):
    """Response schema for every error."""

    error: ErrorBody


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    timestamp: str
    uptime: float = Field(..., description="Seconds since the application started")
    environment: str
    version: str
