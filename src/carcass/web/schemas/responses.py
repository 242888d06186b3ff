"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class EditResponseSchema(BaseModel):
    """Outcome of a field edit."""

    accepted: bool
    message: str | None = None
    document: dict[str, Any] = Field(..., description="Design document after the edit")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str
    error_type: str
    details: list[dict[str, Any]] | None = None
