"""Pydantic schemas for the REST API."""

from carcass.web.schemas.requests import (
    AnalyzeRequest,
    EditRequest,
    GenerateTemplateRequest,
)
from carcass.web.schemas.responses import EditResponseSchema, ErrorResponseSchema

__all__ = [
    "AnalyzeRequest",
    "EditRequest",
    "EditResponseSchema",
    "ErrorResponseSchema",
    "GenerateTemplateRequest",
]
