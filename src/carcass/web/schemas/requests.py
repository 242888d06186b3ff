"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class GenerateTemplateRequest(BaseModel):
    """Request for generating a cabinet from template parameters."""

    template: dict[str, Any] = Field(
        default_factory=dict,
        description="Template parameters (width, height, depth, compartments, "
        "shelves, shareWalls)",
    )


class AnalyzeRequest(BaseModel):
    """Request for analyzing a design document."""

    document: dict[str, Any] = Field(..., description="Design document JSON")
    spacing: float | None = Field(
        default=None, gt=0, description="Override connector spacing in mm"
    )
    edge_offset: float | None = Field(
        default=None, ge=0, description="Override connector edge offset in mm"
    )


class EditRequest(BaseModel):
    """Request for applying a single field edit to a part of a design."""

    document: dict[str, Any] = Field(..., description="Design document JSON")
    part_id: str = Field(..., min_length=1, description="Id of the part to edit")
    field: str = Field(..., description="Part field (x, y, z, w, h, d, ...)")
    value: Any = Field(..., description="New value; malformed numbers fall back")
