"""Design analysis and editing endpoints.

The API is stateless: every request carries the full design document and
every response is computed from it alone.
"""

from dataclasses import replace
from typing import Any

from fastapi import APIRouter

from carcass.application import assemble_output
from carcass.application.config import (
    document_to_state,
    load_design_from_dict,
    state_to_document,
)
from carcass.infrastructure.exporters import output_to_dict
from carcass.web.dependencies import DesignCommandsDep
from carcass.web.schemas import (
    AnalyzeRequest,
    EditRequest,
    EditResponseSchema,
    ErrorResponseSchema,
)

router = APIRouter(prefix="/designs", tags=["designs"])


@router.post("/analyze", responses={422: {"model": ErrorResponseSchema}})
async def analyze_design(request: AnalyzeRequest) -> dict[str, Any]:
    """Compute spaces, connectors, boreholes, per-part holes and collisions."""
    state = document_to_state(load_design_from_dict(request.document))
    if request.spacing is not None or request.edge_offset is not None:
        pattern = replace(
            state.pattern,
            spacing=(
                request.spacing if request.spacing is not None else state.pattern.spacing
            ),
            edge_offset=(
                request.edge_offset
                if request.edge_offset is not None
                else state.pattern.edge_offset
            ),
        )
        state = replace(state, pattern=pattern)
    return output_to_dict(assemble_output(state))


@router.post(
    "/edit",
    response_model=EditResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def edit_design(
    request: EditRequest,
    commands: DesignCommandsDep,
) -> EditResponseSchema:
    """Apply one field edit, gated by collision detection.

    A rejected edit returns the unchanged document with a message naming
    the colliding part and the overlap size.
    """
    state = document_to_state(load_design_from_dict(request.document))
    result = commands.update_part_field(
        state, request.part_id, request.field, request.value
    )
    return EditResponseSchema(
        accepted=result.accepted,
        message=result.message,
        document=state_to_document(result.state).model_dump(
            mode="json", by_alias=True, exclude_none=True
        ),
    )
