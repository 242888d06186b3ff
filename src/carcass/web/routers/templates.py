"""Template generation endpoints."""

from typing import Any

from fastapi import APIRouter

from carcass.application import DesignState
from carcass.application.config import (
    config_to_template,
    load_template_from_dict,
    state_to_document,
)
from carcass.web.dependencies import DesignCommandsDep
from carcass.web.exceptions import TemplateGenerationError
from carcass.web.schemas import ErrorResponseSchema, GenerateTemplateRequest

router = APIRouter(prefix="/templates", tags=["templates"])


@router.post("/generate", responses={422: {"model": ErrorResponseSchema}})
async def generate_template(
    request: GenerateTemplateRequest,
    commands: DesignCommandsDep,
) -> dict[str, Any]:
    """Generate a design document from template parameters.

    Raises:
        ConfigError: If the parameters fail schema validation.
        TemplateGenerationError: If the parameters cannot produce a cabinet.
    """
    template = config_to_template(load_template_from_dict(request.template))
    errors = template.validate()
    if errors:
        raise TemplateGenerationError(errors)

    result = commands.apply_template(DesignState.initial(), template)
    return state_to_document(result.state).model_dump(
        mode="json", by_alias=True, exclude_none=True
    )
