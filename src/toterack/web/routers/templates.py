"""Template endpoints."""

import json

from fastapi import APIRouter

from toterack.web.dependencies import TemplateManagerDep
from toterack.web.schemas.responses import (
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=TemplateListSchema)
async def list_templates(manager: TemplateManagerDep) -> TemplateListSchema:
    """List all bundled templates."""
    templates = [
        TemplateListItemSchema(name=name, description=desc)
        for name, desc in manager.list_templates()
    ]
    return TemplateListSchema(templates=templates)


@router.get("/{name}", response_model=TemplateContentSchema)
async def get_template(name: str, manager: TemplateManagerDep) -> TemplateContentSchema:
    """Get the content of a template.

    Raises:
        TemplateNotFoundError: If the template does not exist (handled by
            exception handler).
    """
    content = json.loads(manager.get_template(name))
    return TemplateContentSchema(
        name=name,
        description=manager.describe(name),
        content=content,
    )
