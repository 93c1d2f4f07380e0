"""Attribute template endpoints — the read-only definition store."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas import AttributeTemplateResponse
from app.application.services import AttributeTemplateService
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_attribute_template_service

router = APIRouter(prefix="/attributes", tags=["Attributes"])


@router.get("", response_model=list[AttributeTemplateResponse])
async def list_templates(
    mapto: str | None = Query(None, description="Only templates mapped to this host kind"),
    service: AttributeTemplateService = Depends(get_attribute_template_service),
) -> list[AttributeTemplateResponse]:
    """List attribute templates, optionally filtered by host kind."""
    templates = await service.list_templates(mapto)
    return [
        AttributeTemplateResponse.model_validate(t, from_attributes=True) for t in templates
    ]


@router.get("/{template_id}", response_model=AttributeTemplateResponse)
async def get_template(
    template_id: str,
    service: AttributeTemplateService = Depends(get_attribute_template_service),
) -> AttributeTemplateResponse:
    """Retrieve a single attribute template by ID."""
    try:
        template = await service.get_template(template_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return AttributeTemplateResponse.model_validate(template, from_attributes=True)
