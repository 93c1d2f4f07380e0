"""Attribute metadata search endpoint used by the editor's value pickers."""

from fastapi import APIRouter, Depends, Query

from app.application.schemas import ActionResponse, AttributeValueRecordResponse
from app.application.services import AttributeMetaService
from app.application.services.value_classifier import classify_value
from app.infrastructure.dependencies import get_attribute_meta_service

router = APIRouter(prefix="/attribute-meta", tags=["Attribute Meta"])


@router.get("/search", response_model=ActionResponse)
async def search_attribute_meta(
    attribute_id: str = Query(..., min_length=1, description="Field definition id"),
    term: str = Query("", description="Keyword matched against key and value"),
    limit: int | None = Query(None, ge=1, le=200),
    service: AttributeMetaService = Depends(get_attribute_meta_service),
) -> ActionResponse:
    """Search candidate values for one field definition."""
    records = await service.search(term, attribute_id, limit)
    return ActionResponse(
        success="success",
        data=[
            AttributeValueRecordResponse(
                id=r.id, key=r.key, value=r.value, kind=classify_value(r.value),
            ).model_dump(mode="json")
            for r in records
        ],
    )
