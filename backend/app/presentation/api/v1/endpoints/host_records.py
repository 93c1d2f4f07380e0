"""Host record endpoints — read and save an order's or user's attribute document."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.schemas import (
    ActionResponse,
    AttributeGroupsResponse,
    HostRecordDataUpdate,
    HostRecordResponse,
)
from app.application.services import HostRecordService
from app.application.services.attribute_document_codec import document_to_schema
from app.domain.entities import HostKind
from app.domain.exceptions import EntityNotFoundError, InvalidDocumentError
from app.infrastructure.dependencies import get_host_record_service

router = APIRouter(prefix="/records", tags=["Host Records"])


@router.get("/{entity_type}/{record_id}", response_model=HostRecordResponse)
async def get_record(
    entity_type: HostKind,
    record_id: str,
    service: HostRecordService = Depends(get_host_record_service),
) -> HostRecordResponse:
    """Retrieve a single host record, including its raw attribute data."""
    try:
        record = await service.get_record(entity_type.value, record_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return HostRecordResponse.model_validate(record, from_attributes=True)


@router.put("/{entity_type}/{record_id}", response_model=ActionResponse)
async def update_record(
    entity_type: HostKind,
    record_id: str,
    body: HostRecordDataUpdate,
    service: HostRecordService = Depends(get_host_record_service),
) -> ActionResponse:
    """Overwrite a record's attribute document with the editor's snapshot."""
    try:
        await service.update_data(entity_type.value, record_id, body.data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidDocumentError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return ActionResponse(success="success", message=f"{entity_type.value.capitalize()} attributes updated")


@router.get("/{entity_type}/{record_id}/attribute-groups", response_model=AttributeGroupsResponse)
async def get_attribute_groups(
    entity_type: HostKind,
    record_id: str,
    service: HostRecordService = Depends(get_host_record_service),
) -> AttributeGroupsResponse:
    """Parsed attribute groups of a record, with legacy data migrated."""
    try:
        groups, parse_error = await service.load_groups(entity_type.value, record_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return AttributeGroupsResponse(
        record_id=record_id,
        entity_type=entity_type.value,
        groups=document_to_schema(groups),
        parse_error=parse_error,
    )
