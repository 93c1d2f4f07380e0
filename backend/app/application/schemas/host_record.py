"""Pydantic DTOs (Data Transfer Objects) for host records."""

from datetime import datetime

from pydantic import BaseModel, Field


class HostRecordDataUpdate(BaseModel):
    """Schema for replacing a record's serialized attribute document."""

    data: str = Field(
        ..., examples=['[{"id":"group_1","title":"Shipping","attributes":[]}]'],
    )


class HostRecordResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    entity_type: str
    data: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
