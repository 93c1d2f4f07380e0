"""Pydantic DTOs for attribute templates and metadata search."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from app.application.services.value_classifier import ValueKind
from app.domain.entities.attribute_template import FieldType


class AttributeFieldDefinitionResponse(BaseModel):
    id: str | int
    title: str
    type: FieldType

    model_config = {"from_attributes": True}


class AttributeTemplateResponse(BaseModel):
    """Schema returned to the client."""

    id: str | int
    title: str
    mapto: str
    children: list[AttributeFieldDefinitionResponse]

    model_config = {"from_attributes": True}


class AttributeValueRecordResponse(BaseModel):
    """A search hit; ``kind`` tells the picker how to render ``value``."""

    id: str | int
    key: str
    value: Any
    kind: ValueKind = ValueKind.TEXT

    model_config = {"from_attributes": True}


class ActionResponse(BaseModel):
    """Envelope shared by editor-facing calls: ``success`` is "success" or "error"."""

    success: Literal["success", "error"] = "success"
    data: Any = None
    message: str | None = Field(None, examples=["Order attributes updated"])
