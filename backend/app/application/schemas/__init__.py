from .attribute_group import (
    AttributeFieldSchema,
    AttributeGroupSchema,
    AttributeGroupsResponse,
    AttributeInstanceSchema,
    BoundValueSchema,
)
from .attribute_template import (
    ActionResponse,
    AttributeFieldDefinitionResponse,
    AttributeTemplateResponse,
    AttributeValueRecordResponse,
)
from .host_record import HostRecordDataUpdate, HostRecordResponse

__all__ = [
    "AttributeFieldSchema",
    "AttributeGroupSchema",
    "AttributeGroupsResponse",
    "AttributeInstanceSchema",
    "BoundValueSchema",
    "ActionResponse",
    "AttributeFieldDefinitionResponse",
    "AttributeTemplateResponse",
    "AttributeValueRecordResponse",
    "HostRecordDataUpdate",
    "HostRecordResponse",
]
