from .attribute_group import (
    AttributeField,
    AttributeGroup,
    AttributeInstance,
    BoundValue,
    FieldRef,
    FieldValue,
    GroupSnapshot,
    MultiBoundValue,
    Row,
    TextValue,
)
from .attribute_meta import AttributeValueRecord
from .attribute_template import (
    AttributeCatalog,
    AttributeFieldDefinition,
    AttributeTemplate,
    FieldType,
    HostKind,
)
from .host_record import HostRecord
from .notice import Notice, NoticeLevel

__all__ = [
    "AttributeField",
    "AttributeGroup",
    "AttributeInstance",
    "BoundValue",
    "FieldRef",
    "FieldValue",
    "GroupSnapshot",
    "MultiBoundValue",
    "Row",
    "TextValue",
    "AttributeValueRecord",
    "AttributeCatalog",
    "AttributeFieldDefinition",
    "AttributeTemplate",
    "FieldType",
    "HostKind",
    "HostRecord",
    "Notice",
    "NoticeLevel",
]
