from .attribute_gateway import ActionResult, AttributeMetaSearch, HostRecordGateway
from .attribute_meta_repository import AttributeMetaRepository
from .attribute_template_repository import AttributeTemplateRepository
from .host_record_repository import HostRecordRepository

__all__ = [
    "ActionResult",
    "AttributeMetaSearch",
    "HostRecordGateway",
    "AttributeMetaRepository",
    "AttributeTemplateRepository",
    "HostRecordRepository",
]
