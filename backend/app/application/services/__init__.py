from .attribute_editor import AttributeEditor, SaveOutcome
from .attribute_meta_service import AttributeMetaService
from .attribute_template_service import AttributeTemplateService
from .host_record_service import HostRecordService

__all__ = [
    "AttributeEditor",
    "SaveOutcome",
    "AttributeMetaService",
    "AttributeTemplateService",
    "HostRecordService",
]
