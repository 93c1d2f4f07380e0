from .attribute_models import AttributeMetaModel, AttributeTemplateModel
from .host_record import HostRecordModel

__all__ = [
    "AttributeMetaModel",
    "AttributeTemplateModel",
    "HostRecordModel",
]
