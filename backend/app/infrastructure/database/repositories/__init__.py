from .attribute_meta_repository import SQLAlchemyAttributeMetaRepository
from .attribute_template_repository import SQLAlchemyAttributeTemplateRepository
from .host_record_repository import SQLAlchemyHostRecordRepository

__all__ = [
    "SQLAlchemyAttributeMetaRepository",
    "SQLAlchemyAttributeTemplateRepository",
    "SQLAlchemyHostRecordRepository",
]
