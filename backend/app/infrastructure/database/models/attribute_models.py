"""SQLAlchemy ORM models for attribute templates and attribute metadata."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.base import Base


class AttributeTemplateModel(Base):
    """ORM model — maps to the 'attribute_templates' table.

    ``children`` stores the ordered field definitions as a JSON list of
    ``{"id", "title", "type"}`` objects.
    """

    __tablename__ = "attribute_templates"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    mapto: Mapped[str] = mapped_column(String(50), nullable=False)
    children: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_attribute_templates_mapto", "mapto"),
    )

    def __repr__(self) -> str:
        return f"<AttributeTemplateModel(id={self.id}, title='{self.title}', mapto='{self.mapto}')>"


class AttributeMetaModel(Base):
    """ORM model — maps to the 'attribute_meta' table (candidate field values)."""

    __tablename__ = "attribute_meta"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    attribute_id: Mapped[str] = mapped_column(String(100), nullable=False)
    key: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_attribute_meta_attribute", "attribute_id"),
    )

    def __repr__(self) -> str:
        return f"<AttributeMetaModel(id={self.id}, attribute='{self.attribute_id}', key='{self.key}')>"
