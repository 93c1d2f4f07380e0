"""Abstract repository interface (port) for attribute templates."""

from abc import ABC, abstractmethod

from app.domain.entities import AttributeTemplate


class AttributeTemplateRepository(ABC):
    """Read-only port over the attribute definition store."""

    @abstractmethod
    async def get_by_id(self, template_id: str) -> AttributeTemplate | None:
        """Retrieve a single template by id."""
        ...

    @abstractmethod
    async def get_all(self, *, mapto: str | None = None) -> list[AttributeTemplate]:
        """Retrieve templates, optionally only those mapped to one host kind."""
        ...
