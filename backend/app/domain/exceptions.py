"""Domain-specific exceptions — framework-independent."""

from app.domain.entities.notice import NoticeLevel


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DocumentParseError(Exception):
    """Raised when a stored attribute document cannot be decoded."""


class InvalidDocumentError(Exception):
    """Raised when an incoming attribute document is not a JSON array."""


class AttributeGatewayError(Exception):
    """Raised when a remote attribute call fails before a usable response.

    Covers transport errors, timeouts and unreadable bodies.
    """

    def __init__(self, operation: str, message: str, status_code: int | None = None):
        self.operation = operation
        self.status_code = status_code
        self.message = message
        prefix = f"[{operation}] {status_code}" if status_code is not None else f"[{operation}]"
        super().__init__(f"{prefix}: {message}")


# ── Edit rejections ──────────────────────────────────────────────────
#
# Raised by the edit engine when an operation's preconditions fail. The
# editor session turns them into notices; the snapshot is left as it was.


class EditRejectedError(Exception):
    """Base class for a rejected attribute edit."""

    level: NoticeLevel = NoticeLevel.ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class BlankTitleError(EditRejectedError):
    level = NoticeLevel.WARNING


class DuplicateAttributeError(EditRejectedError):
    level = NoticeLevel.INFO


class TemplateNotFoundError(EditRejectedError):
    pass


class DuplicateValueError(EditRejectedError):
    pass


class ValueNotFoundError(EditRejectedError):
    pass


class EditTargetNotFoundError(EditRejectedError):
    """The addressed group, attribute, row or field does not exist."""
