"""User-facing notices raised by the attribute editor."""

from dataclasses import dataclass
from enum import Enum


class NoticeLevel(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Notice:
    """A transient, non-blocking message for the person editing."""

    level: NoticeLevel
    message: str
