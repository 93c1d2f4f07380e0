"""Display-time classification of attribute metadata values."""

import re
from enum import Enum
from typing import Any
from urllib.parse import urlparse


class ValueKind(str, Enum):
    TEXT = "text"
    COLOR = "color"
    URL = "url"


_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def classify_value(value: Any) -> ValueKind:
    """Tell whether a stored value renders as a color swatch, a link or plain text.

    Only strings can be colors or URLs; anything else is TEXT. Storage shape
    is never affected by the result.
    """
    if not isinstance(value, str):
        return ValueKind.TEXT
    candidate = value.strip()
    if _HEX_COLOR.match(candidate):
        return ValueKind.COLOR
    parsed = urlparse(candidate)
    if parsed.scheme in ("http", "https") and parsed.netloc:
        return ValueKind.URL
    return ValueKind.TEXT
