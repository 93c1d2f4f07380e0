"""Logging setup for the API process and editor sessions.

Each category setting on :class:`~app.config.Settings` controls a fixed set
of logger names, so SQL echo or outbound HTTP chatter can be turned up
without touching the editor's own stage logs.
"""

import logging
import sys

from app.config import Settings, get_settings

# Settings field → logger names it governs.
LOGGER_CATEGORIES: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_editor": (
        "AttributeEditor",
        "app.application.services.attribute_editor",
        "app.infrastructure.http",
    ),
}

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def resolve_level(raw: str | None, default: int = logging.INFO) -> int:
    """Level name (any case) to a logging constant; unknown names give ``default``."""
    if not raw:
        return default
    numeric = logging.getLevelName(raw.strip().upper())
    return numeric if isinstance(numeric, int) else default


def category_levels(settings: Settings) -> dict[str, int]:
    """Logger name → numeric level for every configured category."""
    levels: dict[str, int] = {}
    for field_name, logger_names in LOGGER_CATEGORIES.items():
        level = resolve_level(getattr(settings, field_name, None))
        for name in logger_names:
            levels[name] = level
    return levels


def setup_logging(settings: Settings | None = None) -> None:
    """Apply root and per-category levels; safe to call more than once."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(resolve_level(settings.log_level))
    # uvicorn installs its own handlers; scripts and tests may have none
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    for name, level in category_levels(settings).items():
        logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s sql=%s http=%s uvicorn=%s editor=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_http,
        settings.log_level_uvicorn,
        settings.log_level_editor,
    )
