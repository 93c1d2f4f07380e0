"""Colored editor logger — ANSI-colored console logging for attribute editing.

Provides an EditorLogger with color-coded output per editor stage, so a
document's load → edit → search → save sequence is easy to follow in the
terminal.

Color scheme:
    🟢 Green   — Load / Complete
    🟠 Cyan    — Search
    🟣 Magenta — Save
    🔴 Red     — Errors
    ⚪ Gray    — Timing / Details
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


# ── Editor Stage Definitions ─────────────────────────────────────────

class EditorStage:
    """Predefined editor stages with colors and icons."""

    LOAD = ("LOAD", _Colors.GREEN, "📂")
    SEARCH = ("SEARCH", _Colors.CYAN, "🔎")
    SAVE = ("SAVE", _Colors.MAGENTA, "💾")
    COMPLETE = ("COMPLETE", _Colors.GREEN, "✅")


# ── EditorLogger ─────────────────────────────────────────────────────

class EditorLogger:
    """Color-coded logger for attribute editor sessions.

    Usage:
        log = EditorLogger("AttributeEditor")
        log.step_start(EditorStage.SAVE, "Saving order attributes", record_id="42")
        log.step_complete(EditorStage.SAVE, "Baseline advanced")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    @staticmethod
    def _details(kwargs: dict[str, Any]) -> str:
        if not kwargs:
            return ""
        details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
        return f" {_Colors.GRAY}({details}){_Colors.RESET}"

    def step_start(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        self._logger.info(
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}{self._details(kwargs)}"
        )

    def step_complete(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        self._logger.info(
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}{self._details(kwargs)}"
        )

    def step_error(self, stage: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        """Log a stage failure in red."""
        label, _, icon = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.error(formatted)

    def detail(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}{self._details(kwargs)}")

    @contextmanager
    def timed_step(self, stage: tuple[str, str, str], message: str, **kwargs: Any):
        """Context manager that logs start/end with elapsed time.

        Usage:
            with log.timed_step(EditorStage.SEARCH, "Searching colors"):
                result = await gateway.search_attribute_meta(...)
        """
        self.step_start(stage, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.step_error(stage, f"{message} — failed after {elapsed:.2f}s", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.step_complete(stage, f"{message} — {elapsed:.2f}s", **kwargs)
