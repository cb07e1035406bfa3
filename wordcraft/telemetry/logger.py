"""Structured command logging utilities.

Responsibilities:
- Emit concise, deterministic command-level runtime logs through `loguru`.
- Keep context serialization stable and shell-safe.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class RunLogger:
    """Emit deterministic command logs for CLI-observable activity."""

    def __init__(self, sink: TextIO | None = None) -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level="INFO", colorize=False)

    def _emit(self, level: str, event: str, command: str, **context: object) -> None:
        """Emit one structured runtime log line."""

        line = f"[command] level={level} command={command} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_command_start(self, command: str, **context: object) -> None:
        """Emit a command-start runtime event."""

        self._emit("INFO", "start", command, **context)

    def log_command_complete(self, command: str, **context: object) -> None:
        """Emit a command-complete runtime event."""

        self._emit("INFO", "complete", command, **context)

    def log_command_failure(self, command: str, error_type: str) -> None:
        """Emit a command-failure runtime event without sensitive payload details."""

        self._emit("ERROR", "failure", command, error_type=error_type)
