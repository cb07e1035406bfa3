"""Domain exceptions for text operations and CLI diagnostics."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when an argument is outside the documented domain of an operation."""


class FormatError(ValueError):
    """Raised when encoded input (such as hexadecimal text) is malformed."""


class CommandError(RuntimeError):
    """Raised when a CLI command fails at a known stage."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
