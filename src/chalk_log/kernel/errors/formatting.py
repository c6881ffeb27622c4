"""Formatting-time errors raised inside the layout pipeline.

These never leave :meth:`chalk_log.observability.logging.Layout.format`;
the fault tiers absorb them.
"""

from __future__ import annotations

from typing import Any, Sequence

from chalk_log.kernel.errors.base import BaseError


class FormattingError(BaseError):
    """A log call could not be turned into a formatted event."""

    default_code = "formatting_error"


class InvalidLeftoverArgumentsError(FormattingError):
    """Positional arguments were left over after classification."""

    default_code = "invalid_leftover_arguments"

    def __init__(self, leftover: Sequence[Any], **kwargs: Any) -> None:
        super().__init__(f"Invalid leftover arguments: {list(leftover)!r}", **kwargs)
        self.leftover = list(leftover)


__all__ = ["FormattingError", "InvalidLeftoverArgumentsError"]
