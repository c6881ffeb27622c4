"""Config settings – LayoutSettings and the OutputFormat selector."""
from __future__ import annotations

import dataclasses
from enum import Enum

from chalk_log.config.settings.base import Settings
from chalk_log.config.validation import InvalidSettingValueError


class OutputFormat(str, Enum):
    """Rendering strategy applied to every composed event."""

    STRUCTURED = "structured"
    TAGGED_TEXT = "tagged-text"

    @classmethod
    def parse(cls, value: "OutputFormat | str | None") -> "OutputFormat":
        """Resolve *value* to a member, accepting the legacy ``json``/``pp`` names.

        Raises
        ------
        InvalidSettingValueError
            For ``None`` or any unrecognised selector.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalised = value.strip().lower()
            normalised = _LEGACY_NAMES.get(normalised, normalised)
            for member in cls:
                if member.value == normalised:
                    return member
        raise InvalidSettingValueError(
            "output_format",
            value,
            "expected one of 'structured' or 'tagged-text'",
        )


_LEGACY_NAMES = {"json": "structured", "pp": "tagged-text"}


@dataclasses.dataclass
class LayoutSettings(Settings):
    """Ambient configuration read by the layout on every call.

    Loaded from ``CHALK_LOG_*`` environment variables by
    :class:`~chalk_log.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix: dataclasses.ClassVar[str] = "CHALK_LOG"

    output_format: str = OutputFormat.TAGGED_TEXT.value
    tagging_disabled: bool = False
    tag_without_pid: bool = False
    tag_with_timestamp: bool = True

    def _validate(self) -> None:
        OutputFormat.parse(self.output_format)

    def resolve_output_format(self) -> OutputFormat:
        return OutputFormat.parse(self.output_format)


__all__ = ["LayoutSettings", "OutputFormat"]
