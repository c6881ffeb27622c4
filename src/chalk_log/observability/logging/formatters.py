"""Observability – output formatters for composed events.

Two independent strategies share the same :class:`LogEvent` input:

* :class:`StructuredFormatter` — one JSON object per line, rendered with
  structlog's :class:`~structlog.processors.JSONRenderer`.
* :class:`TaggedTextFormatter` — human-readable text where every line
  carries a ``[pid|action_id]`` tag (optionally preceded by a timestamp).
"""
from __future__ import annotations

import abc
from collections.abc import Mapping
from datetime import datetime
from typing import Any

import structlog

from chalk_log.config.settings import LayoutSettings, OutputFormat
from chalk_log.kernel.time import format_timestamp
from chalk_log.observability.logging.event import ErrorInfo, LogEvent
from chalk_log.observability.logging.renderer import display, json_safe

NO_BACKTRACE = "(no backtrace)"


def format_backtrace(frames: tuple[str, ...] | list[str] | None) -> str:
    """Indent each frame by two spaces, one frame per line."""
    return "\n".join(f"  {frame}" for frame in (frames or (NO_BACKTRACE,)))


def stringify_error(error: ErrorInfo, message: str | None = None) -> str:
    prefix = f"{message} " if message is not None else ""
    return (
        f"{prefix}{display('error_class', error.error_class)} "
        f"{display('error', error.message)}\n"
        f"{format_backtrace(error.backtrace)}"
    )


def tag_lines(
    body: str,
    *,
    time: datetime,
    pid: int,
    action_id: Any,
    settings: LayoutSettings,
) -> str:
    """Prefix every line of *body* with the pid/action-id tag.

    Trailing blank lines are dropped; the result always ends in exactly one
    newline.
    """
    tags: list[str] = []
    if not settings.tag_without_pid:
        tags.append(str(pid))
    if action_id is not None:
        tags.append(str(action_id))

    prefix = f"[{'|'.join(tags)}] " if tags else ""
    if settings.tag_with_timestamp:
        prefix = f"[{format_timestamp(time)}] {prefix}"

    lines = body.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    return "".join(f"{prefix}{line}\n" for line in lines or [""])


class EventFormatter(abc.ABC):
    """Port: render a composed :class:`LogEvent` into its final text."""

    def __init__(self, settings: LayoutSettings) -> None:
        self._settings = settings

    @abc.abstractmethod
    def format(self, event: LogEvent) -> str: ...


class StructuredFormatter(EventFormatter):
    """Serialise the present fields as a single JSON line.

    Info and meta keys are emitted as-is: the JSON object already keeps them
    apart from the reserved top-level fields. Output is strict JSON that
    encodes as UTF-8; values that would break that (NaN, infinities, lone
    surrogates) are replaced by their ``repr``.
    """

    def __init__(self, settings: LayoutSettings) -> None:
        super().__init__(settings)
        self._renderer = structlog.processors.JSONRenderer(
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        )

    def format(self, event: LogEvent) -> str:
        fields = event.as_fields()
        try:
            rendered = self._render(event, fields)
        except (ValueError, UnicodeError):
            rendered = self._render(event, {key: _json_safe_field(value) for key, value in fields.items()})
        return rendered + "\n"

    def _render(self, event: LogEvent, fields: dict[str, Any]) -> str:
        rendered = self._renderer(None, event.level.value, fields)
        rendered.encode("utf-8")
        return rendered


def _json_safe_field(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {json_safe(key): json_safe(item) for key, item in value.items()}
    return json_safe(value)


class TaggedTextFormatter(EventFormatter):
    """Render ``message: key=value ... error_class=... error=...`` plus backtrace."""

    def build_message(self, event: LogEvent) -> str:
        message = event.message
        if message is not None and (event.error is not None or event.info is not None):
            message = f"{message}:"

        if event.info is not None:
            addition = " ".join(
                display(key, value, escape_keys=True) for key, value in event.info.items()
            )
            message = f"{message} {addition}" if message is not None else addition

        if event.error is not None:
            message = stringify_error(event.error, message)

        return message or ""

    def format(self, event: LogEvent) -> str:
        body = self.build_message(event).rstrip("\n") + "\n"
        if self._settings.tagging_disabled:
            return body
        return tag_lines(
            body,
            time=event.time,
            pid=event.pid,
            action_id=event.action_id,
            settings=self._settings,
        )


_FORMATTERS: dict[OutputFormat, type[EventFormatter]] = {
    OutputFormat.STRUCTURED: StructuredFormatter,
    OutputFormat.TAGGED_TEXT: TaggedTextFormatter,
}


def formatter_for(output_format: OutputFormat | str, settings: LayoutSettings) -> EventFormatter:
    """Return the strategy for *output_format*.

    Raises
    ------
    InvalidSettingValueError
        When the selector is not a known :class:`OutputFormat`.
    """
    return _FORMATTERS[OutputFormat.parse(output_format)](settings)


__all__ = [
    "NO_BACKTRACE",
    "EventFormatter",
    "StructuredFormatter",
    "TaggedTextFormatter",
    "format_backtrace",
    "formatter_for",
    "stringify_error",
    "tag_lines",
]
