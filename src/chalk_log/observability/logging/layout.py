"""Observability – Layout, the fault-contained formatting entry point.

:meth:`Layout.format` turns one call site's arguments into a finished,
newline-terminated string. Bad input must never take the application down,
so formatting runs through descending fault tiers:

``NORMAL``
    classify → compose → format.
``SINGLE_FAULT``
    report the formatting failure itself (class, message, backtrace).
``DOUBLE_FAULT``
    the failure could not be described either; emit a fixed marker line.
``TRIPLE_FAULT``
    even the marker could not be tagged; return a constant string.

Only configuration errors (an unknown output format) escape, because they
mean every line would be lost, not just this one.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from contextvars import ContextVar
from enum import IntEnum
from typing import Any

from chalk_log.config.settings import LayoutSettings
from chalk_log.observability.logging.classifier import AssertionHook, classify
from chalk_log.observability.logging.composer import compose
from chalk_log.observability.logging.event import Ambient, ErrorInfo
from chalk_log.observability.logging.formatters import (
    EventFormatter,
    formatter_for,
    stringify_error,
    tag_lines,
)

_log = logging.getLogger(__name__)

SINGLE_FAULT_MARKER = "[Chalk::Log fault: Could not format message] "
DOUBLE_FAULT_MARKER = "[Chalk::Log fault: Double fault while formatting message]"
TRIPLE_FAULT_MESSAGE = "[Chalk::Log fault: Triple fault while formatting message]\n"

# Set while a fault is being reported so a layout-backed handler never recurses.
_REPORTING_FAULT: ContextVar[bool] = ContextVar("_chalk_log_reporting_fault", default=False)


class FaultTier(IntEnum):
    NORMAL = 0
    SINGLE_FAULT = 1
    DOUBLE_FAULT = 2
    TRIPLE_FAULT = 3

    def escalate(self) -> "FaultTier":
        return FaultTier(min(self + 1, FaultTier.TRIPLE_FAULT))


class Layout:
    """Format call-site arguments into log text.

    Parameters
    ----------
    settings:
        Output format and tagging options. Read on every call, so changes to
        a shared :class:`LayoutSettings` take effect immediately.
    assertion_hook:
        Optional ``hook(condition, message)`` used to surface deprecated
        call shapes.
    """

    def __init__(
        self,
        settings: LayoutSettings | None = None,
        assertion_hook: AssertionHook | None = None,
    ) -> None:
        self.settings = settings or LayoutSettings()
        self._assertion_hook = assertion_hook

    def format(self, raw_args: Sequence[Any] | Any, ambient: Ambient) -> str:
        """Return the formatted text for *raw_args*; never raises for bad input.

        Raises
        ------
        InvalidSettingValueError
            When ``settings.output_format`` is not a known format.
        """
        formatter = formatter_for(self.settings.output_format, self.settings)

        tier = FaultTier.NORMAL
        failure: Exception | None = None
        while tier is not FaultTier.TRIPLE_FAULT:
            try:
                if tier is FaultTier.NORMAL:
                    return self.format_event(raw_args, ambient, formatter)
                if tier is FaultTier.SINGLE_FAULT:
                    return self.format_fault(failure, ambient)  # type: ignore[arg-type]
                return self.format_double_fault(ambient)
            except Exception as exc:  # noqa: BLE001
                if tier is FaultTier.NORMAL:
                    failure = exc
                tier = tier.escalate()
                self._report(tier)
        return TRIPLE_FAULT_MESSAGE

    def format_event(
        self,
        raw_args: Sequence[Any] | Any,
        ambient: Ambient,
        formatter: EventFormatter,
    ) -> str:
        classified = classify(raw_args, self._assertion_hook)
        event = compose(classified, ambient)
        return formatter.format(event)

    def format_fault(self, failure: Exception, ambient: Ambient) -> str:
        body = SINGLE_FAULT_MARKER + stringify_error(ErrorInfo.from_exception(failure)) + "\n"
        return self._tag(body, ambient)

    def format_double_fault(self, ambient: Ambient) -> str:
        return self._tag(DOUBLE_FAULT_MARKER + "\n", ambient)

    def _tag(self, body: str, ambient: Ambient) -> str:
        if self.settings.tagging_disabled:
            return body
        return tag_lines(
            body,
            time=ambient.time,
            pid=ambient.pid,
            action_id=ambient.action_id,
            settings=self.settings,
        )

    def _report(self, tier: FaultTier) -> None:
        if tier is FaultTier.TRIPLE_FAULT or _REPORTING_FAULT.get():
            return
        token = _REPORTING_FAULT.set(True)
        try:
            _log.debug("Log event formatting degraded to %s", tier.name)
        except Exception:  # noqa: BLE001
            pass
        finally:
            _REPORTING_FAULT.reset(token)


__all__ = [
    "DOUBLE_FAULT_MARKER",
    "SINGLE_FAULT_MARKER",
    "TRIPLE_FAULT_MESSAGE",
    "FaultTier",
    "Layout",
]
