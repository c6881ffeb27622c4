"""Observability – structlog processors and get_logger helper.

``ActionIdProcessor`` injects the ambient action id into event dicts.
``LayoutRenderer`` is a final processor that renders through :class:`Layout`.
"""
from __future__ import annotations

import sys
from typing import Any

import structlog

from chalk_log.config.settings import LayoutSettings
from chalk_log.kernel.time import Clock, SystemClock
from chalk_log.observability.correlation import ActionContext
from chalk_log.observability.logging.classifier import AssertionHook
from chalk_log.observability.logging.event import Ambient
from chalk_log.observability.logging.layout import Layout
from chalk_log.observability.logging.levels import Level


class ActionIdProcessor:
    """structlog processor that injects the current ``action_id``.

    An ``action_id`` already present in the event dict is left alone.

    Usage::

        import structlog
        from chalk_log.observability.logging.processors import ActionIdProcessor

        structlog.configure(processors=[ActionIdProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        action_id = ActionContext.get()
        if action_id is not None:
            event_dict.setdefault("action_id", action_id)
        return event_dict


class LayoutRenderer:
    """Final structlog processor rendering the event dict with :class:`Layout`.

    ``event`` becomes the message, ``exc_info`` the error, ``level`` (or the
    method name) the severity and ``action_id`` the tag; every other key
    lands in the info bag. The trailing newline is dropped because
    structlog's loggers write their own.
    """

    def __init__(
        self,
        settings: LayoutSettings | None = None,
        clock: Clock | None = None,
        assertion_hook: AssertionHook | None = None,
    ) -> None:
        self.layout = Layout(settings, assertion_hook)
        self._clock = clock or SystemClock()

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> str:  # noqa: ARG002
        fields = dict(event_dict)
        message = fields.pop("event", None)
        error = self._exception(fields.pop("exc_info", None))
        level = self._level(fields.pop("level", method_name))
        action_id = fields.pop("action_id", None)

        raw: list[Any] = []
        if message is not None:
            raw.append(message)
        if error is not None:
            raw.append(error)
        if fields:
            raw.append(fields)

        ambient = Ambient.capture(level, self._clock)
        if action_id is not None:
            ambient = Ambient(time=ambient.time, level=ambient.level, pid=ambient.pid, action_id=action_id)

        text = self.layout.format(raw, ambient)
        return text[:-1] if text.endswith("\n") else text

    @staticmethod
    def _exception(exc_info: Any) -> BaseException | None:
        if isinstance(exc_info, BaseException):
            return exc_info
        if isinstance(exc_info, tuple):
            return exc_info[1]
        if exc_info:
            return sys.exc_info()[1]
        return None

    @staticmethod
    def _level(name: Any) -> Level:
        try:
            return Level.parse(name)
        except ValueError:
            return Level.INFO


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["ActionIdProcessor", "LayoutRenderer", "get_logger"]
