"""Observability – LayoutFormatter, the :mod:`logging` adapter.

Lets stdlib loggers emit chalk-log lines::

    handler = logging.StreamHandler()
    handler.terminator = ""          # the layout already ends every line
    handler.setFormatter(LayoutFormatter())
    logging.getLogger().addHandler(handler)

    log = logging.getLogger(__name__)
    log.info("Booting the server on:", {"host": host})
    log.exception("Request failed", {"path": path})

``record.msg`` and ``record.args`` are treated as chalk-log positional
arguments. When they do not classify as such and ``record.msg`` is a string,
the record is taken to be a ``%``-style call (as third-party libraries
make) and its interpolated message is logged instead.
"""
from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from chalk_log.config.settings import LayoutSettings
from chalk_log.kernel.errors import InvalidLeftoverArgumentsError
from chalk_log.kernel.time import Clock
from chalk_log.observability.correlation import ActionContext
from chalk_log.observability.logging.classifier import AssertionHook, classify
from chalk_log.observability.logging.event import Ambient
from chalk_log.observability.logging.layout import Layout
from chalk_log.observability.logging.levels import Level


class LayoutFormatter(logging.Formatter):
    """:class:`logging.Formatter` that delegates to :class:`Layout`.

    Parameters
    ----------
    settings:
        Layout settings; defaults to :class:`LayoutSettings` defaults.
    clock:
        Overrides ``record.created`` as the event time (useful in tests).
    assertion_hook:
        Forwarded to the layout.
    """

    def __init__(
        self,
        settings: LayoutSettings | None = None,
        clock: Clock | None = None,
        assertion_hook: AssertionHook | None = None,
    ) -> None:
        super().__init__()
        self.layout = Layout(settings, assertion_hook)
        self._clock = clock

    def format(self, record: logging.LogRecord) -> str:
        return self.layout.format(self.arguments(record), self.ambient(record))

    def arguments(self, record: logging.LogRecord) -> list[Any]:
        """Return the layout arguments for *record*, interpolating ``%``-style calls."""
        raw = self.raw_arguments(record)
        if not record.args or not isinstance(record.msg, str):
            return raw
        try:
            classify(raw)
        except InvalidLeftoverArgumentsError:
            try:
                return self.interpolated_arguments(record)
            except (TypeError, ValueError, KeyError):
                # Mismatched format arguments; let the layout report the fault.
                return raw
        return raw

    @staticmethod
    def interpolated_arguments(record: logging.LogRecord) -> list[Any]:
        raw: list[Any] = [record.getMessage()]
        if record.exc_info and record.exc_info[1] is not None:
            raw.append(record.exc_info[1])
        return raw

    def ambient(self, record: logging.LogRecord) -> Ambient:
        if self._clock is not None:
            time = self._clock.now()
        else:
            time = datetime.fromtimestamp(record.created, UTC)
        return Ambient(
            time=time,
            level=Level.from_stdlib(record.levelno),
            pid=record.process if record.process is not None else os.getpid(),
            action_id=ActionContext.get(),
        )

    @staticmethod
    def raw_arguments(record: logging.LogRecord) -> list[Any]:
        """Rebuild the call-site arguments from *record*.

        :class:`logging.LogRecord` unwraps a lone mapping argument into
        ``record.args``; it is restored here as the trailing info bag. An
        exception from ``exc_info`` is slotted in before that bag unless the
        call already passed one.
        """
        args = record.args
        raw: list[Any] = [record.msg]
        if isinstance(args, Mapping):
            raw.append(args)
        elif isinstance(args, tuple):
            raw.extend(args)

        exc = record.exc_info[1] if record.exc_info else None
        if exc is not None and not any(isinstance(arg, BaseException) for arg in raw):
            index = len(raw) - 1 if isinstance(raw[-1], Mapping) else len(raw)
            raw.insert(index, exc)
        return raw


__all__ = ["LayoutFormatter"]
