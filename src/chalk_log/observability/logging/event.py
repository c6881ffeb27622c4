"""Observability – event value types shared by the layout pipeline."""
from __future__ import annotations

import dataclasses
import os
import traceback
from collections.abc import Mapping
from datetime import datetime
from types import TracebackType
from typing import Any

from chalk_log.kernel.time import Clock, SystemClock, format_timestamp
from chalk_log.observability.correlation import ActionContext
from chalk_log.observability.logging.levels import Level

RESERVED_KEYS: frozenset[str] = frozenset(
    {"message", "time", "level", "meta", "action_id", "pid", "error", "backtrace", "error_class"}
)


def format_frames(tb: TracebackType | None) -> tuple[str, ...] | None:
    """One ``File "...", line N, in func`` string per frame, or ``None`` without a traceback."""
    if tb is None:
        return None
    return tuple(
        f'File "{frame.filename}", line {frame.lineno}, in {frame.name}'
        for frame in traceback.extract_tb(tb)
    )


@dataclasses.dataclass(frozen=True)
class ErrorInfo:
    """Structured error: class name, message text and captured frames."""

    error_class: str
    message: str
    backtrace: tuple[str, ...] | None = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ErrorInfo":
        # str(exc) runs user code and may raise; callers rely on that to escalate.
        return cls(
            error_class=exc.__class__.__name__,
            message=str(exc),
            backtrace=format_frames(getattr(exc, "__traceback__", None)),
        )

    @classmethod
    def coerce(cls, error: Any) -> "ErrorInfo":
        """Convert any error-like value into an :class:`ErrorInfo`."""
        if isinstance(error, cls):
            return error
        if isinstance(error, BaseException):
            return cls.from_exception(error)
        backtrace = getattr(error, "backtrace", None)
        return cls(
            error_class=error.__class__.__name__,
            message=str(error),
            backtrace=tuple(str(frame) for frame in backtrace) if isinstance(backtrace, (list, tuple)) else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_class": self.error_class,
            "message": self.message,
            "backtrace": list(self.backtrace) if self.backtrace is not None else None,
        }


@dataclasses.dataclass(frozen=True)
class Ambient:
    """Context the layout reads once per call: time, level, pid and action id."""

    time: datetime
    level: Level
    pid: int
    action_id: str | None = None

    @classmethod
    def capture(cls, level: Level | str, clock: Clock | None = None) -> "Ambient":
        return cls(
            time=(clock or SystemClock()).now(),
            level=Level.parse(level),
            pid=os.getpid(),
            action_id=ActionContext.get(),
        )


@dataclasses.dataclass(frozen=True)
class ClassifiedArguments:
    """Positional call-site arguments sorted into their roles."""

    message: str | None = None
    error: Any = None
    info: Mapping[Any, Any] | None = None
    meta: Mapping[Any, Any] | None = None


@dataclasses.dataclass(frozen=True)
class LogEvent:
    """Canonical event record; absent fields stay ``None`` and are never emitted."""

    time: datetime
    level: Level
    pid: int
    action_id: Any = None
    message: str | None = None
    meta: Mapping[Any, Any] | None = None
    info: Mapping[Any, Any] | None = None
    error: ErrorInfo | None = None

    @property
    def timestamp(self) -> str:
        return format_timestamp(self.time)

    def as_fields(self) -> dict[str, Any]:
        """Present fields in their stable output order."""
        fields: dict[str, Any] = {
            "time": self.timestamp,
            "level": self.level.value,
            "action_id": self.action_id,
            "message": self.message,
            "meta": dict(self.meta) if self.meta is not None else None,
            "error": self.error.to_dict() if self.error is not None else None,
            "info": dict(self.info) if self.info is not None else None,
            "pid": self.pid,
        }
        return {k: v for k, v in fields.items() if v is not None}


__all__ = [
    "RESERVED_KEYS",
    "Ambient",
    "ClassifiedArguments",
    "ErrorInfo",
    "LogEvent",
    "format_frames",
]
