"""Observability – severity levels."""
from __future__ import annotations

import logging
from enum import Enum


class Level(str, Enum):
    """Severity levels, in ascending order.

    ``ANN`` ("announce") sits between ``WARN`` and ``ERROR``: it marks
    events an operator should notice even though nothing failed.
    """

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ANN = "ann"
    ERROR = "error"
    FATAL = "fatal"

    @classmethod
    def from_stdlib(cls, levelno: int) -> "Level":
        """Map a :mod:`logging` numeric level onto the closest member at or below it."""
        if levelno >= logging.CRITICAL:
            return cls.FATAL
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        return cls.DEBUG

    @classmethod
    def parse(cls, name: "Level | str") -> "Level":
        """Resolve a level name, accepting stdlib spellings such as ``WARNING``."""
        if isinstance(name, cls):
            return name
        normalised = str(name).strip().lower()
        normalised = _ALIASES.get(normalised, normalised)
        return cls(normalised)


_ALIASES = {
    "warning": "warn",
    "critical": "fatal",
    "exception": "error",
    "announce": "ann",
}


__all__ = ["Level"]
