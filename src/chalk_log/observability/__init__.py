"""Observability – action id correlation and log formatting."""

from chalk_log.observability.correlation import ActionContext
from chalk_log.observability.logging import Ambient, Layout, LayoutFormatter, LayoutLoggerFactory, Level

__all__ = [
    "ActionContext",
    "Ambient",
    "Layout",
    "LayoutFormatter",
    "LayoutLoggerFactory",
    "Level",
]
