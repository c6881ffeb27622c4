"""Observability – structured log event formatting."""
from chalk_log.observability.logging.levels import Level
from chalk_log.observability.logging.event import (
    RESERVED_KEYS,
    Ambient,
    ClassifiedArguments,
    ErrorInfo,
    LogEvent,
)
from chalk_log.observability.logging.renderer import JSON_FAILED_MARKER, display, render
from chalk_log.observability.logging.classifier import classify, is_error_like
from chalk_log.observability.logging.composer import compose
from chalk_log.observability.logging.formatters import (
    EventFormatter,
    StructuredFormatter,
    TaggedTextFormatter,
    formatter_for,
)
from chalk_log.observability.logging.layout import (
    DOUBLE_FAULT_MARKER,
    SINGLE_FAULT_MARKER,
    TRIPLE_FAULT_MESSAGE,
    FaultTier,
    Layout,
)
from chalk_log.observability.logging.stdlib import LayoutFormatter
from chalk_log.observability.logging.processors import ActionIdProcessor, LayoutRenderer, get_logger
from chalk_log.observability.logging.factory import LayoutLoggerFactory

__all__ = [
    "DOUBLE_FAULT_MARKER",
    "JSON_FAILED_MARKER",
    "RESERVED_KEYS",
    "SINGLE_FAULT_MARKER",
    "TRIPLE_FAULT_MESSAGE",
    "ActionIdProcessor",
    "Ambient",
    "ClassifiedArguments",
    "ErrorInfo",
    "EventFormatter",
    "FaultTier",
    "Layout",
    "LayoutFormatter",
    "LayoutLoggerFactory",
    "LayoutRenderer",
    "Level",
    "LogEvent",
    "StructuredFormatter",
    "TaggedTextFormatter",
    "classify",
    "compose",
    "display",
    "formatter_for",
    "get_logger",
    "is_error_like",
    "render",
]
