"""Observability – LayoutLoggerFactory."""
from __future__ import annotations

import logging
import sys

import structlog

from chalk_log.config.settings import EnvSettingsLoader, LayoutSettings
from chalk_log.observability.logging.processors import ActionIdProcessor, LayoutRenderer
from chalk_log.observability.logging.stdlib import LayoutFormatter


class LayoutLoggerFactory:
    """Route both stdlib logging and structlog through :class:`Layout`."""

    @staticmethod
    def configure(level: int = logging.INFO, settings: LayoutSettings | None = None) -> LayoutSettings:
        """Install the layout on the root logger and configure structlog.

        *settings* defaults to ``CHALK_LOG_*`` environment variables. Returns
        the settings in use so callers can adjust tagging at runtime.
        """
        if settings is None:
            settings = EnvSettingsLoader().load(LayoutSettings)

        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.processors.add_log_level,
                ActionIdProcessor(),
                LayoutRenderer(settings),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(level),
            logger_factory=structlog.PrintLoggerFactory(sys.stderr),
            cache_logger_on_first_use=True,
        )

        handler = logging.StreamHandler()
        handler.terminator = ""
        handler.setFormatter(LayoutFormatter(settings))
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)
        return settings


__all__ = ["LayoutLoggerFactory"]
