"""Unit tests for structlog processors and LayoutLoggerFactory."""

from __future__ import annotations

import logging
import os
from typing import Any, Iterator

import pytest
import structlog

from chalk_log.config import LayoutSettings
from chalk_log.observability.correlation import ActionContext
from chalk_log.observability.logging import (
    ActionIdProcessor,
    LayoutFormatter,
    LayoutLoggerFactory,
    LayoutRenderer,
    get_logger,
)
from chalk_log.testing.fakes import FakeClock


def _renderer(**settings: Any) -> LayoutRenderer:
    settings.setdefault("tag_with_timestamp", False)
    settings.setdefault("tag_without_pid", True)
    return LayoutRenderer(LayoutSettings(**settings), clock=FakeClock())


# ---------------------------------------------------------------------------
# ActionIdProcessor
# ---------------------------------------------------------------------------


class TestActionIdProcessor:
    def setup_method(self) -> None:
        ActionContext.clear()

    def test_injects_action_id(self) -> None:
        with ActionContext.bound("req-1"):
            result = ActionIdProcessor()(None, "info", {"event": "hi"})
        assert result["action_id"] == "req-1"

    def test_does_not_overwrite(self) -> None:
        with ActionContext.bound("req-1"):
            result = ActionIdProcessor()(None, "info", {"event": "hi", "action_id": "explicit"})
        assert result["action_id"] == "explicit"

    def test_no_context_leaves_dict_untouched(self) -> None:
        assert ActionIdProcessor()(None, "info", {"event": "hi"}) == {"event": "hi"}


# ---------------------------------------------------------------------------
# LayoutRenderer
# ---------------------------------------------------------------------------


class TestLayoutRenderer:
    def test_event_and_info(self) -> None:
        out = _renderer()(None, "info", {"event": "A Message", "key1": "ValueOne"})
        assert out == "A Message: key1=ValueOne"

    def test_no_trailing_newline(self) -> None:
        out = _renderer()(None, "info", {"event": "hi"})
        assert not out.endswith("\n")

    def test_action_id_becomes_tag(self) -> None:
        out = _renderer()(None, "info", {"event": "hi", "action_id": "req-9"})
        assert out == "[req-9] hi"

    def test_exc_info_exception(self) -> None:
        out = _renderer()(None, "error", {"event": "failed", "exc_info": ValueError("Nope")})
        assert out == "failed: error_class=ValueError error=Nope\n  (no backtrace)"

    def test_exc_info_true_reads_current_exception(self) -> None:
        try:
            raise KeyError("Missing")
        except KeyError:
            out = _renderer()(None, "exception", {"event": "failed", "exc_info": True})
        assert out.startswith("failed: error_class=KeyError")

    def test_exc_info_tuple(self) -> None:
        exc = ValueError("Tuple")
        out = _renderer()(None, "error", {"event": "e", "exc_info": (ValueError, exc, None)})
        assert "error=Tuple" in out

    def test_level_key_sets_level(self) -> None:
        out = _renderer(output_format="structured")(None, "info", {"event": "x", "level": "warning"})
        assert '"level":"warn"' in out

    def test_unknown_level_defaults_to_info(self) -> None:
        out = _renderer(output_format="structured")(None, "msg", {"event": "x"})
        assert '"level":"info"' in out

    def test_reserved_keys_escaped(self) -> None:
        out = _renderer()(None, "info", {"event": "x", "pid": 3})
        assert out == "x: _pid=3"

    def test_non_string_event_is_a_fault(self) -> None:
        out = _renderer()(None, "info", {"event": 42})
        assert out.startswith("[Chalk::Log fault: Could not format message]")


# ---------------------------------------------------------------------------
# get_logger / LayoutLoggerFactory
# ---------------------------------------------------------------------------


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestLayoutLoggerFactory:
    def test_installs_layout_formatter(self, restore_logging: None) -> None:
        LayoutLoggerFactory.configure(settings=LayoutSettings())
        handler = logging.getLogger().handlers[0]
        assert isinstance(handler.formatter, LayoutFormatter)
        assert handler.terminator == ""  # type: ignore[attr-defined]

    def test_settings_loaded_from_env(self, restore_logging: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHALK_LOG_OUTPUT_FORMAT", "json")
        settings = LayoutLoggerFactory.configure()
        assert settings.output_format == "json"

    def test_structlog_output(
        self,
        restore_logging: None,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        LayoutLoggerFactory.configure(settings=LayoutSettings(tag_with_timestamp=False))
        with ActionContext.bound("req-3"):
            get_logger("svc").info("Booted", port=80)
        err = capsys.readouterr().err
        assert err == f"[{os.getpid()}|req-3] Booted: port=80\n"

    def test_structlog_level_filtering(
        self,
        restore_logging: None,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        LayoutLoggerFactory.configure(level=logging.WARNING, settings=LayoutSettings())
        get_logger("svc").info("hidden")
        assert capsys.readouterr().err == ""

    def test_get_logger_binds_values(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        LayoutLoggerFactory.configure(
            settings=LayoutSettings(tag_with_timestamp=False, tag_without_pid=True),
        )
        get_logger("svc", request="r1").warning("Slow")
        assert capsys.readouterr().err == 'Slow: request="r1"\n'
