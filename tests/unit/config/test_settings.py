"""Unit tests for config settings & validation."""

from __future__ import annotations

import dataclasses
from typing import ClassVar

import pytest

from chalk_log.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    LayoutSettings,
    MissingRequiredSettingError,
    OutputFormat,
    Settings,
)


@dataclasses.dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    token: str
    retries: int = 1


# ---------------------------------------------------------------------------
# LayoutSettings
# ---------------------------------------------------------------------------


class TestLayoutSettings:
    def test_defaults(self) -> None:
        settings = LayoutSettings()
        assert settings.output_format == "tagged-text"
        assert settings.tagging_disabled is False
        assert settings.tag_without_pid is False
        assert settings.tag_with_timestamp is True

    def test_invalid_format_rejected_at_construction(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            LayoutSettings(output_format="xml")
        assert exc_info.value.setting_name == "output_format"

    def test_resolve_output_format(self) -> None:
        assert LayoutSettings(output_format="json").resolve_output_format() is OutputFormat.STRUCTURED

    def test_resolve_after_mutation(self) -> None:
        settings = LayoutSettings()
        settings.output_format = "bogus"
        with pytest.raises(ConfigError):
            settings.resolve_output_format()


class TestOutputFormat:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("structured", OutputFormat.STRUCTURED),
            ("tagged-text", OutputFormat.TAGGED_TEXT),
            ("json", OutputFormat.STRUCTURED),
            ("pp", OutputFormat.TAGGED_TEXT),
            (" JSON ", OutputFormat.STRUCTURED),
            (OutputFormat.TAGGED_TEXT, OutputFormat.TAGGED_TEXT),
        ],
    )
    def test_parse(self, raw: str, expected: OutputFormat) -> None:
        assert OutputFormat.parse(raw) is expected

    @pytest.mark.parametrize("raw", [None, "", "xml", 3])
    def test_parse_invalid(self, raw: object) -> None:
        with pytest.raises(InvalidSettingValueError):
            OutputFormat.parse(raw)  # type: ignore[arg-type]

    def test_error_code(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            OutputFormat.parse("xml")
        assert exc_info.value.code == "invalid_setting_value"


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("OUTPUT_FORMAT", "TAGGING_DISABLED", "TAG_WITHOUT_PID", "TAG_WITH_TIMESTAMP"):
            monkeypatch.delenv(f"CHALK_LOG_{name}", raising=False)
        assert EnvSettingsLoader().load(LayoutSettings) == LayoutSettings()

    def test_loads_output_format(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHALK_LOG_OUTPUT_FORMAT", "structured")
        assert EnvSettingsLoader().load(LayoutSettings).output_format == "structured"

    def test_loads_bool_true(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "True", "1", "yes", "on"):
            monkeypatch.setenv("CHALK_LOG_TAGGING_DISABLED", truthy)
            assert EnvSettingsLoader().load(LayoutSettings).tagging_disabled is True

    def test_loads_bool_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for falsy in ("false", "False", "0", "no", "off"):
            monkeypatch.setenv("CHALK_LOG_TAG_WITH_TIMESTAMP", falsy)
            assert EnvSettingsLoader().load(LayoutSettings).tag_with_timestamp is False

    def test_invalid_format_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHALK_LOG_OUTPUT_FORMAT", "xml")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(LayoutSettings)

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REQ_TOKEN", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_TOKEN"

    def test_coerces_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQ_TOKEN", "t")
        monkeypatch.setenv("REQ_RETRIES", "5")
        assert EnvSettingsLoader().load(RequiredSettings).retries == 5

    def test_bad_int_raises_value_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQ_TOKEN", "t")
        monkeypatch.setenv("REQ_RETRIES", "many")
        with pytest.raises(ValueError):
            EnvSettingsLoader().load(RequiredSettings)
