"""Unit tests for kernel time utilities."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from chalk_log.kernel.time import FrozenClock, SystemClock, format_timestamp
from chalk_log.testing.fakes import FakeClock


class TestSystemClock:
    def test_now_returns_utc_aware_datetime(self) -> None:
        result = SystemClock().now()
        assert isinstance(result, datetime)
        assert result.utcoffset() == timedelta(0)


class TestFrozenClock:
    def test_now_is_fixed(self) -> None:
        fixed = datetime(2024, 1, 1, tzinfo=UTC)
        clk = FrozenClock(fixed)
        assert clk.now() == fixed
        assert clk.now() == fixed

    def test_advance(self) -> None:
        clk = FrozenClock(datetime(2024, 1, 1, tzinfo=UTC))
        clk.advance(seconds=1, microseconds=5)
        assert clk.now() == datetime(2024, 1, 1, 0, 0, 1, 5, tzinfo=UTC)

    def test_fake_clock_is_pinned(self) -> None:
        assert FakeClock().now() == datetime(1979, 4, 9, tzinfo=UTC)


class TestFormatTimestamp:
    def test_zero_padded_microseconds(self) -> None:
        assert format_timestamp(datetime(1979, 4, 9, 0, 0, 0, 7)) == "1979-04-09 00:00:00.000007"

    def test_full_precision(self) -> None:
        assert format_timestamp(datetime(2024, 12, 31, 23, 59, 59, 999999)) == "2024-12-31 23:59:59.999999"

    def test_keeps_wall_clock_of_aware_datetime(self) -> None:
        moment = datetime(2024, 6, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(moment) == "2024-06-01 12:00:00.000000"
