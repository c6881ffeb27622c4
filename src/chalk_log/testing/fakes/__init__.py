"""Testing fakes – deterministic clock and hostile values."""
from chalk_log.testing.fakes.clock import FakeClock
from chalk_log.testing.fakes.errors import DoublyHostileError, HostileError, HostileValue

__all__ = ["DoublyHostileError", "FakeClock", "HostileError", "HostileValue"]
