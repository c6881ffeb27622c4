"""Kernel time – Clock port + implementations."""
from chalk_log.kernel.time.clock import Clock, FrozenClock, SystemClock, format_timestamp

__all__ = ["Clock", "FrozenClock", "SystemClock", "format_timestamp"]
