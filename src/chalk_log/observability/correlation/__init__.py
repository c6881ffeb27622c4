"""Observability – action id correlation context."""
from chalk_log.observability.correlation.context import ActionContext

__all__ = ["ActionContext"]
