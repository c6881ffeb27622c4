"""Observability – event composer."""
from __future__ import annotations

from chalk_log.observability.logging.event import Ambient, ClassifiedArguments, ErrorInfo, LogEvent


def compose(classified: ClassifiedArguments, ambient: Ambient) -> LogEvent:
    """Merge classified arguments with the ambient context.

    ``meta["id"]`` wins over the ambient action id. Errors are captured as
    :class:`ErrorInfo` here, which is where a hostile ``__str__`` first runs.
    """
    meta = classified.meta
    action_id = meta.get("id") if meta is not None else None
    if action_id is None:
        action_id = ambient.action_id

    error = ErrorInfo.coerce(classified.error) if classified.error is not None else None

    return LogEvent(
        time=ambient.time,
        level=ambient.level,
        pid=ambient.pid,
        action_id=action_id,
        message=classified.message,
        meta=meta,
        info=classified.info,
        error=error,
    )


__all__ = ["compose"]
