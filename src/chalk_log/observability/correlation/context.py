"""Observability – ActionContext, the ambient action id store."""
from __future__ import annotations

import contextlib
from contextvars import ContextVar
from typing import Iterator
from uuid import uuid4

_ACTION_ID: ContextVar[str | None] = ContextVar("_chalk_log_action_id", default=None)


class ActionContext:
    """Ambient action id stored in a ``ContextVar``.

    Each thread and each asyncio task sees its own value, so concurrent
    requests never leak correlation ids into each other's log lines.
    """

    @staticmethod
    def set(action_id: str | None) -> None:
        _ACTION_ID.set(action_id)

    @staticmethod
    def get() -> str | None:
        return _ACTION_ID.get()

    @staticmethod
    def get_or_new() -> str:
        action_id = _ACTION_ID.get()
        if action_id is None:
            action_id = uuid4().hex
            _ACTION_ID.set(action_id)
        return action_id

    @staticmethod
    def clear() -> None:
        _ACTION_ID.set(None)

    @staticmethod
    @contextlib.contextmanager
    def bound(action_id: str | None) -> Iterator[str | None]:
        """Bind *action_id* for the duration of the ``with`` block::

            with ActionContext.bound("req-42"):
                log.info("handled")   # tagged [pid|req-42]
        """
        token = _ACTION_ID.set(action_id)
        try:
            yield action_id
        finally:
            _ACTION_ID.reset(token)


__all__ = ["ActionContext"]
