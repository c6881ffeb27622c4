"""Observability – positional argument classifier.

Call sites pass their arguments in one of a few permissive shapes::

    log.error("Something went wrong!")
    log.info("Booting the server on:", {"host": host})
    log.error("Something went wrong", exc)
    log.error({"id": "req-1"}, "Something went wrong", exc, {"attempt": 3})

The classifier scans from the tail and peels off, in order: trailing legacy
``None``/``bool`` values, the info mapping, the error, the message and the
leading metadata mapping. Anything left over is an error.
"""
from __future__ import annotations

import os
from collections.abc import Callable, Mapping, Sequence
from typing import Any
from unittest import mock

from chalk_log.kernel.errors import InvalidLeftoverArgumentsError
from chalk_log.observability.logging.event import ClassifiedArguments, ErrorInfo

AssertionHook = Callable[[bool, str], Any]


def _maybe_assert(hook: AssertionHook | None, condition: bool, message: str) -> None:
    if hook is not None:
        hook(condition, message)


def _is_exception(value: Any, hook: AssertionHook | None) -> bool:  # noqa: ARG001
    return isinstance(value, (BaseException, ErrorInfo))


def _is_exception_double(value: Any, hook: AssertionHook | None) -> bool:
    if not isinstance(value, mock.NonCallableMock):
        return False
    _maybe_assert(
        hook,
        "PYTEST_CURRENT_TEST" in os.environ,
        "Passed a mock even though we're not in the tests",
    )
    return True


ERROR_LIKE: tuple[Callable[[Any, AssertionHook | None], bool], ...] = (
    _is_exception,
    _is_exception_double,
)


def is_error_like(value: Any, hook: AssertionHook | None = None) -> bool:
    """Return ``True`` when any predicate in :data:`ERROR_LIKE` accepts *value*."""
    return any(predicate(value, hook) for predicate in ERROR_LIKE)


def classify(
    raw_args: Sequence[Any] | Any,
    assertion_hook: AssertionHook | None = None,
) -> ClassifiedArguments:
    """Sort *raw_args* into message, error, info and meta.

    Parameters
    ----------
    raw_args:
        The call-site arguments. A non-list value is treated as a single
        argument. The caller's sequence is never mutated.
    assertion_hook:
        Optional ``hook(condition, message)`` that surfaces deprecation
        warnings for legacy trailing ``True``/``False`` arguments.

    Raises
    ------
    InvalidLeftoverArgumentsError
        When values remain after every role has been filled.
    """
    if isinstance(raw_args, (list, tuple)):
        data = list(raw_args)
    else:
        data = [raw_args]

    while data and (data[-1] is None or isinstance(data[-1], bool)):
        if data[-1] is not None:
            _maybe_assert(
                assertion_hook,
                False,
                f"Ignoring deprecated arguments passed to logger: {data!r}",
            )
        data.pop()

    info = data.pop() if data and isinstance(data[-1], Mapping) else None
    error = data.pop() if data and is_error_like(data[-1], assertion_hook) else None
    message = data.pop() if data and isinstance(data[-1], str) else None
    meta = data.pop() if data and isinstance(data[-1], Mapping) else None

    if data:
        raise InvalidLeftoverArgumentsError(data)

    return ClassifiedArguments(message=message, error=error, info=info, meta=meta)


__all__ = ["ERROR_LIKE", "AssertionHook", "classify", "is_error_like"]
