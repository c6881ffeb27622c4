"""Observability – value renderer for ``key=value`` display pairs.

Values are JSON-encoded where possible so that strings, lists and nested
mappings read unambiguously in tagged text. Anything the encoder rejects
(unserialisable objects, NaN, lone surrogates) falls back to ``repr`` and
the pair is marked with ``[JSON-FAILED]`` so operators can see that the
line degraded.
"""
from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any, NamedTuple

from chalk_log.observability.logging.event import RESERVED_KEYS

JSON_FAILED_MARKER = "[JSON-FAILED]"

# Non-numeric simple strings that start with a capital don't need quotes.
_BARE_WORD = re.compile(r'\A"[A-Z]\w*"\Z', re.ASCII)


class Rendered(NamedTuple):
    text: str
    degraded: bool = False


def _dumps(value: Any) -> str:
    encoded = json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
    encoded.encode("utf-8")
    return encoded


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:  # noqa: BLE001
        return object.__repr__(value)


def render_value(value: Any) -> Rendered:
    """Render *value*, reporting whether the ``repr`` fallback was used."""
    try:
        if isinstance(value, Mapping):
            text = _dumps(dict(value))
        elif isinstance(value, (list, tuple)):
            text = _dumps(value)
        else:
            # The encoder output is wrapped in a one-element list and trimmed.
            text = _dumps([value])[1:-1]
    except (TypeError, ValueError, RecursionError, UnicodeError):
        return Rendered(_safe_repr(value), degraded=True)

    if _BARE_WORD.match(text):
        text = text[1:-1]
    return Rendered(text)


def render(value: Any) -> str:
    return render_value(value).text


def json_safe(value: Any) -> Any:
    """Return *value* if it encodes as strict UTF-8 JSON, else its ``repr``."""
    return _safe_repr(value) if render_value(value).degraded else value


def display_key(key: Any, escape_keys: bool = False) -> str:
    """Stringify *key*, prefixing ``_`` to reserved or underscore keys when escaping."""
    key = str(key)
    if escape_keys and (key.startswith("_") or key in RESERVED_KEYS):
        return f"_{key}"
    return key


def display(key: Any, value: Any, escape_keys: bool = False) -> str:
    """Render a single ``key=value`` pair."""
    rendered = render_value(value)
    pair = f"{display_key(key, escape_keys)}={rendered.text}"
    if rendered.degraded:
        pair = f"{pair} {JSON_FAILED_MARKER}"
    return pair


__all__ = [
    "JSON_FAILED_MARKER",
    "Rendered",
    "display",
    "display_key",
    "json_safe",
    "render",
    "render_value",
]
