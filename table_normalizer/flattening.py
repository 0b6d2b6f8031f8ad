from __future__ import annotations

import json
from typing import Any, List, Tuple

from .config import MAX_JOINED_ARRAY_ITEMS

FlatPair = Tuple[str, str]


def is_scalar(value: Any) -> bool:
    return not isinstance(value, (dict, list))


def to_json_text(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(',', ':'))


def to_cell(value: Any) -> str:
    """Render one JSON value as a display string.

    Strings are returned unquoted, booleans as ``true``/``false``, null as an
    empty string, numbers and containers as their JSON text.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return to_json_text(value)


def join_array(values: List[Any]) -> str:
    """Join a short list of scalars into one cell.

    Inside a joined list null is written as ``null`` rather than dropped, so the
    element count stays visible.
    """
    return ", ".join(v if isinstance(v, str) else to_json_text(v) for v in values)


def flatten_value(prefix: str, value: Any) -> List[FlatPair]:
    """Reduce a JSON value tree into ``(dotted.key, text)`` pairs.

    Objects recurse key by key in insertion order; every other value produces a
    single pair at ``prefix``. Short primitive arrays are joined with ``", "``,
    anything else array-shaped is kept as compact JSON text.
    """
    if isinstance(value, dict):
        pairs: List[FlatPair] = []
        for k, v in value.items():
            key = f"{prefix}.{k}" if prefix else str(k)
            pairs.extend(flatten_value(key, v))
        return pairs

    if isinstance(value, list):
        if len(value) <= MAX_JOINED_ARRAY_ITEMS and all(is_scalar(v) for v in value):
            return [(prefix, join_array(value))]
        return [(prefix, to_json_text(value))]

    return [(prefix, to_cell(value))]
