from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from .errors import EmptyInput, InvalidShape

logger = logging.getLogger(__name__)

NAME_COLUMN = "Name"


def count_object_values(doc: Dict[str, Any]) -> int:
    return sum(1 for v in doc.values() if isinstance(v, dict))


def is_dictionary_of_objects(doc: Dict[str, Any]) -> bool:
    k = count_object_values(doc)
    return k > 1 and 2 * k >= len(doc)


def rows_from_named_objects(doc: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Turn ``{"alice": {...}, "bob": {...}}`` into rows with a leading Name column.

    The synthetic Name goes in first and the record's own fields are merged
    over it: a record that carries its own "Name" keeps that value.
    """
    rows: List[Dict[str, Any]] = []
    for key, value in doc.items():
        if not isinstance(value, dict):
            continue
        row: Dict[str, Any] = {NAME_COLUMN: key}
        row.update(value)
        rows.append(row)
    return rows


def find_largest_object_array(doc: Dict[str, Any]) -> Optional[str]:
    """Return the key holding the longest non-empty list of objects.

    Ties go to the key seen first in document order.
    """
    best_key = None
    best_len = 0
    for key, value in doc.items():
        if isinstance(value, list) and value and isinstance(value[0], dict):
            if len(value) > best_len:
                best_key, best_len = key, len(value)
    return best_key


def has_object_array(doc: Dict[str, Any]) -> bool:
    return find_largest_object_array(doc) is not None


def rows_from_largest_array(doc: Dict[str, Any]) -> List[Any]:
    return list(doc[find_largest_object_array(doc)])


def rows_from_single_object(doc: Dict[str, Any]) -> List[Any]:
    return [doc]


Rule = Tuple[str, Callable[[Dict[str, Any]], bool], Callable[[Dict[str, Any]], List[Any]]]

# Evaluated top to bottom; the first matching predicate decides the shape.
OBJECT_RULES: Tuple[Rule, ...] = (
    ('dictionary_of_objects', is_dictionary_of_objects, rows_from_named_objects),
    ('largest_object_array', has_object_array, rows_from_largest_array),
    ('single_object', lambda doc: True, rows_from_single_object),
)


def match_rule(doc: Dict[str, Any]) -> Rule:
    for rule in OBJECT_RULES:
        if rule[1](doc):
            return rule
    raise InvalidShape("No row rule matched the JSON object")


def extract_rows(doc: Any) -> List[Any]:
    """Pick the list of row values out of a parsed JSON document.

    - list root -> the list itself (must not be empty)
    - dict root -> first matching entry of ``OBJECT_RULES``
    - anything else is rejected
    """
    if isinstance(doc, list):
        if not doc:
            raise EmptyInput("JSON array is empty")
        return doc

    if isinstance(doc, dict):
        name, _, action = match_rule(doc)
        rows = action(doc)
        logger.debug("Extracted %d rows using rule %s", len(rows), name)
        return rows

    raise InvalidShape("JSON must be an object or an array of objects")
