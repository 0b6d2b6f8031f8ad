from __future__ import annotations

import re
from functools import cmp_to_key
from typing import Optional

from .errors import UnknownColumn
from .models import Table

# Leading numeric prefix, the part a browser's parseFloat() would read.
_NUMBER_PREFIX = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity)')


def leading_number(text: str) -> Optional[float]:
    m = _NUMBER_PREFIX.match(text or '')
    if not m:
        return None
    return float(m.group(1).replace('Infinity', 'inf'))


def filter_rows(table: Table, term: str) -> Table:
    """Keep the rows where any cell contains ``term`` (case-insensitive)."""
    if not term:
        return table
    needle = term.lower()
    return table.with_rows([row for row in table.rows if any(needle in cell.lower() for cell in row)])


def compare_cells(a: str, b: str) -> int:
    an, bn = leading_number(a), leading_number(b)
    if an is not None and bn is not None:
        return (an > bn) - (an < bn)
    a, b = (a or '').casefold(), (b or '').casefold()
    return (a > b) - (a < b)


def sort_rows(table: Table, column: str, descending: bool = False) -> Table:
    """Stable sort on one column; numeric when both cells start with a number."""
    if column not in table.headers:
        raise UnknownColumn(f"Unknown column: {column}")
    idx = table.headers.index(column)
    rows = sorted(table.rows, key=cmp_to_key(lambda r1, r2: compare_cells(r1[idx], r2[idx])), reverse=descending)
    return table.with_rows(rows)
