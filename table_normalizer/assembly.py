from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping

from .flattening import FlatPair, flatten_value
from .models import FileType, Table
from .records import NAME_COLUMN

logger = logging.getLogger(__name__)


def collect_headers(flat_rows: Iterable[List[FlatPair]]) -> List[str]:
    """Union of keys across rows, in order of first appearance."""
    headers: List[str] = []
    seen = set()
    for pairs in flat_rows:
        for key, _ in pairs:
            if key not in seen:
                seen.add(key)
                headers.append(key)
    return headers


def move_name_first(headers: List[str]) -> List[str]:
    if NAME_COLUMN in headers and headers[0] != NAME_COLUMN:
        headers = [NAME_COLUMN] + [h for h in headers if h != NAME_COLUMN]
    return headers


def align_rows(headers: List[str], records: Iterable[Mapping[str, str]]) -> List[List[str]]:
    """Lay each record out along ``headers``; absent keys become empty cells."""
    return [[record.get(h, "") for h in headers] for record in records]


def assemble_table(rows: List[Any], file_name: str, file_type: FileType = FileType.JSON) -> Table:
    flat_rows = [flatten_value("", row) for row in rows]
    headers = move_name_first(collect_headers(flat_rows))
    records: List[Dict[str, str]] = [dict(pairs) for pairs in flat_rows]
    table = Table(
        headers=headers,
        rows=align_rows(headers, records),
        file_name=file_name,
        file_type=file_type,
    )
    logger.debug("Assembled %s: %d rows x %d columns", file_name, table.row_count, table.column_count)
    return table
