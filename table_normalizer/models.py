from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List


class FileType(str, Enum):
    CSV = "CSV"
    JSON = "JSON"
    JSONL = "JSONL"


@dataclass
class Table:
    """Normalized tabular data: ordered headers plus rows of display strings.

    Every row holds exactly ``len(headers)`` cells; missing values are ``""``.
    """

    headers: List[str]
    rows: List[List[str]] = field(default_factory=list)
    file_name: str = "unknown"
    file_type: FileType = FileType.JSON

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.headers)

    def with_rows(self, rows: List[List[str]]) -> "Table":
        return replace(self, rows=rows)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'headers': list(self.headers),
            'rows': [list(r) for r in self.rows],
            'row_count': self.row_count,
            'file_name': self.file_name,
            'file_type': self.file_type.value,
        }
