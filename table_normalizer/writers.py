from __future__ import annotations

import csv
import json
import logging
from typing import Dict, List, Sequence

from .errors import IoFailure

logger = logging.getLogger(__name__)


def rows_to_records(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> List[Dict[str, str]]:
    """Zip each row with the headers into one flat object (no un-flattening)."""
    return [dict(zip(headers, row)) for row in rows]


def export_csv(path, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    try:
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(headers)
            writer.writerows(rows)
    except OSError as e:
        raise IoFailure(f"Failed to create CSV file: {e}") from e

    logger.info("Exported %d rows to %s", len(rows), path)
    return f"Successfully exported to {path}"


def export_json(path, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    records = rows_to_records(headers, rows)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(records, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise IoFailure(f"Failed to write file: {e}") from e

    logger.info("Exported %d rows to %s", len(rows), path)
    return f"Successfully exported to {path}"
