from __future__ import annotations

import csv
import io
import json
import logging
import os
from typing import Any, Dict, List

from .assembly import align_rows, assemble_table
from .errors import EmptyInput, InvalidShape, ParseFailure, UnsupportedFormat
from .flattening import to_cell
from .io_utils import file_name_from_path, read_text
from .models import FileType, Table
from .records import extract_rows

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant: {name}")


def loads_json(text: str) -> Any:
    """Strict ``json.loads``: NaN and Infinity are rejected like any other bad token."""
    return json.loads(text, parse_constant=_reject_constant)


def table_from_csv_text(text: str, file_name: str = 'unknown') -> Table:
    """Build a table from CSV text whose first record is the header row.

    Blank lines are skipped. A record with a different field count than the
    header row is an error, never padded.
    """
    reader = csv.reader(io.StringIO(text))
    headers: List[str] = []
    rows: List[List[str]] = []
    try:
        for record in reader:
            if not record:
                continue
            if not headers:
                headers = list(record)
                continue
            if len(record) != len(headers):
                raise ParseFailure(
                    f"Failed to read record: line {reader.line_num}: "
                    f"expected {len(headers)} fields, found {len(record)}"
                )
            rows.append(list(record))
    except csv.Error as e:
        raise ParseFailure(f"Failed to read record: line {reader.line_num}: {e}") from e

    if not headers:
        raise EmptyInput("CSV file is empty")

    return Table(headers=headers, rows=rows, file_name=file_name, file_type=FileType.CSV)


def table_from_json_text(text: str, file_name: str = 'unknown') -> Table:
    try:
        doc = loads_json(text)
    except (ValueError, RecursionError) as e:
        raise ParseFailure(f"Failed to parse JSON: {e}") from e

    try:
        return assemble_table(extract_rows(doc), file_name, FileType.JSON)
    except RecursionError as e:
        raise ParseFailure(f"Failed to parse JSON: nesting too deep ({e})") from e


def table_from_jsonl_text(text: str, file_name: str = 'unknown') -> Table:
    """Build a table from newline-delimited JSON objects.

    Columns are the keys of the first object, in order. Later lines are laid
    out along those columns; their extra keys are ignored. Values are not
    flattened: nested objects and arrays show up as JSON text.
    """
    headers: List[str] = []
    records: List[Dict[str, str]] = []

    # Records end at "\n" only; JSON strings may hold U+2028, \x85 and friends raw.
    for line_no, line in enumerate(text.split("\n"), start=1):
        line = line.rstrip("\r")
        if not line.strip():
            continue
        try:
            obj = loads_json(line)
        except (ValueError, RecursionError) as e:
            raise ParseFailure(f"Failed to parse line {line_no}: {e}") from e
        if not isinstance(obj, dict):
            raise InvalidShape(f"JSONL lines must be objects (line {line_no})")
        if not records:
            headers = list(obj.keys())
        try:
            records.append({k: to_cell(v) for k, v in obj.items()})
        except RecursionError as e:
            raise ParseFailure(f"Failed to parse line {line_no}: nesting too deep ({e})") from e

    if not records:
        raise EmptyInput("JSONL file is empty")

    return Table(
        headers=headers,
        rows=align_rows(headers, records),
        file_name=file_name,
        file_type=FileType.JSONL,
    )


def parse_csv(path) -> Table:
    return table_from_csv_text(read_text(path), file_name_from_path(path))


def parse_json(path) -> Table:
    return table_from_json_text(read_text(path), file_name_from_path(path))


def parse_jsonl(path) -> Table:
    return table_from_jsonl_text(read_text(path), file_name_from_path(path))


PARSERS = {
    '.csv': parse_csv,
    '.json': parse_json,
    '.jsonl': parse_jsonl,
}


def parse_file(path) -> Table:
    """Load a CSV, JSON or JSONL file, choosing the parser by extension."""
    ext = os.path.splitext(os.fspath(path))[1].lower()
    parser = PARSERS.get(ext)
    if parser is None:
        raise UnsupportedFormat("Unsupported file type. Please use CSV, JSON, or JSONL files.")
    table = parser(path)
    logger.info("Loaded %s (%s): %d rows, %d columns", table.file_name, table.file_type.value, table.row_count, table.column_count)
    return table
