from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import gradio as gr

from .config import EXPORT_DIR
from .errors import TableError
from .io_utils import resolve_path
from .models import Table
from .readers import parse_file
from .view import filter_rows, sort_rows
from .writers import export_csv, export_json

logger = logging.getLogger(__name__)

SORT_NONE = "(none)"
SORT_DIRECTIONS = ["Ascending", "Descending"]
EXPORT_FORMATS = ["CSV", "JSON"]


def table_to_grid(table: Optional[Table]) -> Dict[str, Any]:
    if table is None:
        return {"headers": [], "data": []}
    return {"headers": list(table.headers), "data": [list(r) for r in table.rows]}


def describe_table(table: Optional[Table], view: Optional[Table] = None) -> str:
    if table is None:
        return ""
    shown = view.row_count if view is not None else table.row_count
    rows = f"{shown:,}" if shown == table.row_count else f"{shown:,} of {table.row_count:,}"
    return f"File: {table.file_name} | Type: {table.file_type.value} | Rows: {rows} | Columns: {table.column_count}"


def load_table_handler(file_obj):
    """Parse an uploaded file and reset search and sort controls."""
    empty_sort = gr.update(choices=[SORT_NONE], value=SORT_NONE)
    if file_obj is None:
        return None, None, table_to_grid(None), "", empty_sort, "", "No file uploaded."

    try:
        table = parse_file(resolve_path(file_obj))
    except TableError as e:
        logger.warning("Load failed: %s", e)
        return None, None, table_to_grid(None), "", empty_sort, "", str(e)

    sort_choices = gr.update(choices=[SORT_NONE] + list(table.headers), value=SORT_NONE)
    status = f"Successfully loaded {table.file_name}. Found {table.row_count} rows and {table.column_count} columns."
    return table, table, table_to_grid(table), describe_table(table), sort_choices, "", status


def build_view(table: Table, search_term: str = "", sort_column: Optional[str] = None, sort_direction: str = "Ascending") -> Table:
    view = filter_rows(table, search_term or "")
    if sort_column and sort_column != SORT_NONE:
        view = sort_rows(view, sort_column, descending=(sort_direction == "Descending"))
    return view


def update_view_handler(table: Optional[Table], search_term: str, sort_column: str, sort_direction: str):
    """Re-derive the displayed rows from the loaded table, search term and sort."""
    if table is None:
        return None, table_to_grid(None), "", "No data loaded."

    try:
        view = build_view(table, search_term, sort_column, sort_direction)
    except TableError as e:
        return table, table_to_grid(table), describe_table(table), str(e)

    return view, table_to_grid(view), describe_table(table, view), ""


def export_table_handler(table: Optional[Table], view: Optional[Table], output_format: str, file_name: str):
    """Write the rows currently on screen, under the loaded headers."""
    if table is None:
        return None, "No data loaded."
    if view is None:
        view = table

    if not file_name or not file_name.strip():
        file_name = "exported_data"
    file_name = os.path.basename(file_name.strip()) or "exported_data"

    ext = f".{output_format.lower()}"
    if not file_name.lower().endswith(ext):
        file_name += ext

    path = os.path.join(EXPORT_DIR, file_name)
    writer = export_csv if output_format == "CSV" else export_json

    try:
        message = writer(path, table.headers, view.rows)
    except TableError as e:
        logger.warning("Export failed: %s", e)
        return None, f"Export failed: {e}"

    return path, message
