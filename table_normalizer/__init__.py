"""Core logic for Table Normalizer.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- parse CSV, JSON and JSONL inputs into one flat table
- flatten nested JSON into dot-path columns
- filter and sort a loaded table
- export tables back to CSV or JSON
"""

from .errors import EmptyInput, InvalidShape, IoFailure, ParseFailure, TableError, UnknownColumn, UnsupportedFormat
from .models import FileType, Table
from .readers import parse_csv, parse_file, parse_json, parse_jsonl
from .writers import export_csv, export_json

__all__ = [
    "Table",
    "FileType",
    "TableError",
    "IoFailure",
    "ParseFailure",
    "EmptyInput",
    "InvalidShape",
    "UnsupportedFormat",
    "UnknownColumn",
    "parse_csv",
    "parse_json",
    "parse_jsonl",
    "parse_file",
    "export_csv",
    "export_json",
]
