from __future__ import annotations

import logging
import os
import tempfile

EXPORT_DIR = os.getenv("TABLE_EXPORT_DIR", tempfile.gettempdir())
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Primitive arrays up to this length are joined into one readable cell.
MAX_JOINED_ARRAY_ITEMS = 10


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
