"""Shared helpers for command-line scripts (console logging, tabular output)."""

from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List

from congress.models import Record


def _now() -> str:
    """Return a short UTC timestamp for log lines."""
    return datetime.now(timezone.utc).strftime("%H:%M:%S")


def log_header(title: str) -> None:
    """Print a standardized header block for console output."""
    print("\n" + "=" * 60, file=sys.stderr)
    print(title, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


def log_step(message: str) -> None:
    """Print a single timestamped log line."""
    print(f"[{_now()}] {message}", file=sys.stderr)


def records_to_rows(records: Iterable[Record]) -> List[Dict[str, Any]]:
    """
    Flatten records into one dict per row for CSV or DataFrame output.

    Nested lists (roles, committees) are serialized to a JSON string so
    every cell holds a scalar.
    """
    rows = []
    for record in records:
        row = record.to_dict()
        for key, value in row.items():
            if isinstance(value, list):
                row[key] = json.dumps(value)
        rows.append(row)
    return rows
