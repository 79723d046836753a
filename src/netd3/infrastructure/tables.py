"""Table adapters — pandas frames, JSON arrays, and files into TableInput.

``as_table`` is the single entry-point check for tabular arguments.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pandas as pd

from netd3.domain.errors import InvalidInputError
from netd3.domain.inputs import TableInput

logger = logging.getLogger(__name__)


def table_from_frame(frame: pd.DataFrame) -> TableInput:
    """Convert a DataFrame to a TableInput, keeping row order.

    Column labels are stringified; cell values are boxed to Python natives.
    """
    split = frame.to_dict(orient="split")
    columns = tuple(str(c) for c in split["columns"])
    rows = tuple(tuple(row) for row in split["data"])
    return TableInput(columns=columns, rows=rows)


def as_table(value: Any, *, label: str = "table") -> TableInput:
    """Check that *value* is tabular and tag it.

    Only TableInput and pandas DataFrames are tabular; lists of records
    must be wrapped with ``TableInput.from_records`` first.
    """
    if isinstance(value, TableInput):
        return value
    if isinstance(value, pd.DataFrame):
        return table_from_frame(value)
    msg = f"{label} must be a table (DataFrame or TableInput), got {type(value).__name__}"
    raise InvalidInputError(msg, argument=label)


def tables_from_json(text: str, array: str) -> TableInput:
    """Read the named array of records from a JSON document.

    Used for documents shaped like ``{"links": [...], "nodes": [...]}``.
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON: {exc}"
        raise InvalidInputError(msg) from exc
    return _table_from_document(document, array)


def _table_from_document(document: Any, array: str) -> TableInput:
    if not isinstance(document, dict) or array not in document:
        msg = f"JSON document has no {array!r} array"
        raise InvalidInputError(msg, array=array)
    records = document[array]
    if not isinstance(records, list):
        msg = f"JSON {array!r} must be an array, got {type(records).__name__}"
        raise InvalidInputError(msg, array=array)
    return TableInput.from_records(records)


def _read_json(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read {path.name}: {exc}"
        raise InvalidInputError(msg, path=str(path)) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in {path.name}: {exc}"
        raise InvalidInputError(msg, path=str(path)) from exc


def load_table(path: Path, *, array: str | None = None) -> TableInput:
    """Load a CSV file, a JSON array of records, or one named array of a JSON object."""
    if path.suffix.lower() == ".json":
        document = _read_json(path)
        if isinstance(document, list):
            table = TableInput.from_records(document)
        elif array is None:
            msg = f"{path.name} holds an object; pass the name of the array to read"
            raise InvalidInputError(msg, path=str(path))
        else:
            table = _table_from_document(document, array)
    else:
        try:
            frame = pd.read_csv(path)
        except (
            OSError,
            UnicodeDecodeError,
            pd.errors.EmptyDataError,
            pd.errors.ParserError,
        ) as exc:
            msg = f"Unreadable CSV {path.name}: {exc}"
            raise InvalidInputError(msg, path=str(path)) from exc
        table = table_from_frame(frame)
    logger.debug("Loaded %d rows x %d columns from %s", len(table), len(table.columns), path)
    return table


def load_hierarchy(path: Path) -> Any:
    """Load a JSON hierarchy document; shape is checked by the normalizer."""
    return _read_json(path)
