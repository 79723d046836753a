"""Tagged input types checked once at the construction entry point.

``TableInput`` is an ordered collection of rows with named columns.
``HierarchyInput`` wraps a root node mapping. Conversion from third-party
containers (pandas) lives in :mod:`netd3.infrastructure.tables`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from netd3.domain.errors import InvalidInputError, MissingColumnError


@dataclass(frozen=True)
class TableInput:
    """Row-ordered table with named columns.

    Row order is meaningful: when links are integer-coded, a link's
    source/target is the position of a row in the nodes table.
    """

    columns: tuple[str, ...]
    rows: tuple[tuple[Any, ...], ...] = ()

    def __post_init__(self) -> None:
        width = len(self.columns)
        for i, row in enumerate(self.rows):
            if len(row) != width:
                msg = f"Row {i} has {len(row)} values, expected {width}"
                raise InvalidInputError(msg, row=i)

    def __len__(self) -> int:
        return len(self.rows)

    @classmethod
    def from_records(cls, records: Sequence[Mapping[str, Any]]) -> TableInput:
        """Build a table from row mappings; columns in first-seen order.

        Keys absent from a record become ``None`` in that row.
        """
        columns: dict[str, None] = {}
        for record in records:
            if not isinstance(record, Mapping):
                msg = f"Records must be mappings, got {type(record).__name__}"
                raise InvalidInputError(msg)
            columns.update(dict.fromkeys(record))
        names = tuple(columns)
        rows = tuple(tuple(record.get(name) for name in names) for record in records)
        return cls(columns=names, rows=rows)

    @classmethod
    def from_columns(cls, data: Mapping[str, Sequence[Any]]) -> TableInput:
        """Build a table from equal-length column sequences."""
        names = tuple(data)
        lengths = {len(values) for values in data.values()}
        if len(lengths) > 1:
            msg = "Columns must all have the same length"
            raise InvalidInputError(msg, lengths=sorted(lengths))
        rows = tuple(zip(*(data[name] for name in names), strict=True))
        return cls(columns=names, rows=rows)

    def index_of(self, column: str | int) -> int:
        """Return the position of *column*.

        Names are matched first; an int that is not a column name is taken
        as a 0-based column position.
        """
        if column in self.columns:
            return self.columns.index(column)  # type: ignore[arg-type]
        if isinstance(column, int) and not isinstance(column, bool):
            if 0 <= column < len(self.columns):
                return column
        raise MissingColumnError(column, self.columns)

    def column(self, column: str | int) -> list[Any]:
        """Return the values of one column in row order."""
        idx = self.index_of(column)
        return [row[idx] for row in self.rows]

    def column_name(self, column: str | int) -> str:
        return self.columns[self.index_of(column)]


@dataclass(frozen=True)
class HierarchyInput:
    """Root node of a ``{name, children: [...]}`` tree."""

    root: Mapping[str, Any]


def as_hierarchy(value: Any) -> HierarchyInput:
    """Check that *value* is hierarchy-shaped and tag it.

    Only the top level is checked; children are passed through as given.
    """
    if isinstance(value, HierarchyInput):
        return value
    if isinstance(value, TableInput) or not isinstance(value, Mapping):
        msg = f"root must be hierarchical, got {type(value).__name__}"
        raise InvalidInputError(msg)
    return HierarchyInput(root=value)
