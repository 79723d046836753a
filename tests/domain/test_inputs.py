"""Tests for TableInput, HierarchyInput, and the hierarchy shape check."""

from __future__ import annotations

import pytest

from netd3.domain.errors import InvalidInputError, MissingColumnError
from netd3.domain.inputs import HierarchyInput, TableInput, as_hierarchy


class TestTableInput:
    """Tests for TableInput construction and column lookup."""

    def test_from_records_first_seen_column_order(self) -> None:
        table = TableInput.from_records([{"a": 1, "b": 2}, {"b": 3, "c": 4}])
        assert table.columns == ("a", "b", "c")
        assert table.rows == ((1, 2, None), (None, 3, 4))

    def test_from_columns(self) -> None:
        table = TableInput.from_columns({"src": ["A", "A"], "tgt": ["B", "C"]})
        assert table.columns == ("src", "tgt")
        assert table.rows == (("A", "B"), ("A", "C"))
        assert len(table) == 2

    def test_from_columns_rejects_ragged(self) -> None:
        with pytest.raises(InvalidInputError):
            TableInput.from_columns({"src": ["A", "A"], "tgt": ["B"]})

    def test_from_records_rejects_non_mappings(self) -> None:
        with pytest.raises(InvalidInputError):
            TableInput.from_records([("A", "B")])  # type: ignore[list-item]

    def test_row_width_checked(self) -> None:
        with pytest.raises(InvalidInputError):
            TableInput(columns=("a", "b"), rows=((1,),))

    def test_column_by_name(self) -> None:
        table = TableInput.from_columns({"src": ["A", "B"], "tgt": ["B", "C"]})
        assert table.column("tgt") == ["B", "C"]

    def test_column_by_position(self) -> None:
        table = TableInput.from_columns({"src": ["A", "B"], "tgt": ["B", "C"]})
        assert table.column(0) == ["A", "B"]
        assert table.column_name(1) == "tgt"

    def test_missing_column(self) -> None:
        table = TableInput.from_columns({"src": ["A"], "tgt": ["B"]})
        with pytest.raises(MissingColumnError) as exc_info:
            table.column("weight")
        assert exc_info.value.column == "weight"
        assert exc_info.value.available == ("src", "tgt")
        assert exc_info.value.code == "MISSING_COLUMN"

    def test_position_out_of_range(self) -> None:
        table = TableInput.from_columns({"src": ["A"], "tgt": ["B"]})
        with pytest.raises(MissingColumnError):
            table.column(2)

    def test_frozen(self) -> None:
        table = TableInput(columns=("a",))
        with pytest.raises(AttributeError):
            table.columns = ("b",)  # type: ignore[misc]


class TestAsHierarchy:
    """Tests for as_hierarchy()."""

    def test_accepts_mapping(self) -> None:
        tagged = as_hierarchy({"name": "root", "children": []})
        assert isinstance(tagged, HierarchyInput)
        assert tagged.root["name"] == "root"

    def test_passes_tagged_through(self) -> None:
        tagged = HierarchyInput(root={"name": "root"})
        assert as_hierarchy(tagged) is tagged

    @pytest.mark.parametrize(
        "value",
        [
            "root",
            42,
            None,
            [{"name": "root"}],
            TableInput.from_columns({"name": ["root"]}),
        ],
    )
    def test_rejects_non_hierarchies(self, value: object) -> None:
        with pytest.raises(InvalidInputError, match="root must be hierarchical"):
            as_hierarchy(value)
