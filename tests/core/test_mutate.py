from __future__ import annotations

import copy
from datetime import UTC, datetime

import pytest

from tabedit.core.errors import IndexOutOfBounds
from tabedit.core.mutate import delete_row, modify_field
from tabedit.core.pages import create_pages
from tabedit.core.table import Provenance, Table


def make_table(n_rows: int, n_fields: int = 3) -> Table:
    prov = Provenance(
        source_name="mem.csv", modified_at=datetime(2024, 1, 1, tzinfo=UTC), byte_size=0
    )
    rows = [[f"r{i}c{j}" for j in range(n_fields)] for i in range(n_rows)]
    return Table.from_rows(rows, prov)


def test_delete_row_blanks_in_place() -> None:
    t = make_table(4)
    before = copy.deepcopy(t.rows)

    delete_row(t, 2)

    assert t.rows[2] == ["", "", ""]
    assert t.row_count == 4
    assert len(t.rows) == 4
    # Other rows untouched
    for i in (0, 1, 3):
        assert t.rows[i] == before[i]


def test_delete_row_uses_logical_field_count() -> None:
    t = make_table(3, n_fields=3)
    t.field_count = 5

    delete_row(t, 0)

    assert t.rows[0] == [""] * 5
    assert len(t.rows[1]) == 3


@pytest.mark.parametrize("index", [-1, 4, 100])
def test_delete_row_out_of_bounds_leaves_table_unchanged(index: int) -> None:
    t = make_table(4)
    before = copy.deepcopy(t.rows)

    with pytest.raises(IndexOutOfBounds) as excinfo:
        delete_row(t, index)

    assert excinfo.value.axis == "row"
    assert excinfo.value.index == index
    assert t.rows == before


def test_delete_row_beyond_stored_rows_under_inflated_count() -> None:
    t = make_table(2)
    t.row_count = 10

    with pytest.raises(IndexOutOfBounds):
        delete_row(t, 5)
    assert len(t.rows) == 2


def test_delete_row_respects_deflated_row_count() -> None:
    t = make_table(5)
    t.row_count = 2

    with pytest.raises(IndexOutOfBounds) as excinfo:
        delete_row(t, 3)
    assert excinfo.value.bound == 2


def test_modify_field_changes_exactly_one_field() -> None:
    t = make_table(3)
    before = copy.deepcopy(t.rows)

    modify_field(t, 1, 2, "changed")

    assert t.rows[1][2] == "changed"
    for i, row in enumerate(t.rows):
        for j, value in enumerate(row):
            if (i, j) != (1, 2):
                assert value == before[i][j]
    assert t.row_count == 3
    assert t.field_count == 3


@pytest.mark.parametrize(
    ("row", "field", "axis"),
    [(-1, 0, "row"), (3, 0, "row"), (0, -1, "field"), (0, 3, "field")],
)
def test_modify_field_out_of_bounds(row: int, field: int, axis: str) -> None:
    t = make_table(3)
    before = copy.deepcopy(t.rows)

    with pytest.raises(IndexOutOfBounds) as excinfo:
        modify_field(t, row, field, "x")

    assert excinfo.value.axis == axis
    assert t.rows == before
    assert t.row_count == 3


def test_modify_field_bounds_use_physical_row_width() -> None:
    t = make_table(2, n_fields=2)
    t.field_count = 10

    with pytest.raises(IndexOutOfBounds) as excinfo:
        modify_field(t, 0, 5, "x")
    assert excinfo.value.axis == "field"
    assert excinfo.value.bound == 2

    # A narrower override does not hide physical fields
    t.field_count = 1
    modify_field(t, 0, 1, "ok")
    assert t.rows[0] == ["r0c0", "ok"]


def test_delete_then_modify_scenario() -> None:
    t = make_table(25, n_fields=4)
    pages = create_pages(t, 10)
    assert [(p.start, p.end) for p in pages] == [(0, 10), (10, 20), (20, 25)]

    delete_row(t, 0)
    modify_field(t, 1, 0, "X")

    assert t.rows[0] == ["", "", "", ""]
    assert t.rows[1][0] == "X"
    assert t.row_count == 25
    # Shape-preserving deletion keeps page boundaries valid
    assert create_pages(t, 10) == pages
