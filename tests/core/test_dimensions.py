from __future__ import annotations

from datetime import UTC, datetime

import pytest

from tabedit.core.dimensions import apply_dimensions, parse_dimension
from tabedit.core.table import Provenance, Table


@pytest.mark.parametrize(
    ("declaration", "expected"),
    [
        ("25,6", (25, 6)),
        (" 3 , 4 ", (3, 4)),
        ("0,0", (0, 0)),
        ("007,1", (7, 1)),
    ],
)
def test_parse_dimension_valid(declaration: str, expected: tuple[int, int]) -> None:
    assert parse_dimension(declaration) == expected


@pytest.mark.parametrize(
    "declaration",
    [None, "", "25", "1,2,3", "a,2", "2,b", "-1,3", "3,-1", "1.5,2", ",", "+1,2", "1_0,2", "²,1"],
)
def test_parse_dimension_malformed_is_none(declaration: str | None) -> None:
    assert parse_dimension(declaration) is None


def test_apply_dimensions_overrides_without_validation() -> None:
    prov = Provenance(
        source_name="mem.csv", modified_at=datetime(2024, 1, 1, tzinfo=UTC), byte_size=0
    )
    t = Table.from_rows([["a", "b"], ["c", "d"]], prov)

    apply_dimensions(t, 50, 7)

    assert (t.row_count, t.field_count) == (50, 7)
    assert t.rows == [["a", "b"], ["c", "d"]]


def test_apply_dimensions_rejects_negative() -> None:
    prov = Provenance(
        source_name="mem.csv", modified_at=datetime(2024, 1, 1, tzinfo=UTC), byte_size=0
    )
    t = Table.from_rows([], prov)
    with pytest.raises(ValueError):
        apply_dimensions(t, -1, 0)
