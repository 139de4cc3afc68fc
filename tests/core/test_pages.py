from __future__ import annotations

import math
from datetime import UTC, datetime

import pytest

from tabedit.core.pages import create_pages, page_rows
from tabedit.core.table import Page, Provenance, Table


def make_table(n_rows: int, n_fields: int = 3) -> Table:
    prov = Provenance(
        source_name="mem.csv", modified_at=datetime(2024, 1, 1, tzinfo=UTC), byte_size=0
    )
    rows = [[f"r{i}c{j}" for j in range(n_fields)] for i in range(n_rows)]
    return Table.from_rows(rows, prov)


@pytest.mark.parametrize("n_rows", [0, 1, 9, 10, 11, 25, 100])
@pytest.mark.parametrize("per_page", [1, 3, 10, 50])
def test_pages_cover_row_range_contiguously(n_rows: int, per_page: int) -> None:
    t = make_table(n_rows)

    pages = create_pages(t, per_page)

    assert len(pages) == math.ceil(n_rows / per_page)
    assert all(len(p) <= per_page for p in pages)
    for a, b in zip(pages, pages[1:]):
        assert a.end == b.start
    if pages:
        assert pages[0].start == 0
        assert pages[-1].end == n_rows


def test_example_25_rows_by_10() -> None:
    t = make_table(25)
    pages = create_pages(t, 10)
    assert [(p.start, p.end) for p in pages] == [(0, 10), (10, 20), (20, 25)]
    assert t.pages is pages


def test_zero_page_size_means_ten() -> None:
    a = make_table(37)
    b = make_table(37)
    assert create_pages(a, 0) == create_pages(b, 10)


def test_zero_rows_yield_no_pages() -> None:
    t = make_table(0)
    assert create_pages(t, 5) == []


def test_negative_page_size_rejected() -> None:
    with pytest.raises(ValueError):
        create_pages(make_table(3), -1)


def test_pagination_is_idempotent_and_replaces_previous_pages() -> None:
    t = make_table(23)
    first = list(create_pages(t, 4))
    second = list(create_pages(t, 4))
    assert first == second

    create_pages(t, 10)
    assert [(p.start, p.end) for p in t.pages] == [(0, 10), (10, 20), (20, 23)]


def test_pages_follow_overridden_row_count() -> None:
    t = make_table(5)
    t.row_count = 12

    pages = create_pages(t, 5)

    assert [(p.start, p.end) for p in pages] == [(0, 5), (5, 10), (10, 12)]
    # Stored rows end at 5: later pages read as empty instead of raising
    assert page_rows(t, pages[1]) == []
    assert page_rows(t, pages[2]) == []


def test_page_rows_returns_page_slice() -> None:
    t = make_table(12)
    create_pages(t, 5)
    rows = page_rows(t, t.pages[1])
    assert [r[0] for r in rows] == ["r5c0", "r6c0", "r7c0", "r8c0", "r9c0"]


def test_page_rejects_invalid_bounds() -> None:
    with pytest.raises(ValueError):
        Page(-1, 3)
    with pytest.raises(ValueError):
        Page(5, 4)
    assert len(Page(3, 3)) == 0
