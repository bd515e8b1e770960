"""Tests for applying view configs, limiting and paginating boards."""

from dataclasses import replace

import pytest

from boardview.models import ViewConfig
from boardview.view.framework import (
    apply_board_view_config,
    count_board_items,
    get_date_column_id,
    get_date_columns,
    limit_board_items,
    paginate_board_items,
)

from ..conftest import _item_ids, _make_board, _make_column, _make_group, _make_item, _make_large_board


def _three_groups(collapsed_empty=True):
    return _make_board(
        groups=[
            _make_group("g1", "One", [_make_item(f"a{i}", f"A{i}", position=i) for i in range(3)], position=0),
            _make_group("g2", "Two", [], position=1, collapsed=collapsed_empty),
            _make_group("g3", "Three", [_make_item(f"b{i}", f"B{i}", position=i) for i in range(4)], position=2),
        ]
    )


def test_apply_filters_and_sorts(board):
    result = apply_board_view_config(board, ViewConfig(status_value="Working", sort_by="name_asc"))
    assert _item_ids(result) == ["item_1"]


def test_apply_empty_config_sorts_by_position(board):
    result = apply_board_view_config(board, ViewConfig())
    assert _item_ids(result) == ["item_2", "item_1"]


def test_apply_is_idempotent(board):
    config = ViewConfig(number_min=1, sort_by="number_desc")
    once = apply_board_view_config(board, config)
    assert apply_board_view_config(once, config) == once


def test_apply_does_not_modify_input(board):
    before = _item_ids(board)
    apply_board_view_config(board, ViewConfig(status_value="Working"))
    assert _item_ids(board) == before


def test_apply_drops_empty_groups_but_keeps_collapsed():
    board = _make_board(
        groups=[
            _make_group("open", "Open", [_make_item("x", "X")]),
            _make_group("shut", "Shut", [_make_item("y", "Y")], collapsed=True),
        ]
    )
    result = apply_board_view_config(board, ViewConfig(status_value="Nothing"))
    assert [g.id for g in result.groups] == ["shut"]
    assert result.groups[0].items == ()


def test_apply_keeps_board_metadata(board):
    result = apply_board_view_config(board, ViewConfig(status_value="Working"))
    assert result.columns == board.columns
    assert result.members == board.members
    assert result.views == board.views


def test_count_board_items():
    assert count_board_items(_three_groups()) == 7
    assert count_board_items(_make_board()) == 0


def test_date_columns():
    board = _make_board(
        columns=[
            _make_column("due", "Due", "DATE", position=5),
            _make_column("start", "Start", "DATE", position=1),
            _make_column("notes", "Notes", "TEXT", position=0),
        ]
    )
    assert get_date_column_id(board) == "due"
    assert [c.id for c in get_date_columns(board)] == ["start", "due"]
    assert get_date_column_id(_make_board()) is None


def test_limit_spans_groups():
    result = limit_board_items(_three_groups(), 5)
    assert _item_ids(result) == ["a0", "a1", "a2", "b0", "b1"]
    assert [g.id for g in result.groups] == ["g1", "g2", "g3"]


def test_limit_drops_exhausted_groups():
    result = limit_board_items(_three_groups(collapsed_empty=False), 2)
    assert _item_ids(result) == ["a0", "a1"]
    assert [g.id for g in result.groups] == ["g1"]


def test_limit_zero_keeps_only_collapsed_headers():
    result = limit_board_items(_three_groups(), 0)
    assert [g.id for g in result.groups] == ["g2"]
    assert count_board_items(result) == 0


def test_limit_above_total_is_unchanged():
    board = _three_groups()
    assert _item_ids(limit_board_items(board, 100)) == _item_ids(board)


def test_paginate_last_partial_page():
    page = paginate_board_items(_make_large_board(5200), item_offset=4900, item_limit=400)
    ids = _item_ids(page.snapshot)
    assert page.page_info.returned_items == 300
    assert page.page_info.total_items == 5200
    assert ids[0] == "large_item_4900"
    assert ids[-1] == "large_item_5199"
    assert page.page_info.has_more is False


def test_paginate_first_page_has_more():
    page = paginate_board_items(_make_large_board(250), item_offset=0, item_limit=100)
    assert page.page_info.returned_items == 100
    assert page.page_info.has_more is True
    assert _item_ids(page.snapshot)[-1] == "large_item_99"


def test_paginate_spans_groups():
    page = paginate_board_items(_three_groups(), item_offset=2, item_limit=3)
    assert _item_ids(page.snapshot) == ["a2", "b0", "b1"]
    assert [g.id for g in page.snapshot.groups] == ["g1", "g2", "g3"]
    assert page.page_info.has_more is True


@pytest.mark.parametrize("limit", [1, 2, 3, 7])
def test_pages_cover_every_item_once(limit):
    board = _three_groups()
    seen = []
    offset = 0
    while True:
        page = paginate_board_items(board, item_offset=offset, item_limit=limit)
        seen.extend(_item_ids(page.snapshot))
        offset += page.page_info.returned_items
        if not page.page_info.has_more:
            break
    assert seen == _item_ids(board)


def test_paginate_offset_past_end_is_empty():
    page = paginate_board_items(_three_groups(collapsed_empty=False), item_offset=50, item_limit=10)
    assert page.page_info.returned_items == 0
    assert page.page_info.has_more is False
    assert page.snapshot.groups == ()


def test_paginate_clamps_offset_and_limit():
    page = paginate_board_items(_three_groups(), item_offset=-4, item_limit=0)
    assert page.page_info.item_offset == 0
    assert page.page_info.item_limit == 1
    assert _item_ids(page.snapshot) == ["a0"]


def test_paginate_keeps_collapsed_empty_group():
    board = _three_groups()
    board = replace(board, groups=(board.groups[1],))
    page = paginate_board_items(board, item_offset=0, item_limit=10)
    assert [g.id for g in page.snapshot.groups] == ["g2"]
    assert page.page_info.total_items == 0
    assert page.page_info.has_more is False
