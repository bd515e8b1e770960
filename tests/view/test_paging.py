"""Tests for client-side page loading helpers."""

from urllib.parse import parse_qs, urlsplit

import pytest

from boardview.loader import SnapshotError
from boardview.models import PaginationState
from boardview.view.framework import paginate_board_items
from boardview.view.paging import build_paged_bootstrap_path, merge_paged_snapshot, normalize_bootstrap_response
from boardview.writer import page_to_dict, snapshot_to_dict

from ..conftest import _item_ids, _make_board, _make_group, _make_item, _make_large_board


def test_path_gets_offset_and_limit():
    assert build_paged_bootstrap_path("/api/boards/bootstrap", 200, 100) == (
        "/api/boards/bootstrap?itemOffset=200&itemLimit=100"
    )


def test_path_keeps_other_params_and_replaces_paging():
    path = build_paged_bootstrap_path("/api/boards/bootstrap?boardId=b1&itemOffset=0&itemLimit=5", 10, 5)
    query = parse_qs(urlsplit(path).query)
    assert query == {"boardId": ["b1"], "itemOffset": ["10"], "itemLimit": ["5"]}


def test_normalize_bare_snapshot(board):
    snapshot, state = normalize_bootstrap_response(snapshot_to_dict(board))
    assert snapshot == board
    assert state is None


def test_normalize_envelope():
    page = paginate_board_items(_make_large_board(250), item_offset=100, item_limit=100)
    snapshot, state = normalize_bootstrap_response(page_to_dict(page))
    assert _item_ids(snapshot)[0] == "large_item_100"
    assert state == PaginationState(next_offset=200, item_limit=100, loaded_items=200, total_items=250, has_more=True)


def test_normalize_envelope_without_page_info(board):
    snapshot, state = normalize_bootstrap_response({"snapshot": snapshot_to_dict(board), "pageInfo": None})
    assert snapshot == board
    assert state is None


def test_normalize_rejects_garbage():
    with pytest.raises(SnapshotError):
        normalize_bootstrap_response(["not", "a", "snapshot"])


def test_merging_every_page_rebuilds_the_board():
    board = _make_board(
        groups=[
            _make_group("g1", "One", [_make_item(f"a{i}", f"A{i}", position=i) for i in range(3)], position=0),
            _make_group("g2", "Two", [_make_item(f"b{i}", f"B{i}", position=i) for i in range(4)], position=1),
        ]
    )
    first = paginate_board_items(board, item_offset=0, item_limit=2).snapshot
    merged = first
    for offset in (2, 4, 6):
        merged = merge_paged_snapshot(merged, paginate_board_items(board, item_offset=offset, item_limit=2).snapshot)
    assert merged == board


def test_merge_is_idempotent(board):
    once = merge_paged_snapshot(board, board)
    assert merge_paged_snapshot(once, board) == once
    assert _item_ids(once) == ["item_2", "item_1"]


def test_incoming_item_wins():
    current = _make_board(groups=[_make_group("g", "G", [_make_item("i", "Old name")])])
    incoming = _make_board(groups=[_make_group("g", "G", [_make_item("i", "New name")])])
    merged = merge_paged_snapshot(current, incoming)
    assert [item.name for item in merged.groups[0].items] == ["New name"]


def test_metadata_comes_from_incoming():
    current = _make_board(name="Before", groups=[_make_group("g", "G", [_make_item("i", "I")])])
    incoming = _make_board(name="After", groups=[_make_group("h", "H", [_make_item("j", "J")], position=-1)])
    merged = merge_paged_snapshot(current, incoming)
    assert merged.board_name == "After"
    assert [g.id for g in merged.groups] == ["h", "g"]
    assert _item_ids(merged) == ["j", "i"]
