"""Shared builders and fixtures for boardview tests."""

import json

import pytest

from boardview.models import (
    BoardSnapshot,
    BoardView,
    CellValue,
    Column,
    Group,
    Item,
    Member,
    StatusOption,
    StatusSettings,
    ViewConfig,
)
from boardview.writer import snapshot_to_dict


def _make_cell(item_id, column_id, **fields):
    """Helper to build a CellValue with only the given typed fields set."""
    if "tags_value" in fields and fields["tags_value"] is not None:
        fields["tags_value"] = tuple(fields["tags_value"])
    return CellValue(id=f"{item_id}_{column_id}", item_id=item_id, column_id=column_id, **fields)


def _make_item(item_id, name, position=0, group_id="group_1", values=None):
    """Helper to build an Item. values maps column id -> typed fields."""
    cells = tuple(_make_cell(item_id, column_id, **fields) for column_id, fields in (values or {}).items())
    return Item(id=item_id, group_id=group_id, name=name, position=position, values=cells)


def _make_group(group_id, name, items=None, position=0, collapsed=False):
    """Helper to build a Group."""
    return Group(id=group_id, name=name, position=position, is_collapsed=collapsed, items=tuple(items or ()))


def _make_column(column_id, name, column_type, position=0, options=None):
    """Helper to build a Column; options are (label, color) pairs for STATUS."""
    settings = None
    if options is not None:
        settings = StatusSettings(options=tuple(StatusOption(label, color) for label, color in options))
    return Column(id=column_id, name=name, type=column_type, position=position, settings=settings)


def _make_board(columns=None, groups=None, members=None, views=None, name="Demo"):
    """Helper to build a BoardSnapshot."""
    return BoardSnapshot(
        workspace_id="workspace_1",
        board_id="board_1",
        board_name=name,
        views=tuple(views or ()),
        columns=tuple(columns or ()),
        groups=tuple(groups or ()),
        members=tuple(members or ()),
    )


def _make_large_board(count, group_id="group_large"):
    """A single group of count items named large_item_N at position N."""
    items = [_make_item(f"large_item_{i}", f"Large item {i}", position=i, group_id=group_id) for i in range(count)]
    return _make_board(groups=[_make_group(group_id, "Large", items)])


def _item_ids(board):
    return [item.id for group in board.groups for item in group.items]


COLUMNS = [
    _make_column("column_text", "Notes", "TEXT", 0),
    _make_column("column_status", "Status", "STATUS", 1, options=[("Not Started", "slate"), ("Working", "amber")]),
    _make_column("column_owner", "Owner", "PERSON", 2),
    _make_column("column_due", "Due Date", "DATE", 3),
    _make_column("column_estimate", "Estimate", "NUMBER", 4),
    _make_column("column_tags", "Tags", "TAGS", 5),
    _make_column("column_done", "Done", "CHECKBOX", 6),
    _make_column("column_url", "Reference URL", "URL", 7),
]


@pytest.fixture
def board():
    """Two items in one group with a value in every column type."""
    item_a = _make_item(
        "item_1",
        "A",
        position=1,
        values={
            "column_status": {"status_value": "Working"},
            "column_owner": {"person_id": "user_1"},
            "column_due": {"date_value": "2026-02-20T00:00:00.000Z"},
            "column_estimate": {"number_value": 8},
            "column_tags": {"tags_value": ["MVP", "Planning"]},
            "column_done": {"checkbox_value": True},
            "column_url": {"url_value": "https://docs.example.com/mvp"},
        },
    )
    item_b = _make_item(
        "item_2",
        "B",
        position=0,
        values={
            "column_status": {"status_value": "Not Started"},
            "column_estimate": {"number_value": 2},
            "column_done": {"checkbox_value": False},
            "column_url": {"url_value": "https://status.example.com/task-b"},
        },
    )
    return _make_board(
        columns=COLUMNS,
        groups=[_make_group("group_1", "Backlog", [item_a, item_b])],
        members=[Member(user_id="user_1", email="ada@example.com", name="Ada Lovelace", role="OWNER")],
        views=[
            BoardView(
                id="view_working",
                name="Working",
                type="TABLE",
                config=ViewConfig(status_value="Working"),
            )
        ],
    )


@pytest.fixture
def snapshot_file(tmp_path, board):
    """The board fixture written to a JSON file."""
    path = tmp_path / "board.json"
    path.write_text(json.dumps(snapshot_to_dict(board)))
    return path
