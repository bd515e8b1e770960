"""Filter, sort and paginate a board snapshot for a view."""

import math
from dataclasses import replace

from boardview.models import DATE, BoardSnapshot, Column, Group, Page, PageInfo, ViewConfig
from boardview.view.filters import get_column_by_type, matches_config, resolve_column_ids
from boardview.view.sorting import sort_items


def _keep(group: Group) -> bool:
    """Empty groups are dropped unless collapsed, so their header still renders."""
    return bool(group.items) or group.is_collapsed


def apply_board_view_config(board: BoardSnapshot, config: ViewConfig) -> BoardSnapshot:
    """Filter then sort the items of every group according to config."""
    column_ids = resolve_column_ids(board.columns)

    groups = []
    for group in board.groups:
        matching = [item for item in group.items if matches_config(item, config, column_ids)]
        next_group = replace(group, items=sort_items(matching, config.sort_by, column_ids))
        if _keep(next_group):
            groups.append(next_group)

    return replace(board, groups=tuple(groups))


def count_board_items(board: BoardSnapshot) -> int:
    """Total number of items across all groups."""
    return sum(len(group.items) for group in board.groups)


def get_date_column_id(board: BoardSnapshot) -> str | None:
    """Id of the first DATE column in declared order."""
    column = get_column_by_type(board.columns, DATE)
    return column.id if column else None


def get_date_columns(board: BoardSnapshot) -> list[Column]:
    """All DATE columns ordered by position."""
    return sorted((c for c in board.columns if c.type == DATE), key=lambda c: c.position)


def limit_board_items(board: BoardSnapshot, limit: int) -> BoardSnapshot:
    """Keep at most limit items, consumed group by group in order."""
    remaining = max(0, math.floor(limit))

    if remaining <= 0:
        groups = tuple(replace(g, items=()) for g in board.groups if g.is_collapsed)
        return replace(board, groups=groups)

    groups = []
    for group in board.groups:
        if remaining <= 0:
            next_group = replace(group, items=())
        elif len(group.items) <= remaining:
            remaining -= len(group.items)
            next_group = group
        else:
            next_group = replace(group, items=group.items[:remaining])
            remaining = 0
        if _keep(next_group):
            groups.append(next_group)

    return replace(board, groups=tuple(groups))


def paginate_board_items(board: BoardSnapshot, item_offset: int, item_limit: int) -> Page:
    """Return one offset/limit page of items, preserving group structure.

    The offset is a single counter consumed across groups in order, so
    a page may span several groups. One linear pass over the groups.
    """
    item_offset = max(0, math.floor(item_offset))
    item_limit = max(1, math.floor(item_limit))
    total_items = count_board_items(board)

    remaining_offset = item_offset
    remaining_limit = item_limit
    returned_items = 0
    groups = []

    for group in board.groups:
        size = len(group.items)
        if remaining_limit <= 0:
            items = ()
        elif remaining_offset >= size:
            remaining_offset -= size
            items = ()
        else:
            items = group.items[remaining_offset : remaining_offset + remaining_limit]
            remaining_offset = 0
            remaining_limit -= len(items)

        next_group = replace(group, items=items)
        if _keep(next_group):
            groups.append(next_group)
            returned_items += len(items)

    page_info = PageInfo(
        item_offset=item_offset,
        item_limit=item_limit,
        returned_items=returned_items,
        total_items=total_items,
        has_more=item_offset + returned_items < total_items,
    )
    return Page(snapshot=replace(board, groups=tuple(groups)), page_info=page_info)
