"""Status options and item-name search."""

from dataclasses import replace
from typing import Sequence

from boardview.models import BoardSnapshot, Group, StatusOption
from boardview.palette import DEFAULT_STATUS_OPTIONS


def get_status_options(raw: Sequence[StatusOption] | None) -> tuple[StatusOption, ...]:
    """Return the configured options, or the default palette if there are none."""
    if not raw:
        return DEFAULT_STATUS_OPTIONS
    return tuple(raw)


def filter_groups_by_item_name(groups: tuple[Group, ...], query: str) -> tuple[Group, ...]:
    """Keep items whose name contains query, case-insensitively.

    A blank query returns groups itself, unchanged. Otherwise groups
    without any matching item are dropped.
    """
    needle = query.strip().lower()
    if not needle:
        return groups

    result = []
    for group in groups:
        items = tuple(item for item in group.items if needle in item.name.lower())
        if items:
            result.append(replace(group, items=items))
    return tuple(result)


def filter_board_snapshot_by_item_name(board: BoardSnapshot, query: str) -> BoardSnapshot:
    """Apply filter_groups_by_item_name to a whole snapshot."""
    groups = filter_groups_by_item_name(board.groups, query)
    if groups is board.groups:
        return board
    return replace(board, groups=groups)
