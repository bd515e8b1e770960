"""Pure view logic over board snapshots."""

from boardview.view.columns import reorder_columns_by_id
from boardview.view.filters import get_column_by_type, matches_config, resolve_column_ids
from boardview.view.framework import (
    apply_board_view_config,
    count_board_items,
    get_date_column_id,
    get_date_columns,
    limit_board_items,
    paginate_board_items,
)
from boardview.view.grid import is_grid_arrow_key, next_grid_position
from boardview.view.kanban import build_kanban_lanes
from boardview.view.paging import build_paged_bootstrap_path, merge_paged_snapshot, normalize_bootstrap_response
from boardview.view.rows import flatten_visible_rows, has_no_search_results
from boardview.view.search import filter_board_snapshot_by_item_name, filter_groups_by_item_name, get_status_options
from boardview.view.sorting import sort_items
from boardview.view.timeline import build_timeline_entries
from boardview.view.window import get_virtual_window

__all__ = [
    "apply_board_view_config",
    "build_kanban_lanes",
    "build_paged_bootstrap_path",
    "build_timeline_entries",
    "count_board_items",
    "filter_board_snapshot_by_item_name",
    "filter_groups_by_item_name",
    "flatten_visible_rows",
    "get_column_by_type",
    "get_date_column_id",
    "get_date_columns",
    "get_status_options",
    "get_virtual_window",
    "has_no_search_results",
    "is_grid_arrow_key",
    "limit_board_items",
    "matches_config",
    "merge_paged_snapshot",
    "next_grid_position",
    "normalize_bootstrap_response",
    "paginate_board_items",
    "reorder_columns_by_id",
    "resolve_column_ids",
    "sort_items",
]
