"""CLI argument parser and dispatch for boardview."""

import argparse

from boardview.cli._common import item_limit_arg, item_offset_arg
from boardview.cli.board import board_search, board_summary
from boardview.cli.export import export_csv
from boardview.cli.page import page_merge, page_next
from boardview.cli.view import view_apply, view_kanban, view_timeline, view_window
from boardview.models import SORT_OPTIONS


def _checkbox_arg(value: str) -> bool:
    if value == "checked":
        return True
    if value == "unchecked":
        return False
    raise argparse.ArgumentTypeError("expected 'checked' or 'unchecked'")


def _add_view_selection(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--view", help="Start from a saved view's config (view ID)")
    parser.add_argument("--config", help="YAML or JSON view config file")


def _add_filters(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--status", help="Only items with this status")
    parser.add_argument("--person", help="Only items assigned to this user ID")
    parser.add_argument("--date-from", dest="date_from", help="Earliest date (ISO 8601)")
    parser.add_argument("--date-to", dest="date_to", help="Latest date (ISO 8601)")
    parser.add_argument("--number-min", dest="number_min", type=float, help="Minimum number")
    parser.add_argument("--number-max", dest="number_max", type=float, help="Maximum number")
    parser.add_argument("--tag", help="Only items with a tag containing this text")
    parser.add_argument("--checkbox", type=_checkbox_arg, help="'checked' or 'unchecked'")
    parser.add_argument("--url", help="Only items whose URL contains this text")
    parser.add_argument("--sort-by", dest="sort_by", choices=SORT_OPTIONS, help="Sort order")


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")

    parser = argparse.ArgumentParser(
        prog="boardview",
        description="Filter, sort, paginate and export board snapshots",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- board ---
    board_p = nouns.add_parser("board", help="Board operations", parents=[common])
    board_verbs = board_p.add_subparsers(dest="verb")

    board_summary_p = board_verbs.add_parser("summary", help="Show board summary", parents=[common])
    board_summary_p.add_argument("snapshot", help="Snapshot file (JSON or YAML, - for stdin)")
    board_summary_p.set_defaults(func=board_summary)

    board_search_p = board_verbs.add_parser("search", help="Find items by name", parents=[common])
    board_search_p.add_argument("snapshot", help="Snapshot file")
    board_search_p.add_argument("query", help="Text to look for in item names")
    board_search_p.set_defaults(func=board_search)

    # --- view ---
    view_p = nouns.add_parser("view", help="View operations", parents=[common])
    view_verbs = view_p.add_subparsers(dest="verb")

    apply_p = view_verbs.add_parser("apply", help="Filter, sort and paginate items", parents=[common])
    apply_p.add_argument("snapshot", help="Snapshot file")
    _add_view_selection(apply_p)
    _add_filters(apply_p)
    apply_p.add_argument("--item-offset", dest="item_offset", type=item_offset_arg, help="First item to return")
    apply_p.add_argument("--item-limit", dest="item_limit", type=item_limit_arg, help="Items per page (max 1000)")
    apply_p.set_defaults(func=view_apply)

    kanban_p = view_verbs.add_parser("kanban", help="Group items into status lanes", parents=[common])
    kanban_p.add_argument("snapshot", help="Snapshot file")
    kanban_p.set_defaults(func=view_kanban)

    timeline_p = view_verbs.add_parser("timeline", help="Lay items out on a timeline", parents=[common])
    timeline_p.add_argument("snapshot", help="Snapshot file")
    _add_view_selection(timeline_p)
    timeline_p.add_argument("--start-column", dest="start_column", help="Start DATE column ID")
    timeline_p.add_argument("--end-column", dest="end_column", help="End DATE column ID")
    timeline_p.set_defaults(func=view_timeline)

    window_p = view_verbs.add_parser("window", help="Rows visible at a scroll offset", parents=[common])
    window_p.add_argument("snapshot", help="Snapshot file")
    window_p.add_argument("--scroll-top", dest="scroll_top", type=float, default=0, help="Scroll offset (default: 0)")
    window_p.add_argument(
        "--viewport-height", dest="viewport_height", type=float, default=600, help="Viewport height (default: 600)"
    )
    window_p.add_argument("--row-height", dest="row_height", type=float, default=40, help="Row height (default: 40)")
    window_p.add_argument("--overscan", type=int, default=5, help="Extra rows above and below (default: 5)")
    window_p.set_defaults(func=view_window)

    # --- page ---
    page_p = nouns.add_parser("page", help="Client pagination helpers", parents=[common])
    page_verbs = page_p.add_subparsers(dest="verb")

    merge_p = page_verbs.add_parser("merge", help="Merge a fetched page into a snapshot", parents=[common])
    merge_p.add_argument("current", help="Snapshot loaded so far")
    merge_p.add_argument("incoming", help="Newly fetched page (snapshot or envelope)")
    merge_p.set_defaults(func=page_merge)

    next_p = page_verbs.add_parser("next", help="Next page request from a response", parents=[common])
    next_p.add_argument("response", help="Bootstrap response file")
    next_p.add_argument("--base-path", dest="base_path", default="/api/boards/bootstrap", help="Request path")
    next_p.set_defaults(func=page_next)

    # --- export ---
    export_p = nouns.add_parser("export", help="Export operations", parents=[common])
    export_verbs = export_p.add_subparsers(dest="verb")

    csv_p = export_verbs.add_parser("csv", help="Export items as CSV", parents=[common])
    csv_p.add_argument("snapshot", help="Snapshot file")
    csv_p.add_argument("-o", "--output", help="Output file or directory (default: stdout)")
    csv_p.set_defaults(func=export_csv)

    return parser
