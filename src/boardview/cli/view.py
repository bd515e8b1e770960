"""Handlers for 'boardview view' commands."""

import logging
import time

from rich.text import Text

from boardview.cli._common import (
    DEFAULT_ITEM_LIMIT,
    build_view_config,
    console,
    load_snapshot_or_die,
    output_json,
)
from boardview.palette import hex_for_color
from boardview.sampling import sample_pagination
from boardview.view.framework import apply_board_view_config, paginate_board_items
from boardview.view.kanban import build_kanban_lanes
from boardview.view.rows import flatten_visible_rows
from boardview.view.timeline import build_timeline_entries
from boardview.view.window import get_virtual_window
from boardview.writer import envelope_to_dict, lane_to_dict, snapshot_to_dict, timeline_to_dict

logger = logging.getLogger(__name__)

BAR_WIDTH = 40


def _log_event(event: str, properties: dict) -> None:
    logger.info("%s %s", event, properties)


def _paginate_requested(args) -> bool:
    return args.item_offset is not None or args.item_limit is not None


def view_apply(args) -> int:
    """Filter and sort the board, optionally returning one page."""
    started_at_ms = int(time.time() * 1000)
    board = load_snapshot_or_die(args.snapshot, args.json)
    config = build_view_config(board, args)
    result = apply_board_view_config(board, config)

    page_info = None
    if _paginate_requested(args):
        page = paginate_board_items(
            result,
            item_offset=args.item_offset or 0,
            item_limit=args.item_limit or DEFAULT_ITEM_LIMIT,
        )
        result, page_info = page.snapshot, page.page_info

    if args.json:
        if page_info is None:
            output_json(snapshot_to_dict(result))
        else:
            payload = envelope_to_dict(result, page_info)
            sample_pagination(payload, "view apply", started_at_ms, observer=_log_event)
            output_json(payload)
        return 0

    for g in result.groups:
        collapsed = "  (collapsed)" if g.is_collapsed else ""
        print(f"{g.id}  {g.name}{collapsed}")
        for item in g.items:
            print(f"  {item.id}  {item.name}")
    if page_info is not None and page_info.returned_items == 0:
        print(f"no items at offset {page_info.item_offset} of {page_info.total_items}")
    elif page_info is not None:
        last = page_info.item_offset + page_info.returned_items
        more = "  (more)" if page_info.has_more else ""
        print(f"items {page_info.item_offset + 1}-{last} of {page_info.total_items}{more}")
    return 0


def view_kanban(args) -> int:
    """Show items bucketed into status lanes."""
    board = load_snapshot_or_die(args.snapshot, args.json)
    lanes = build_kanban_lanes(board)

    if args.json:
        output_json([lane_to_dict(lane) for lane in lanes])
        return 0

    if not lanes:
        print("board has no status column")
        return 0

    out = console()
    for lane in lanes:
        header = Text(f" {lane.label} ", style=f"bold on {hex_for_color(lane.color)}")
        header.append(f" {len(lane.items)}")
        out.print(header)
        for item in lane.items:
            out.print(f"  {item.id}  {item.name}")
    return 0


def _bar(offset: float | None, span: float | None) -> Text:
    """A fixed-width text bar for a timeline entry."""
    if offset is None or span is None:
        return Text(" " * BAR_WIDTH)
    start = min(BAR_WIDTH - 1, round(offset / 100 * BAR_WIDTH))
    width = max(1, round(span / 100 * BAR_WIDTH))
    width = min(width, BAR_WIDTH - start)
    bar = Text(" " * start)
    bar.append("█" * width, style="cyan")
    bar.append(" " * (BAR_WIDTH - start - width))
    return bar


def view_timeline(args) -> int:
    """Show items on a timeline between two date columns."""
    board = load_snapshot_or_die(args.snapshot, args.json)
    config = build_view_config(board, args)
    timeline = build_timeline_entries(
        board,
        start_date_column_id=args.start_column or config.timeline_start_column_id,
        end_date_column_id=args.end_column or config.timeline_end_column_id,
    )

    if args.json:
        output_json(timeline_to_dict(timeline))
        return 0

    out = console()
    for entry in timeline.entries:
        dates = ""
        if entry.start_date_value:
            dates = f"{entry.start_date_value[:10]} → {entry.end_date_value[:10]}"
        line = Text("|")
        line.append_text(_bar(entry.start_offset_percent, entry.span_percent))
        line.append(f"|  {entry.item.name}  {dates}")
        out.print(line)
    return 0


def view_window(args) -> int:
    """Show the rows a scrolled table would render."""
    board = load_snapshot_or_die(args.snapshot, args.json)
    rows = flatten_visible_rows(board.groups)
    window = get_virtual_window(
        total_count=len(rows),
        scroll_top=args.scroll_top,
        viewport_height=args.viewport_height,
        row_height=args.row_height,
        overscan=args.overscan,
    )
    visible = rows[window.start_index : window.end_index + 1]

    if args.json:
        output_json(
            {
                "startIndex": window.start_index,
                "endIndex": window.end_index,
                "topSpacerHeight": window.top_spacer_height,
                "bottomSpacerHeight": window.bottom_spacer_height,
                "items": [{"id": item.id, "name": item.name} for item in visible],
            }
        )
        return 0

    if not visible:
        print("no rows")
        return 0
    print(f"rows {window.start_index}-{window.end_index} of {len(rows)}")
    for index, item in enumerate(visible, start=window.start_index):
        print(f"  {index:>5}  {item.id}  {item.name}")
    return 0
