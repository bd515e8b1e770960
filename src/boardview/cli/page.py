"""Handlers for 'boardview page' commands."""

from boardview.cli._common import error, load_snapshot_or_die, output_json
from boardview.loader import SnapshotError, read_document
from boardview.view.framework import count_board_items
from boardview.view.paging import build_paged_bootstrap_path, merge_paged_snapshot, normalize_bootstrap_response
from boardview.writer import pagination_state_to_dict, snapshot_to_dict


def page_merge(args) -> int:
    """Merge a fetched page into a previously loaded snapshot."""
    current = load_snapshot_or_die(args.current, args.json)
    incoming = load_snapshot_or_die(args.incoming, args.json)
    merged = merge_paged_snapshot(current, incoming)

    if args.json:
        output_json(snapshot_to_dict(merged))
    else:
        print(f"{merged.board_name}: {count_board_items(merged)} items in {len(merged.groups)} groups")
    return 0


def page_next(args) -> int:
    """Read a bootstrap response and show where the next page starts."""
    try:
        snapshot, state = normalize_bootstrap_response(read_document(args.response))
    except (OSError, SnapshotError) as e:
        error(str(e), args.json)

    next_path = None
    if state is not None and state.has_more:
        next_path = build_paged_bootstrap_path(args.base_path, state.next_offset, state.item_limit)

    if args.json:
        output_json(
            {
                "boardId": snapshot.board_id,
                "pagination": pagination_state_to_dict(state),
                "nextPath": next_path,
            }
        )
        return 0

    if state is None:
        print("response is not paginated")
    elif next_path is None:
        print(f"all {state.total_items} items loaded")
    else:
        print(f"loaded {state.loaded_items} of {state.total_items}")
        print(next_path)
    return 0
