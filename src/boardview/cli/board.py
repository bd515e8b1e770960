"""Handlers for 'boardview board' commands."""

from boardview.cli._common import load_snapshot_or_die, output_json
from boardview.view.framework import count_board_items
from boardview.view.rows import has_no_search_results
from boardview.view.search import filter_groups_by_item_name


def board_summary(args) -> int:
    """Show board summary: name, groups with item counts, columns."""
    board = load_snapshot_or_die(args.snapshot, args.json)

    groups = [
        {
            "id": g.id,
            "name": g.name,
            "items": len(g.items),
            "collapsed": g.is_collapsed,
        }
        for g in board.groups
    ]
    columns = [{"id": c.id, "name": c.name, "type": c.type} for c in board.columns]

    if args.json:
        output_json(
            {
                "boardId": board.board_id,
                "name": board.board_name,
                "totalItems": count_board_items(board),
                "groups": groups,
                "columns": columns,
            }
        )
    else:
        print(board.board_name)
        for g in groups:
            collapsed = "  (collapsed)" if g["collapsed"] else ""
            items = "item" if g["items"] == 1 else "items"
            print(f"  {g['id']}  {g['name']:<16} {g['items']} {items}{collapsed}")
        if columns:
            print("columns: " + ", ".join(f"{c['name']} ({c['type']})" for c in columns))

    return 0


def board_search(args) -> int:
    """List items whose name contains the query."""
    board = load_snapshot_or_die(args.snapshot, args.json)
    groups = filter_groups_by_item_name(board.groups, args.query)

    if args.json:
        output_json(
            [
                {"id": item.id, "name": item.name, "group": {"id": g.id, "name": g.name}}
                for g in groups
                for item in g.items
            ]
        )
        return 0

    if has_no_search_results(groups, args.query):
        print(f"no items match '{args.query.strip()}'")
        return 0

    for g in groups:
        print(f"{g.id}  {g.name}")
        for item in g.items:
            print(f"  {item.id}  {item.name}")
    return 0
