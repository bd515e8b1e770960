"""Handlers for 'boardview export' commands."""

import sys
from pathlib import Path

from boardview.cli._common import error, load_snapshot_or_die, output_json
from boardview.export import CSV_BOM, export_board


def export_csv(args) -> int:
    """Write the board as CSV to stdout or a file."""
    board = load_snapshot_or_die(args.snapshot, args.json)
    export = export_board(board)

    if args.output is None:
        sys.stdout.write(export.text + "\n")
        return 0

    path = Path(args.output)
    if path.is_dir():
        path = path / export.file_name
    try:
        path.write_text(CSV_BOM + export.text, encoding="utf-8")
    except OSError as e:
        error(str(e), args.json)

    if args.json:
        output_json({"path": str(path), "rows": export.row_count})
    else:
        print(f"wrote {export.row_count} rows to {path}")
    return 0
