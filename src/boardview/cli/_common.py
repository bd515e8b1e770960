"""Shared helpers for CLI command handlers."""

import argparse
import json
import sys
from dataclasses import asdict, replace

from rich.console import Console

from boardview.loader import SnapshotError, load_snapshot, load_view_config
from boardview.models import BoardSnapshot, ViewConfig

DEFAULT_ITEM_LIMIT = 100
MAX_ITEM_LIMIT = 1000


def item_offset_arg(value: str) -> int:
    """argparse type: a non-negative integer offset."""
    try:
        offset = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid item offset: {value!r}")
    if offset < 0:
        raise argparse.ArgumentTypeError("item offset must be >= 0")
    return offset


def item_limit_arg(value: str) -> int:
    """argparse type: an integer limit between 1 and MAX_ITEM_LIMIT."""
    try:
        limit = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid item limit: {value!r}")
    if not 1 <= limit <= MAX_ITEM_LIMIT:
        raise argparse.ArgumentTypeError(f"item limit must be between 1 and {MAX_ITEM_LIMIT}")
    return limit


def load_snapshot_or_die(path: str, json_mode: bool) -> BoardSnapshot:
    """Load a snapshot file. Exit 1 with message if it can't be read."""
    try:
        return load_snapshot(path)
    except (OSError, SnapshotError) as e:
        error(str(e), json_mode)


def find_view_config(board: BoardSnapshot, view_id: str, json_mode: bool) -> ViewConfig:
    """Config of a saved view. Exit 1 listing available views if not found."""
    for view in board.views:
        if view.id == view_id:
            return view.config or ViewConfig()
    available = [f"  {v.id}  {v.name} ({v.type})" for v in board.views]
    msg = f"View '{view_id}' not found. Available:\n" + "\n".join(available)
    error(msg, json_mode)


def build_view_config(board: BoardSnapshot, args) -> ViewConfig:
    """Combine saved view, config file and flags, later ones winning."""
    config = ViewConfig()
    if getattr(args, "view", None):
        config = find_view_config(board, args.view, args.json)
    if getattr(args, "config", None):
        try:
            file_config = load_view_config(args.config)
        except (OSError, SnapshotError) as e:
            error(str(e), args.json)
        overrides = {k: v for k, v in asdict(file_config).items() if v is not None}
        config = replace(config, **overrides)

    flags = {
        "status_value": getattr(args, "status", None),
        "person_id": getattr(args, "person", None),
        "date_from": getattr(args, "date_from", None),
        "date_to": getattr(args, "date_to", None),
        "number_min": getattr(args, "number_min", None),
        "number_max": getattr(args, "number_max", None),
        "tag_value": getattr(args, "tag", None),
        "checkbox_value": getattr(args, "checkbox", None),
        "url_query": getattr(args, "url", None),
        "sort_by": getattr(args, "sort_by", None),
    }
    return replace(config, **{k: v for k, v in flags.items() if v is not None})


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2, ensure_ascii=False))


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def console() -> Console:
    """A console bound to the current stdout."""
    return Console(file=sys.stdout, highlight=False, soft_wrap=True)
