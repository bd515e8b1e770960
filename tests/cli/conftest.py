"""Shared fixtures for CLI tests."""

import json
from argparse import Namespace

import pytest

from boardview.writer import snapshot_to_dict

from ..conftest import _make_large_board

FILTER_FLAGS = (
    "view",
    "config",
    "status",
    "person",
    "date_from",
    "date_to",
    "number_min",
    "number_max",
    "tag",
    "checkbox",
    "url",
    "sort_by",
    "item_offset",
    "item_limit",
)


def _view_args(snapshot, json=False, **flags):
    """Namespace for 'view apply' with every unset flag as None."""
    values = {name: None for name in FILTER_FLAGS}
    values.update(flags)
    return Namespace(snapshot=str(snapshot), json=json, **values)


@pytest.fixture
def large_snapshot_file(tmp_path):
    """A 250-item single-group board written to a JSON file."""
    path = tmp_path / "large.json"
    path.write_text(json.dumps(snapshot_to_dict(_make_large_board(250))))
    return path
