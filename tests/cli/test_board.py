"""Tests for 'boardview board' commands."""

import json
from argparse import Namespace

import pytest

from boardview.cli.board import board_search, board_summary


def test_board_summary(snapshot_file, capsys):
    args = Namespace(snapshot=str(snapshot_file), json=False)
    assert board_summary(args) == 0

    out = capsys.readouterr().out
    assert "Demo" in out
    assert "Backlog" in out
    assert "2 items" in out
    assert "Status (STATUS)" in out


def test_board_summary_json(snapshot_file, capsys):
    args = Namespace(snapshot=str(snapshot_file), json=True)
    assert board_summary(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["name"] == "Demo"
    assert data["totalItems"] == 2
    assert data["groups"][0] == {"id": "group_1", "name": "Backlog", "items": 2, "collapsed": False}
    assert len(data["columns"]) == 8


def test_board_summary_missing_file(tmp_path, capsys):
    args = Namespace(snapshot=str(tmp_path / "nope.json"), json=False)
    with pytest.raises(SystemExit, match="1"):
        board_summary(args)
    assert capsys.readouterr().err.startswith("error:")


def test_board_summary_invalid_snapshot(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"boardName": "No id"}))
    args = Namespace(snapshot=str(path), json=True)
    with pytest.raises(SystemExit, match="1"):
        board_summary(args)
    assert "boardId" in json.loads(capsys.readouterr().err)["error"]


def test_board_search(snapshot_file, capsys):
    args = Namespace(snapshot=str(snapshot_file), query="a", json=False)
    assert board_search(args) == 0

    out = capsys.readouterr().out
    assert "item_1  A" in out
    assert "item_2" not in out


def test_board_search_no_results(snapshot_file, capsys):
    args = Namespace(snapshot=str(snapshot_file), query=" zzz ", json=False)
    assert board_search(args) == 0
    assert "no items match 'zzz'" in capsys.readouterr().out


def test_board_search_json(snapshot_file, capsys):
    args = Namespace(snapshot=str(snapshot_file), query="B", json=True)
    assert board_search(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data == [{"id": "item_2", "name": "B", "group": {"id": "group_1", "name": "Backlog"}}]
