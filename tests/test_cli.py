import json

import pytest

from flattree.cli import describe, main


def test_inspect_prints_node_summary(capsys):
    assert main(["inspect", "3"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == describe(3)
    assert out["depth"] == 2
    assert out["children"] == [1, 5]
    assert out["spans"] == [0, 6]
    assert out["counts"] == 7
    assert out["count_leaves"] == 4


def test_inspect_leaf_has_no_children(capsys):
    assert main(["inspect", "4"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["children"] is None
    assert out["parent"] == 5


def test_index_command(capsys):
    assert main(["index", "2", "1"]) == 0
    assert json.loads(capsys.readouterr().out) == {"index": 11}


def test_full_roots_command(capsys):
    assert main(["full-roots", "10"]) == 0
    assert json.loads(capsys.readouterr().out) == {"index": 10, "full_roots": [3, 8]}


def test_full_roots_odd_index_fails(capsys):
    assert main(["full-roots", "7"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "leaf-level" in captured.err


def test_walk_reports_every_step(capsys):
    assert main(["walk", "0", "parent", "parent", "right-child", "right-span"]) == 0
    steps = json.loads(capsys.readouterr().out)
    assert [s["move"] for s in steps] == ["seek", "parent", "parent", "right-child", "right-span"]
    assert [s["index"] for s in steps] == [0, 1, 3, 5, 6]
    assert steps[-1]["depth"] == 0
    assert steps[-1]["offset"] == 3


def test_negative_index_is_rejected():
    with pytest.raises(SystemExit) as exc:
        main(["inspect", "-1"])
    assert exc.value.code == 2


def test_unknown_move_is_rejected():
    with pytest.raises(SystemExit):
        main(["walk", "0", "sideways"])
