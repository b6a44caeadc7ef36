import json
from pathlib import Path

import pytest

from collectionkit.io.cli import main

ROOT = Path(__file__).resolve().parent.parent


def test_prints_every_combination(capsys):
    assert main([str(ROOT / "problem1.yaml")]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Loaded 4 slots: 8 possible combinations."
    assert [json.loads(line) for line in lines[1:3]] == [[1, 1, 2, 1], [1, 1, 2, 2]]
    assert len(lines) == 9


def test_count_only(capsys):
    assert main([str(ROOT / "problem2.yaml"), "--count"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Loaded set of 4 elements: 16 possible subsets."]


def test_limit(capsys):
    assert main([str(ROOT / "problem2.yaml"), "--limit", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert json.loads(lines[1]) == ["knitter", "scout", "oracle", "medium"]
    assert json.loads(lines[2]) == ["scout", "oracle", "medium"]
    assert len(lines) == 3


def test_check(capsys):
    assert main([str(ROOT / "problem1.yaml"), "--check", "1", "2", "2", "4"]) == 0
    assert main([str(ROOT / "problem1.yaml"), "--check", "1", "2", "3", "4"]) == 2
    out = capsys.readouterr().out
    assert "[1, 2, 2, 4] is possible" in out
    assert "[1, 2, 3, 4] is not possible" in out


def test_error_reported(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("candidates:\n  a: []\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "has no potential value" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.yaml")]) == 1
    assert "error:" in capsys.readouterr().err


def test_nested_elements_reported(tmp_path, capsys):
    path = tmp_path / "nested.yaml"
    path.write_text("elements: [[1, 2], 3]\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "error:" in capsys.readouterr().err


def test_negative_limit_refused(capsys):
    with pytest.raises(SystemExit) as info:
        main([str(ROOT / "problem1.yaml"), "--limit", "-1"])
    assert info.value.code == 2
    assert "--limit" in capsys.readouterr().err


def test_check_nested_subset_is_not_possible(capsys):
    assert main([str(ROOT / "problem2.yaml"), "--check", "[knitter]"]) == 2
    assert "is not possible" in capsys.readouterr().out
