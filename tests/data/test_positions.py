"""Tests for JSONL position datasets"""

import json
import logging

import pytest

from fischer_random.data import position_record, read_positions, write_positions
from fischer_random.position import InvalidIDError


def test_position_record():
    rec = position_record(518)
    assert rec == {
        "id": 518,
        "position": "RNBQKBNR",
        "fen": "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
    }


def test_position_record_invalid_id():
    with pytest.raises(InvalidIDError):
        position_record(-1)


def test_write_then_read(tmp_path):
    path = tmp_path / "nested" / "positions.jsonl"
    n = write_positions(path, [0, 518, 959])
    assert n == 3
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3
    recs = read_positions(path)
    assert [r["id"] for r in recs] == [0, 518, 959]
    assert [r["position"] for r in recs] == ["BBQNNRKR", "RNBQKBNR", "RKRNNQBB"]


def test_read_skips_bad_lines(tmp_path, caplog):
    path = tmp_path / "positions.jsonl"
    lines = [
        json.dumps({"id": 518, "position": "RNBQKBNR"}),
        "not json",
        json.dumps({"id": 1}),  # missing position
        json.dumps({"id": 0, "position": "RNBQKBNR"}),  # id mismatch
        json.dumps({"id": 0, "position": "RNBBKQNQ"}),  # invalid arrangement
        json.dumps({"id": float("inf"), "position": "RNBQKBNR"}),  # written as Infinity
        json.dumps({"id": 518.9, "position": "RNBQKBNR"}),  # not truncated to 518
        json.dumps({"id": "518", "position": "RNBQKBNR"}),
        "",
        json.dumps({"id": 246, "position": "nrbkqbnr"}),
    ]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="fischer_random.data.positions"):
        recs = read_positions(path)

    assert [r["id"] for r in recs] == [518, 246]
    assert recs[1]["position"] == "NRBKQBNR"
    assert recs[1]["fen"].startswith("nrbkqbnr/")
    assert caplog.text.count("[line") == 7
    assert "Infinity" in path.read_text(encoding="utf-8")


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_positions(tmp_path / "missing.jsonl")


def test_read_accepts_integral_float_id(tmp_path):
    path = tmp_path / "positions.jsonl"
    path.write_text(json.dumps({"id": 518.0, "position": "RNBQKBNR"}) + "\n", encoding="utf-8")
    recs = read_positions(path)
    assert recs[0]["id"] == 518
    assert isinstance(recs[0]["id"], int)
