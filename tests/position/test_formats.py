import chess
import pytest

from fischer_random.position import (
    FEN_TRAILER, NUM_POSITIONS, InvalidArrangementError, board_position_id, decode, parse_arrangement, to_board,
    to_board_format, to_display_string,
)


def test_display_string():
    assert to_display_string(["R", "N", "B", "Q", "K", "B", "N", "R"]) == "RNBQKBNR"
    assert to_display_string(decode(0)) == "BBQNNRKR"
    assert to_display_string(decode(959)) == "RKRNNQBB"


def test_board_format_standard():
    fen = to_board_format(decode(518))
    assert fen == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
    assert fen == chess.STARTING_FEN


def test_board_format_layout():
    fen = to_board_format(list("BBQNNRKR"))
    board_part, trailer = fen.split(" ", 1)
    ranks = board_part.split("/")
    assert len(ranks) == 8
    assert ranks[0] == "bbqnnrkr"
    assert ranks[1] == "pppppppp"
    assert ranks[2:6] == ["8"] * 4
    assert ranks[6] == "PPPPPPPP"
    assert ranks[7] == "BBQNNRKR"
    assert trailer == FEN_TRAILER


def test_board_format_matches_python_chess():
    for pid in range(NUM_POSITIONS):
        expected = chess.Board.from_chess960_pos(pid).board_fen()
        assert to_board_format(decode(pid)).split(" ")[0] == expected


def test_python_chess_agrees_on_ids():
    for pid in (0, 1, 246, 518, 534, 700, 959):
        board = to_board(decode(pid))
        assert board.chess960
        assert board_position_id(board) == pid


def test_board_position_id_none_after_move():
    board = to_board(decode(518))
    board.push_uci("e2e4")
    assert board_position_id(board) is None


@pytest.mark.parametrize("text, expected", [("RNBQKBNR", 518), ("rnbqkbnr", 518), ("  bbqnnrkr\n", 0)])
def test_parse_arrangement(text, expected):
    assert parse_arrangement(text) == decode(expected)


@pytest.mark.parametrize(
    "text, fragment",
    [
        ("RNBQKBN", "expected 8 pieces"),
        ("RNBQKBNX", "unknown piece"),
        ("RNBQKQNR", "expected 2 x B"),
        ("RNBKBQNR", "opposite-coloured"),
        ("KRBQRBNN", "between the rooks"),
    ],
)
def test_parse_arrangement_rejects(text, fragment):
    with pytest.raises(InvalidArrangementError) as exc:
        parse_arrangement(text)
    assert fragment in str(exc.value)
