# fischer_random/position/formats.py
from __future__ import annotations

from typing import Optional, Sequence

import chess

from .pieces import Arrangement, arrangement_errors

EMPTY_RANK = "8"
BLACK_PAWNS = "p" * 8
WHITE_PAWNS = "P" * 8
# white to move, full castling, no ep square, halfmove 0, fullmove 1
FEN_TRAILER = "w KQkq - 0 1"


class InvalidArrangementError(ValueError):
    """Raised when text cannot be parsed into a valid arrangement."""


def to_display_string(arrangement: Sequence[str]) -> str:
    return "".join(arrangement)


def parse_arrangement(text: str) -> Arrangement:
    """Parse e.g. "rnbqkbnr" / " RNBQKBNR " into a validated arrangement."""
    arrangement = tuple(text.strip().upper())
    errors = arrangement_errors(arrangement)
    if errors:
        raise InvalidArrangementError(f"Invalid arrangement {text!r}: {'; '.join(errors)}")
    return arrangement


def to_board_format(arrangement: Sequence[str]) -> str:
    """
    Full starting-position FEN: black's back rank (lowercase) on rank 8 down to
    white's (uppercase) on rank 1, mirrored across the board.
    """
    white = to_display_string(arrangement).upper()
    ranks = [white.lower(), BLACK_PAWNS] + [EMPTY_RANK] * 4 + [WHITE_PAWNS, white]
    return f"{'/'.join(ranks)} {FEN_TRAILER}"


# --- python-chess bridge ------------------------------------------------------


def to_board(arrangement: Sequence[str]) -> chess.Board:
    """Starting position as a Chess960-mode `chess.Board`."""
    return chess.Board(to_board_format(arrangement), chess960=True)


def board_position_id(board: chess.Board) -> Optional[int]:
    """Position ID python-chess reports for a board, or None if it is not a Chess960 start."""
    return board.chess960_pos()
