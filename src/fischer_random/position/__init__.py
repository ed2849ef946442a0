# fischer_random/position/__init__.py
from .codec import KNIGHT_PAIR2IDX, KNIGHT_PAIRS, InvalidIDError, as_position_id, decode, encode
from .formats import (
    FEN_TRAILER,
    InvalidArrangementError,
    board_position_id,
    parse_arrangement,
    to_board,
    to_board_format,
    to_display_string,
)
from .generator import DRAW_SIZES, arrangement_from_draws, generate
from .pieces import (
    NUM_POSITIONS,
    PIECES,
    STANDARD_POSITION_ID,
    Arrangement,
    arrangement_errors,
    is_valid_arrangement,
)

__all__ = [
    # pieces
    "Arrangement",
    "PIECES",
    "NUM_POSITIONS",
    "STANDARD_POSITION_ID",
    "arrangement_errors",
    "is_valid_arrangement",
    # codec
    "KNIGHT_PAIRS",
    "KNIGHT_PAIR2IDX",
    "InvalidIDError",
    "as_position_id",
    "encode",
    "decode",
    # generator
    "DRAW_SIZES",
    "arrangement_from_draws",
    "generate",
    # formats
    "FEN_TRAILER",
    "InvalidArrangementError",
    "parse_arrangement",
    "to_display_string",
    "to_board_format",
    "to_board",
    "board_position_id",
]
