"""
fischer_random: Chess960 starting positions.

Generate random back ranks, and map every one of the 960 legal arrangements
to and from its standard position ID (518 is the classical RNBQKBNR).
"""

from .position import (
    NUM_POSITIONS,
    STANDARD_POSITION_ID,
    Arrangement,
    InvalidArrangementError,
    InvalidIDError,
    decode,
    encode,
    generate,
    is_valid_arrangement,
    parse_arrangement,
    to_board_format,
    to_display_string,
)

__all__ = [
    "Arrangement",
    "NUM_POSITIONS",
    "STANDARD_POSITION_ID",
    "InvalidIDError",
    "InvalidArrangementError",
    "generate",
    "encode",
    "decode",
    "is_valid_arrangement",
    "parse_arrangement",
    "to_display_string",
    "to_board_format",
]
