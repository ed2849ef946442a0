# fischer_random/position/codec.py
from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Dict, List, Optional, Sequence, Tuple

from .pieces import (
    BISHOP,
    KING,
    KNIGHT,
    NUM_POSITIONS,
    QUEEN,
    ROOK,
    SLOTS,
    Arrangement,
    free_slots,
    slots_of,
)

# Unordered knight rank pairs among the 5 slots left after bishops and queen,
# in lexicographic order. KNIGHT_PAIRS[n] is the pair for combination index n.
KNIGHT_PAIRS: Tuple[Tuple[int, int], ...] = (
    (0, 1),
    (0, 2),
    (0, 3),
    (0, 4),
    (1, 2),
    (1, 3),
    (1, 4),
    (2, 3),
    (2, 4),
    (3, 4),
)
KNIGHT_PAIR2IDX: Dict[Tuple[int, int], int] = {p: i for i, p in enumerate(KNIGHT_PAIRS)}


class InvalidIDError(ValueError):
    """Raised when a position ID is not an integer in [0, 959]."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Position ID must be an integer between 0 and {NUM_POSITIONS - 1}, got {value!r}")


def as_position_id(value: object) -> Optional[int]:
    """Exact int for an integral number (518, 518.0, Fraction(518)), else None. Range is not checked."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    if isinstance(value, Integral):
        return int(value)
    try:
        whole = math.floor(value)
    except (ValueError, OverflowError):  # nan, inf
        return None
    return whole if whole == value else None


# --- Public API --------------------------------------------------------------


def encode(arrangement: Sequence[str]) -> int:
    """
    Map a valid arrangement to its position ID.

        ID = 96*N + 16*Q + 4*D + L

    where L/D index the light/dark bishop among its four squares, Q is the
    queen's rank among the 6 slots left after the bishops, and N is the knight
    pair's combination index among the 5 slots left after the queen.

    The arrangement must already satisfy the back-rank invariants; see
    `is_valid_arrangement`.
    """
    bishops = slots_of(arrangement, BISHOP)
    light = next(s for s in bishops if s % 2 == 1)
    dark = next(s for s in bishops if s % 2 == 0)

    after_bishops = [s for s in SLOTS if s not in (light, dark)]
    queen = list(arrangement).index(QUEEN)
    q = after_bishops.index(queen)

    after_queen = [s for s in after_bishops if s != queen]
    knights = sorted(after_queen.index(s) for s in slots_of(arrangement, KNIGHT))
    n = KNIGHT_PAIR2IDX[(knights[0], knights[1])]

    return 96 * n + 16 * q + 4 * (dark // 2) + (light - 1) // 2


def decode(position_id: int) -> Arrangement:
    """
    Rebuild the arrangement for `position_id` by peeling off the mixed-radix
    digits (4, 4, 6, 10) and replaying the placement steps.

    Raises InvalidIDError for anything but an integer in [0, 959].
    """
    pid = as_position_id(position_id)
    if pid is None or not 0 <= pid < NUM_POSITIONS:
        raise InvalidIDError(position_id)

    pid, light = divmod(pid, 4)
    pid, dark = divmod(pid, 4)
    n, q = divmod(pid, 6)

    board: List[Optional[str]] = [None] * 8
    board[2 * dark] = BISHOP
    board[2 * light + 1] = BISHOP

    board[free_slots(board)[q]] = QUEEN

    remaining = free_slots(board)
    for k in KNIGHT_PAIRS[n]:
        board[remaining[k]] = KNIGHT

    # ascending order keeps the king between the rooks
    for slot, piece in zip(free_slots(board), (ROOK, KING, ROOK)):
        board[slot] = piece

    return tuple(board)
