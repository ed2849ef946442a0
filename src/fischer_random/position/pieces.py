## fischer_random/position/pieces.py
# piece letters, slot colours and the three back-rank invariants
from __future__ import annotations

from collections import Counter
from typing import List, Sequence, Tuple

KING, QUEEN, ROOK, BISHOP, KNIGHT = "K", "Q", "R", "B", "N"
PIECES = (KING, QUEEN, ROOK, BISHOP, KNIGHT)

SLOTS = tuple(range(8))
DARK_SLOTS = (0, 2, 4, 6)  # a, c, e, g
LIGHT_SLOTS = (1, 3, 5, 7)  # b, d, f, h

# one side's back rank, a..h
Arrangement = Tuple[str, ...]

PIECE_COUNTS = {KING: 1, QUEEN: 1, ROOK: 2, BISHOP: 2, KNIGHT: 2}

NUM_POSITIONS = 960
STANDARD_POSITION_ID = 518


def slots_of(arrangement: Sequence[str], piece: str) -> List[int]:
    return [i for i, p in enumerate(arrangement) if p == piece]


def free_slots(board: Sequence[str | None]) -> List[int]:
    """Empty slots of a partially filled back rank, ascending."""
    return [i for i, p in enumerate(board) if p is None]


def arrangement_errors(arrangement: Sequence[str]) -> List[str]:
    """Return a human-readable list of broken rules (empty if valid)."""
    if len(arrangement) != 8:
        return [f"expected 8 pieces, got {len(arrangement)}"]
    unknown = sorted({p for p in arrangement if p not in PIECES}, key=str)
    if unknown:
        return [f"unknown piece letter(s): {', '.join(map(repr, unknown))}"]

    errors: List[str] = []
    counts = Counter(arrangement)
    for piece, want in PIECE_COUNTS.items():
        if counts[piece] != want:
            errors.append(f"expected {want} x {piece}, got {counts[piece]}")
    if errors:
        return errors

    b1, b2 = slots_of(arrangement, BISHOP)
    if b1 % 2 == b2 % 2:
        errors.append("bishops must stand on opposite-coloured squares")
    r1, r2 = slots_of(arrangement, ROOK)
    if not r1 < arrangement.index(KING) < r2:
        errors.append("king must stand between the rooks")
    return errors


def is_valid_arrangement(arrangement: Sequence[str]) -> bool:
    return not arrangement_errors(arrangement)
