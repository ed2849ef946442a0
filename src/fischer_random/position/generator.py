# fischer_random/position/generator.py
# random Chess960 back ranks by sequential constrained placement
from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from .pieces import BISHOP, DARK_SLOTS, KING, KNIGHT, LIGHT_SLOTS, QUEEN, ROOK, Arrangement, free_slots

logger = logging.getLogger(__name__)

# Number of choices at each random step: dark bishop, light bishop, queen,
# first knight, second knight. Rook/king/rook are forced.
DRAW_SIZES = (4, 4, 6, 5, 4)


def arrangement_from_draws(draws: Sequence[int]) -> Arrangement:
    """
    Place pieces from five draw indices, each indexing into the slots that
    are still available at that step (see DRAW_SIZES).
    """
    if len(draws) != len(DRAW_SIZES):
        raise ValueError(f"expected {len(DRAW_SIZES)} draws, got {len(draws)}")
    for d, size in zip(draws, DRAW_SIZES):
        if not 0 <= d < size:
            raise ValueError(f"draw {d} out of range [0, {size})")

    dark, light, queen, knight1, knight2 = draws
    board: List[Optional[str]] = [None] * 8
    board[DARK_SLOTS[dark]] = BISHOP
    board[LIGHT_SLOTS[light]] = BISHOP
    board[free_slots(board)[queen]] = QUEEN
    board[free_slots(board)[knight1]] = KNIGHT
    board[free_slots(board)[knight2]] = KNIGHT

    left, middle, right = free_slots(board)
    board[left], board[middle], board[right] = ROOK, KING, ROOK
    return tuple(board)


def generate(rng: Optional[random.Random] = None) -> Arrangement:
    """Return a uniformly random valid arrangement. Pass a seeded `rng` for reproducibility."""
    r = rng if rng is not None else random
    draws = [r.randrange(size) for size in DRAW_SIZES]
    arrangement = arrangement_from_draws(draws)
    logger.debug(f"generated {''.join(arrangement)} from draws {draws}")
    return arrangement
