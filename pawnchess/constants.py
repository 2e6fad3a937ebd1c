"""Board geometry and rule constants."""

from __future__ import annotations

import re

BOARD_SIZE = 8

FILES = "abcdefgh"
RANKS = "12345678"

SQUARE_PATTERN = re.compile(r"[a-h][1-8]")
MOVE_PATTERN = re.compile(r"([a-h][1-8]){2}")

# Rank indices holding each side's pawns at the start of a match.
FIRST_START_RANK = 1
SECOND_START_RANK = 6

# Capturing every opposing pawn wins the match.
CAPTURES_TO_WIN = BOARD_SIZE

INVALID_INPUT = "Invalid Input"


def in_bounds(rank: int, file: int) -> bool:
    return 0 <= rank < BOARD_SIZE and 0 <= file < BOARD_SIZE
