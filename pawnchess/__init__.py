"""Rules engine for pawns-only chess."""

from .board import Board
from .errors import FormatError, IllegalMoveError, PawnChessError
from .match import Match, TurnResult, TurnStatus
from .move import Move, MoveShape
from .piece import Pawn
from .player import Player, SideProperties
from .position import Position

__all__ = [
    "Board",
    "FormatError",
    "IllegalMoveError",
    "Match",
    "Move",
    "MoveShape",
    "Pawn",
    "PawnChessError",
    "Player",
    "Position",
    "SideProperties",
    "TurnResult",
    "TurnStatus",
]
