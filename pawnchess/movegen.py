"""Move generation for the side to move."""

from __future__ import annotations

from .board import Board
from .move import Move
from .player import Player


def generate_moves(board: Board, player: Player | None = None) -> list[Move]:
    """Every move ``Board.play_move`` accepts for the player, in board order."""
    mover = player if player is not None else board.current_player
    if mover is None:
        raise ValueError("No player to generate moves for")

    direction = mover.direction
    moves: list[Move] = []
    for position, pawn in board.pawns(mover):
        ahead = position.offset(direction, 0)
        if ahead is None:
            continue
        if board.pawn_at(ahead) is None:
            moves.append(Move(position, ahead, direction))

        if not pawn.has_advanced:
            double = position.offset(2 * direction, 0)
            if double is not None and board.pawn_at(double) is None:
                moves.append(Move(position, double, direction))

        for file_delta in (-1, 1):
            diagonal = position.offset(direction, file_delta)
            if diagonal is not None and board.capture_victim(diagonal, mover) is not None:
                moves.append(Move(position, diagonal, direction))
    return moves
