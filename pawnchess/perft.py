"""Perft utilities for move generation correctness checks."""

from __future__ import annotations

from .board import Board
from .move import Move
from .movegen import generate_moves


def _play(board: Board, move: Move) -> tuple[Board, bool]:
    child = board.copy()
    mover = child.current_player
    child.play_move(move.encode(), mover)
    won = child.check_win(move, mover)
    child.current_player = child.opponent_of(mover)
    return child, won


def perft(board: Board, depth: int) -> int:
    if depth < 0:
        raise ValueError("Depth must be >= 0")
    if board.current_player is None:
        raise ValueError("Perft needs a player to move")
    if depth == 0:
        return 1

    moves = generate_moves(board)
    if depth == 1:
        return len(moves)

    nodes = 0
    for move in moves:
        child, won = _play(board, move)
        # A winning move ends the match, so it is a leaf at any depth.
        nodes += 1 if won else perft(child, depth - 1)
    return nodes


def perft_divide(board: Board, depth: int) -> dict[str, int]:
    if depth < 1:
        raise ValueError("Depth must be >= 1 for perft divide")
    if board.current_player is None:
        raise ValueError("Perft needs a player to move")

    result: dict[str, int] = {}
    for move in generate_moves(board):
        child, won = _play(board, move)
        result[move.encode()] = 1 if won else perft(child, depth - 1)
    return dict(sorted(result.items()))
