"""Board state, move legality and terminal conditions."""

from __future__ import annotations

import copy
import logging
from typing import Iterator, Sequence

from .constants import (
    BOARD_SIZE,
    CAPTURES_TO_WIN,
    FILES,
    FIRST_START_RANK,
    INVALID_INPUT,
    SECOND_START_RANK,
)
from .errors import IllegalMoveError, PawnChessError
from .move import Move, MoveShape
from .piece import Pawn
from .player import Player
from .position import Position

logger = logging.getLogger("pawnchess.board")


def _as_position(square: Position | str) -> Position:
    if isinstance(square, Position):
        return square
    return Position.decode(square)


class Board:
    __slots__ = ("players", "grid", "en_passant", "current_player")

    def __init__(self, players: Sequence[Player], populate: bool = True):
        if len(players) != 2:
            raise ValueError(f"A board needs exactly two players, got {len(players)}")
        self.players = list(players)
        self.grid: list[list[Pawn | None]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self.en_passant: Position | None = None
        self.current_player: Player | None = None
        for player in self.players:
            player.captures = 0
        if populate:
            self.reset()

    def reset(self) -> None:
        self.grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self.en_passant = None
        for player in self.players:
            player.captures = 0
        for file in range(BOARD_SIZE):
            self.grid[FIRST_START_RANK][file] = Pawn(self.players[0])
            self.grid[SECOND_START_RANK][file] = Pawn(self.players[1])

    def place(self, square: Position | str, player: Player, has_advanced: bool = False) -> Pawn:
        """Put a pawn on an empty cell. Setup hook for custom positions."""
        position = _as_position(square)
        if self.pawn_at(position) is not None:
            raise ValueError(f"Square already occupied: {position}")
        pawn = Pawn(player, has_advanced=has_advanced)
        self._set(position, pawn)
        return pawn

    def pawn_at(self, square: Position | str) -> Pawn | None:
        position = _as_position(square)
        return self.grid[position.rank][position.file]

    def pawns(self, player: Player) -> Iterator[tuple[Position, Pawn]]:
        for rank in range(BOARD_SIZE):
            for file in range(BOARD_SIZE):
                pawn = self.grid[rank][file]
                if pawn is not None and pawn.owner is player:
                    yield Position(rank, file), pawn

    def opponent_of(self, player: Player) -> Player:
        first, second = self.players
        return second if player is first else first

    def copy(self) -> Board:
        return copy.deepcopy(self)

    def play_move(self, text: str, player: Player | None = None) -> Move:
        """Validate and apply a move, raising on rejection.

        Raises FormatError for text outside the move grammar and
        IllegalMoveError for a well-formed move the rules reject. A rejected
        move leaves the board untouched.
        """
        mover = self._acting(player)
        move = Move.decode(text, mover.direction)

        pawn = self.pawn_at(move.from_pos)
        if pawn is None or pawn.owner is not mover:
            raise IllegalMoveError(f"No {mover.color} pawn at {move.from_pos}")

        shape = move.shape
        if shape is MoveShape.CAPTURE:
            victim = self.capture_victim(move.to_pos, mover)
            if victim is None:
                raise IllegalMoveError(INVALID_INPUT)
            self._set(victim, None)
            self._relocate(move, pawn)
            mover.captures += 1
            self.en_passant = None
        elif shape is MoveShape.ADVANCE:
            if self.pawn_at(move.to_pos) is not None:
                raise IllegalMoveError(INVALID_INPUT)
            self._relocate(move, pawn)
            self.en_passant = None
        elif shape is MoveShape.DOUBLE_ADVANCE:
            # Only the destination is checked, the cell jumped over may be occupied.
            if pawn.has_advanced or self.pawn_at(move.to_pos) is not None:
                raise IllegalMoveError(INVALID_INPUT)
            self._relocate(move, pawn)
            self.en_passant = Position(move.to_pos.rank - mover.direction, move.to_pos.file)
        else:
            raise IllegalMoveError(INVALID_INPUT)

        logger.debug("%s played %s (%s)", mover, move, shape.value)
        return move

    def apply_move(self, text: str, player: Player | None = None) -> bool:
        try:
            self.play_move(text, player)
        except PawnChessError as exc:
            logger.debug("Rejected move %r: %s", text, exc)
            return False
        return True

    def capture_victim(self, target: Position, mover: Player) -> Position | None:
        """Cell of the pawn a capture onto ``target`` would remove, if any."""
        occupant = self.pawn_at(target)
        if occupant is not None:
            return target if occupant.owner is not mover else None
        if target != self.en_passant:
            return None
        victim = target.offset(-mover.direction, 0)
        if victim is None:
            return None
        occupant = self.pawn_at(victim)
        if occupant is None or occupant.owner is mover:
            return None
        return victim

    def check_win(self, move: Move, player: Player | None = None) -> bool:
        mover = self._acting(player)
        return move.to_pos.rank == mover.winning_rank or mover.captures >= CAPTURES_TO_WIN

    def check_stalemate(self, player: Player | None = None) -> bool:
        mover = self._acting(player)
        for position, _ in self.pawns(mover):
            ahead = position.offset(mover.direction, 0)
            if ahead is None:
                continue
            if self.pawn_at(ahead) is None:
                return False
            for file_delta in (-1, 1):
                diagonal = position.offset(mover.direction, file_delta)
                if diagonal is not None and self.capture_victim(diagonal, mover) is not None:
                    return False
        return True

    def render(self) -> str:
        border = "  " + "+---" * BOARD_SIZE + "+"
        lines = [border]
        for rank in range(BOARD_SIZE - 1, -1, -1):
            cells = "".join(
                f"| {' ' if pawn is None else pawn.symbol} " for pawn in self.grid[rank]
            )
            lines.append(f"{rank + 1} {cells}|")
            lines.append(border)
        lines.append("    " + "   ".join(FILES) + "  ")
        return "\n".join(lines)

    def debug_state(self) -> tuple:
        cells = tuple(
            tuple(None if pawn is None else (pawn.symbol, pawn.has_advanced) for pawn in row)
            for row in self.grid
        )
        return (
            cells,
            self.en_passant,
            tuple(player.captures for player in self.players),
        )

    def _acting(self, player: Player | None) -> Player:
        if player is not None:
            return player
        if self.current_player is None:
            raise ValueError("No player to move has been set on the board")
        return self.current_player

    def _relocate(self, move: Move, pawn: Pawn) -> None:
        pawn.mark_advanced()
        self._set(move.to_pos, pawn)
        self._set(move.from_pos, None)

    def _set(self, position: Position, pawn: Pawn | None) -> None:
        self.grid[position.rank][position.file] = pawn

    def __str__(self) -> str:
        return self.render()
