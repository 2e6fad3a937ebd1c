"""Turn sequencing for a two-player match."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .board import Board
from .errors import PawnChessError
from .move import Move
from .player import Player, SideProperties

logger = logging.getLogger("pawnchess.match")


class TurnStatus(Enum):
    REJECTED = "rejected"
    CONTINUE = "continue"
    WIN = "win"


@dataclass(slots=True)
class TurnResult:
    status: TurnStatus
    player: Player
    move: Move | None = None
    reason: str | None = None

    @property
    def accepted(self) -> bool:
        return self.status is not TurnStatus.REJECTED


class Match:
    def __init__(self, first_name: str, second_name: str):
        self.players = [
            Player(first_name, SideProperties.FIRST),
            Player(second_name, SideProperties.SECOND),
        ]
        self.board = Board(self.players)
        self.turn = 0
        self.winner: Player | None = None
        self.stalemated = False
        self.board.current_player = self.current_player
        logger.info("Match started: %s vs %s", self.players[0], self.players[1])

    @property
    def current_player(self) -> Player:
        return self.players[self.turn]

    @property
    def opponent(self) -> Player:
        return self.players[self.turn ^ 1]

    @property
    def finished(self) -> bool:
        return self.winner is not None or self.stalemated

    def is_stalemate(self) -> bool:
        self.board.current_player = self.current_player
        if self.board.check_stalemate():
            self.stalemated = True
            logger.info("Stalemate: %s has no move", self.current_player)
        return self.stalemated

    def play_turn(self, text: str) -> TurnResult:
        if self.finished:
            raise RuntimeError("The match is already over")

        player = self.current_player
        self.board.current_player = player
        try:
            move = self.board.play_move(text)
        except PawnChessError as exc:
            return TurnResult(TurnStatus.REJECTED, player, reason=str(exc))

        if self.board.check_win(move):
            self.winner = player
            logger.info("%s wins with %s after %d captures", player, move, player.captures)
            return TurnResult(TurnStatus.WIN, player, move=move)

        self.turn ^= 1
        self.board.current_player = self.current_player
        return TurnResult(TurnStatus.CONTINUE, player, move=move)
