"""Move model and shape classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .constants import INVALID_INPUT, MOVE_PATTERN
from .errors import FormatError
from .position import Position


class MoveShape(Enum):
    ADVANCE = "advance"
    DOUBLE_ADVANCE = "double_advance"
    CAPTURE = "capture"
    INVALID = "invalid"


def classify(from_pos: Position, to_pos: Position, direction: int) -> MoveShape:
    rank_delta = (to_pos.rank - from_pos.rank) * direction
    file_delta = to_pos.file - from_pos.file

    if rank_delta == 1 and abs(file_delta) == 1:
        return MoveShape.CAPTURE
    if file_delta == 0 and rank_delta == 1:
        return MoveShape.ADVANCE
    if file_delta == 0 and rank_delta == 2:
        return MoveShape.DOUBLE_ADVANCE
    return MoveShape.INVALID


def is_move_text(text: str) -> bool:
    return MOVE_PATTERN.fullmatch(text) is not None


@dataclass(frozen=True, slots=True)
class Move:
    from_pos: Position
    to_pos: Position
    direction: int

    @classmethod
    def decode(cls, text: str, direction: int) -> Move:
        if not is_move_text(text):
            raise FormatError(INVALID_INPUT)
        return cls(Position.decode(text[:2]), Position.decode(text[2:]), direction)

    @property
    def shape(self) -> MoveShape:
        return classify(self.from_pos, self.to_pos, self.direction)

    def encode(self) -> str:
        return f"{self.from_pos.encode()}{self.to_pos.encode()}"

    def __str__(self) -> str:
        return self.encode()
