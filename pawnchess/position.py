"""Board coordinates."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import FILES, INVALID_INPUT, SQUARE_PATTERN, in_bounds
from .errors import FormatError


@dataclass(frozen=True, slots=True)
class Position:
    rank: int
    file: int

    def __post_init__(self) -> None:
        if not in_bounds(self.rank, self.file):
            raise ValueError(f"Position out of range: rank={self.rank} file={self.file}")

    @classmethod
    def decode(cls, text: str) -> Position:
        if SQUARE_PATTERN.fullmatch(text) is None:
            raise FormatError(INVALID_INPUT)
        return cls(rank=int(text[1]) - 1, file=FILES.index(text[0]))

    def encode(self) -> str:
        return f"{FILES[self.file]}{self.rank + 1}"

    def offset(self, rank_delta: int, file_delta: int) -> Position | None:
        rank = self.rank + rank_delta
        file = self.file + file_delta
        if not in_bounds(rank, file):
            return None
        return Position(rank, file)

    def __deepcopy__(self, memo: dict) -> Position:
        return self

    def __str__(self) -> str:
        return self.encode()
