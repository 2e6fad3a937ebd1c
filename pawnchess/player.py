"""Sides and the players holding them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SideProperties(Enum):
    """Fixed per-side data: color label, rank direction and winning rank."""

    FIRST = ("white", 1, 7)
    SECOND = ("black", -1, 0)

    def __init__(self, color: str, direction: int, winning_rank: int) -> None:
        self.color = color
        self.direction = direction
        self.winning_rank = winning_rank


@dataclass(eq=False, slots=True)
class Player:
    name: str
    properties: SideProperties
    captures: int = 0

    @property
    def color(self) -> str:
        return self.properties.color

    @property
    def direction(self) -> int:
        return self.properties.direction

    @property
    def winning_rank(self) -> int:
        return self.properties.winning_rank

    def __str__(self) -> str:
        return f"{self.name} ({self.color})"
