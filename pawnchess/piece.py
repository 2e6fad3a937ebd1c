"""Pawn model."""

from __future__ import annotations

from dataclasses import dataclass

from .player import Player


@dataclass(eq=False, slots=True)
class Pawn:
    owner: Player
    has_advanced: bool = False

    def mark_advanced(self) -> None:
        self.has_advanced = True

    @property
    def symbol(self) -> str:
        return self.owner.color[0].upper()
