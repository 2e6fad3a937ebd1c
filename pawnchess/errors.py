"""Exceptions raised by the rules engine."""

from __future__ import annotations


class PawnChessError(Exception):
    """Base class for rejected input. The message is shown to the player."""


class FormatError(PawnChessError, ValueError):
    pass


class IllegalMoveError(PawnChessError):
    pass
