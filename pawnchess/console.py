"""Line-oriented text interface for a match."""

from __future__ import annotations

import logging
from typing import Callable

from .match import Match, TurnStatus

logger = logging.getLogger("pawnchess.console")

EXIT_COMMAND = "exit"

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


def _read(read_line: ReadLine, prompt: str) -> str | None:
    try:
        return read_line(prompt)
    except EOFError:
        return None


def run_console(read_line: ReadLine = input, write: Write = print) -> Match | None:
    """Play one match, prompting with ``read_line`` and printing with ``write``.

    Returns the match, or None when input ended before both names were read.
    """
    write("Pawns-Only Chess")
    first_name = _read(read_line, "First Player's name: ")
    if first_name is None:
        write("Bye")
        return None
    second_name = _read(read_line, "Second Player's name: ")
    if second_name is None:
        write("Bye")
        return None

    match = Match(first_name, second_name)
    write(str(match.board))

    while True:
        if match.is_stalemate():
            write("Stalemate!")
            break

        player = match.current_player
        text = _read(read_line, f"{player.name}'s turn:\n> ")
        if text is None or text.strip().lower() == EXIT_COMMAND:
            logger.info("Match ended early by %s", player)
            break

        result = match.play_turn(text.strip())
        if result.status is TurnStatus.REJECTED:
            write(result.reason or "Invalid Input")
            continue

        write(str(match.board))
        if result.status is TurnStatus.WIN:
            write(f"{player.color.capitalize()} Wins!")
            break

    write("Bye")
    return match
