"""Command-line entry point for pawns-only chess."""

from __future__ import annotations

import argparse
import logging

from pawnchess.board import Board
from pawnchess.console import run_console
from pawnchess.perft import perft, perft_divide
from pawnchess.player import Player, SideProperties

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pawns-only chess")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    subparsers.add_parser("play", help="Play a match in the terminal")

    perft_parser = subparsers.add_parser("perft", help="Run perft from the initial position")
    perft_parser.add_argument("depth", type=int, help="Perft depth")
    perft_parser.add_argument("--divide", action="store_true", help="Show per-move split")

    return parser


def initial_board() -> Board:
    players = [Player("first", SideProperties.FIRST), Player("second", SideProperties.SECOND)]
    board = Board(players)
    board.current_player = players[0]
    return board


def run(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    if args.command == "perft":
        minimum = 1 if args.divide else 0
        if args.depth < minimum:
            parser.error(f"depth must be >= {minimum}")
        board = initial_board()
        if args.divide:
            for move, count in perft_divide(board, args.depth).items():
                print(f"{move}: {count}")
        else:
            print(perft(board, args.depth))
        return

    run_console()


if __name__ == "__main__":
    run()
