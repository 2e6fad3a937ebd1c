"""Shared fixtures for rules engine tests."""

import pytest

from pawnchess.board import Board
from pawnchess.player import Player, SideProperties


@pytest.fixture
def players() -> list[Player]:
    return [Player("Alice", SideProperties.FIRST), Player("Bob", SideProperties.SECOND)]


@pytest.fixture
def first(players: list[Player]) -> Player:
    return players[0]


@pytest.fixture
def second(players: list[Player]) -> Player:
    return players[1]


@pytest.fixture
def board(players: list[Player]) -> Board:
    board = Board(players)
    board.current_player = players[0]
    return board


@pytest.fixture
def empty_board(players: list[Player]) -> Board:
    board = Board(players, populate=False)
    board.current_player = players[0]
    return board
