import pytest

from pawnchess.board import Board
from pawnchess.match import Match, TurnStatus
from pawnchess.player import SideProperties

SCRIPTED_WIN = ("e2e4", "a7a6", "e4e5", "d7d5", "e5d6", "a6a5", "d6c7", "a5a4", "c7c8")


def test_sides_are_assigned_in_order() -> None:
    match = Match("Alice", "Bob")
    first, second = match.players

    assert first.name == "Alice" and first.properties is SideProperties.FIRST
    assert second.name == "Bob" and second.properties is SideProperties.SECOND
    assert (first.direction, first.winning_rank, first.color) == (1, 7, "white")
    assert (second.direction, second.winning_rank, second.color) == (-1, 0, "black")
    assert match.current_player is first
    assert match.opponent is second


def test_rejected_turn_is_retried_by_same_player() -> None:
    match = Match("Alice", "Bob")

    result = match.play_turn("e7e5")
    assert result.status is TurnStatus.REJECTED
    assert result.reason == "No white pawn at e7"
    assert not result.accepted
    assert match.current_player.name == "Alice"

    result = match.play_turn("e2e5")
    assert result.reason == "Invalid Input"

    result = match.play_turn("nonsense")
    assert result.reason == "Invalid Input"
    assert match.current_player.name == "Alice"


def test_accepted_turns_alternate() -> None:
    match = Match("Alice", "Bob")

    result = match.play_turn("e2e4")
    assert result.status is TurnStatus.CONTINUE
    assert result.move.encode() == "e2e4"
    assert result.player.name == "Alice"
    assert match.current_player.name == "Bob"
    assert match.board.current_player is match.current_player

    assert match.play_turn("e7e5").accepted
    assert match.current_player.name == "Alice"


def test_scripted_match_ends_on_back_rank() -> None:
    match = Match("Alice", "Bob")

    results = [match.play_turn(text) for text in SCRIPTED_WIN]

    assert all(r.accepted for r in results)
    assert results[-1].status is TurnStatus.WIN
    assert match.winner is match.players[0]
    assert match.finished
    assert match.players[0].captures == 2
    with pytest.raises(RuntimeError):
        match.play_turn("a4a3")


def test_eighth_capture_ends_match() -> None:
    match = Match("Alice", "Bob")
    first, second = match.players
    match.board = Board(match.players, populate=False)
    match.board.place("d4", first, has_advanced=True)
    match.board.place("e5", second, has_advanced=True)
    first.captures = 7

    result = match.play_turn("d4e5")

    assert result.status is TurnStatus.WIN
    assert match.winner is first


def test_stalemate_for_player_to_move() -> None:
    match = Match("Alice", "Bob")
    assert not match.is_stalemate()

    first, second = match.players
    match.board = Board(match.players, populate=False)
    match.board.place("a4", first, has_advanced=True)
    match.board.place("a5", second, has_advanced=True)

    assert match.is_stalemate()
    assert match.stalemated
    assert match.finished
    assert match.winner is None
