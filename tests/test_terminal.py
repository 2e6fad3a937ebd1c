from pawnchess.board import Board
from pawnchess.move import Move
from pawnchess.player import Player
from pawnchess.position import Position


def test_reaching_far_rank_wins(empty_board: Board, first: Player, second: Player) -> None:
    empty_board.place("a7", first, has_advanced=True)
    empty_board.place("h2", second, has_advanced=True)

    move = empty_board.play_move("a7a8", first)
    assert empty_board.check_win(move, first)

    move = empty_board.play_move("h2h1", second)
    assert empty_board.check_win(move, second)


def test_ordinary_move_does_not_win(board: Board, first: Player) -> None:
    move = board.play_move("e2e4", first)
    assert not board.check_win(move, first)


def test_winning_rank_is_per_side(first: Player, second: Player, empty_board: Board) -> None:
    to_first_rank = Move(Position(1, 0), Position(0, 0), second.direction)
    to_last_rank = Move(Position(6, 0), Position(7, 0), first.direction)

    assert empty_board.check_win(to_first_rank, second)
    assert not empty_board.check_win(to_first_rank, first)
    assert empty_board.check_win(to_last_rank, first)
    assert not empty_board.check_win(to_last_rank, second)


def test_eighth_capture_wins(empty_board: Board, first: Player, second: Player) -> None:
    empty_board.place("d4", first, has_advanced=True)
    empty_board.place("e5", second, has_advanced=True)
    first.captures = 7

    move = empty_board.play_move("d4e5", first)
    assert first.captures == 8
    assert empty_board.check_win(move, first)


def test_seven_captures_do_not_win(empty_board: Board, first: Player, second: Player) -> None:
    empty_board.place("d4", first, has_advanced=True)
    empty_board.place("e5", second, has_advanced=True)
    first.captures = 6

    move = empty_board.play_move("d4e5", first)
    assert not empty_board.check_win(move, first)


def test_initial_position_is_not_stalemate(board: Board, first: Player, second: Player) -> None:
    assert not board.check_stalemate(first)
    assert not board.check_stalemate(second)


def test_blocked_pawns_are_stalemate(empty_board: Board, first: Player, second: Player) -> None:
    empty_board.place("a4", first, has_advanced=True)
    empty_board.place("a5", second, has_advanced=True)

    assert empty_board.check_stalemate(first)
    assert empty_board.check_stalemate(second)


def test_capture_available_prevents_stalemate(empty_board: Board, first: Player, second: Player) -> None:
    empty_board.place("a4", first, has_advanced=True)
    empty_board.place("a5", second, has_advanced=True)
    empty_board.place("b5", second, has_advanced=True)

    assert not empty_board.check_stalemate(first)


def test_own_pawn_on_diagonal_does_not_help(empty_board: Board, first: Player, second: Player) -> None:
    empty_board.place("a4", first, has_advanced=True)
    empty_board.place("b5", first, has_advanced=True)
    empty_board.place("a5", second, has_advanced=True)
    empty_board.place("b6", second, has_advanced=True)

    assert empty_board.check_stalemate(first)


def test_en_passant_target_prevents_stalemate(empty_board: Board, first: Player, second: Player) -> None:
    empty_board.place("a5", first, has_advanced=True)
    empty_board.place("a6", second, has_advanced=True)
    empty_board.place("b7", second)

    assert empty_board.check_stalemate(first)
    assert empty_board.apply_move("b7b5", second)
    assert not empty_board.check_stalemate(first)


def test_pawn_on_far_rank_has_no_move(empty_board: Board, first: Player) -> None:
    empty_board.place("c8", first, has_advanced=True)
    assert empty_board.check_stalemate(first)


def test_stalemate_ignores_double_advance_over_blocker(empty_board: Board, first: Player, second: Player) -> None:
    empty_board.place("a2", first)
    empty_board.place("a3", second, has_advanced=True)

    assert empty_board.check_stalemate(first)
    # The board itself still accepts the jump over the blocker.
    assert empty_board.apply_move("a2a4", first)


def test_stalemate_uses_current_player(empty_board: Board, first: Player, second: Player) -> None:
    empty_board.place("a4", first, has_advanced=True)
    empty_board.place("h7", second)
    empty_board.place("a5", second, has_advanced=True)

    empty_board.current_player = first
    assert empty_board.check_stalemate()
    empty_board.current_player = second
    assert not empty_board.check_stalemate()
