"""
Tests for the TicTacToe logic modules.
Run with pytest from the repository root.
"""

import random
from itertools import combinations

import pytest

from logic.engine import GameEngine, Rejected
from logic.game_state import GameState, Outcome, Player, Status
from logic.move_validator import IllegalMove, MoveValidator
from logic.win_checker import WINNING_LINES, WinChecker


DRAW_SEQUENCE = [0, 1, 2, 4, 3, 6, 5, 8, 7]


@pytest.fixture
def engine():
    return GameEngine()


def play(engine, moves, state=None):
    """Apply moves that are all expected to be legal."""
    state = state or engine.initialize()
    for index in moves:
        result = engine.apply_move(state, index)
        assert not isinstance(result, Rejected), f"move {index} rejected: {result}"
        state = result
    return state


def _forms_line(cells):
    return any(set(line) <= set(cells) for line in WINNING_LINES)


def _line_moves(line, winner):
    """Interleave the line with filler moves for the other player."""
    others = [i for i in range(9) if i not in line]
    filler_count = 2 if winner == Player.X else 3
    filler = next(
        combo for combo in combinations(others, filler_count)
        if not _forms_line(combo)
    )
    if winner == Player.X:
        return [line[0], filler[0], line[1], filler[1], line[2]]
    return [filler[0], line[0], filler[1], line[1], filler[2], line[2]]


# ==================== GAME STATE ====================

def test_initial_state(engine):
    state = engine.initialize()
    assert state.board == (None,) * 9
    assert state.current_player == Player.X
    assert state.status == Status.IN_PROGRESS
    assert state.winner is None
    assert state.winning_line is None
    assert not state.is_game_over
    assert state.get_empty_cells() == list(range(9))


def test_player_opposite():
    assert Player.X.opposite() == Player.O
    assert Player.O.opposite() == Player.X


def test_rows_split_board_row_major(engine):
    state = play(engine, [0, 4, 8])
    assert state.rows() == [
        (Player.X, None, None),
        (None, Player.O, None),
        (None, None, Player.X),
    ]


# ==================== ENGINE ====================

def test_move_marks_cell_and_passes_turn(engine):
    state = engine.apply_move(engine.initialize(), 4)
    assert state.board[4] == Player.X
    assert state.current_player == Player.O
    assert state.status == Status.IN_PROGRESS


def test_apply_move_does_not_touch_input_state(engine):
    before = play(engine, [0, 4])
    snapshot = GameState(before.board, before.current_player, before.outcome)
    engine.apply_move(before, 8)
    assert before == snapshot


def test_top_row_win(engine):
    state = play(engine, [0, 3, 1, 4, 2])
    assert state.status == Status.WON
    assert state.winner == Player.X
    assert state.winning_line == (0, 1, 2)
    # Winner keeps the turn marker once the game is over
    assert state.current_player == Player.X


def test_draw_sequence(engine):
    state = play(engine, DRAW_SEQUENCE)
    assert state.status == Status.DRAW
    assert state.is_draw
    assert state.winner is None
    assert state.winning_line is None
    assert state.get_empty_cells() == []


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("winner", [Player.X, Player.O])
def test_every_line_wins(engine, line, winner):
    state = play(engine, _line_moves(line, winner))
    assert state.outcome == Outcome.won(winner, line)


def test_occupied_cell_is_rejected(engine):
    state = play(engine, [4])
    result = engine.apply_move(state, 4)
    assert isinstance(result, Rejected)
    assert result.reason == IllegalMove.OCCUPIED
    assert result.index == 4
    assert not result


@pytest.mark.parametrize("index", [-1, 9, 100, "4", 4.0, None, True])
def test_bad_index_is_rejected(engine, index):
    state = engine.initialize()
    result = engine.apply_move(state, index)
    assert isinstance(result, Rejected)
    assert result.reason == IllegalMove.OUT_OF_RANGE
    assert state == engine.initialize()


@pytest.mark.parametrize("moves", [[0, 3, 1, 4, 2], DRAW_SEQUENCE])
def test_no_moves_after_game_over(engine, moves):
    state = play(engine, moves)
    for index in list(range(9)) + [-1, 9]:
        result = engine.apply_move(state, index)
        assert isinstance(result, Rejected)
        assert result.reason == IllegalMove.GAME_OVER


@pytest.mark.parametrize("moves", [[], [4], [0, 3, 1, 4, 2], DRAW_SEQUENCE])
def test_restart_returns_fresh_state(engine, moves):
    state = play(engine, moves)
    assert engine.restart(state) == engine.initialize()


def test_random_games_keep_invariants(engine):
    rng = random.Random(1234)
    for _ in range(200):
        state = engine.initialize()
        move_number = 1
        while not state.is_game_over:
            expected = Player.X if move_number % 2 == 1 else Player.O
            assert state.current_player == expected
            assert state.count(Player.X) - state.count(Player.O) in (0, 1)
            state = engine.apply_move(state, rng.choice(state.get_empty_cells()))
            move_number += 1
        assert state.count(Player.X) - state.count(Player.O) in (0, 1)
        if state.winner is not None:
            assert all(state.board[i] == state.winner for i in state.winning_line)


# ==================== WIN CHECKER ====================

def test_first_line_in_scan_order_is_reported():
    checker = WinChecker()
    board = [None] * 9
    for index in (0, 1, 2, 3, 6):
        board[index] = Player.X
    assert checker.find_winning_line(board) == (Player.X, (0, 1, 2))
    assert checker.evaluate(board) == Outcome.won(Player.X, (0, 1, 2))


def test_check_draw_and_winner():
    checker = WinChecker()
    X, O = Player.X, Player.O
    full = [X, O, X, X, O, O, O, X, X]
    assert checker.check_winner(full) is None
    assert checker.check_draw(full)
    assert checker.evaluate(full) == Outcome.draw()

    open_board = [X, O, None, None, None, None, None, None, None]
    assert not checker.check_draw(open_board)
    assert checker.evaluate(open_board) == Outcome()


def test_full_board_with_line_is_a_win_not_a_draw():
    checker = WinChecker()
    X, O = Player.X, Player.O
    board = [X, X, X, O, O, X, X, O, O]
    assert not checker.check_draw(board)
    assert checker.evaluate(board).status == Status.WON


# ==================== MOVE VALIDATOR ====================

def test_validator_messages(engine):
    validator = MoveValidator()
    state = play(engine, [4])
    assert validator.validate_move(state, 0).is_valid

    result = validator.validate_move(state, 4)
    assert not result.is_valid
    assert result.error_message == "Cell 4 is already occupied by X"

    result = validator.validate_move(state, 12)
    assert result.reason == IllegalMove.OUT_OF_RANGE


def test_valid_moves(engine):
    validator = MoveValidator()
    assert validator.get_valid_moves(engine.initialize()) == list(range(9))
    assert validator.get_valid_moves(play(engine, [4, 0])) == [1, 2, 3, 5, 6, 7, 8]
    assert validator.get_valid_moves(play(engine, [0, 3, 1, 4, 2])) == []
