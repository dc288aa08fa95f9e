"""Tests for the minimax oracle, symmetries and evaluation harness."""

import numpy as np
import pytest

from tictac.board import EMPTY_BOARD, Mark, board_from_string, cell, game_over
from tictac.eval import (
    EvalConfig,
    MinimaxPlayer,
    eval_vs_minimax,
    eval_vs_random,
)
from tictac.minimax import (
    cache_size,
    clear_cache,
    iter_all_legal_nonterminal_states,
    minimax_value_and_moves,
)
from tictac.strategy import best_moves, explain_moves
from tictac.symmetries import (
    SYM_MAPS,
    apply_symmetry_board,
    apply_symmetry_coord,
    canonical_board,
    get_all_symmetries,
    get_random_symmetry,
)


class TestMinimax:
    def test_empty_board_is_a_draw(self):
        value, moves = minimax_value_and_moves(EMPTY_BOARD, Mark.P1)
        assert value == 0
        assert len(moves) == 9

    def test_immediate_win(self):
        board = board_from_string("XX.|OO.|...")
        value, moves = minimax_value_and_moves(board, Mark.P1)
        assert value == 1
        assert (0, 2) in moves

    def test_lost_position(self):
        # X threatens two lines at once; O to move cannot stop both.
        board = board_from_string("X.X|.O.|X.O")
        value, _ = minimax_value_and_moves(board, Mark.P2)
        assert value == -1

    def test_cache(self):
        clear_cache()
        assert cache_size() == 0
        minimax_value_and_moves(board_from_string("XO.|...|..."), Mark.P1)
        assert cache_size() > 0

    def test_states_are_ongoing(self):
        states = list(iter_all_legal_nonterminal_states())
        assert len(states) > 4000
        assert all(not game_over(board).is_terminal for board, _ in states[::50])


class TestSymmetries:
    def test_eight_permutations(self):
        assert len(SYM_MAPS) == 8
        for mp in SYM_MAPS:
            assert sorted(mp.tolist()) == list(range(9))

    def test_identity(self):
        board = board_from_string("XO.|...|..X")
        assert apply_symmetry_board(board, 0) == board

    def test_rotate_90(self):
        board = board_from_string("X..|...|...")
        assert apply_symmetry_board(board, 1) == board_from_string("..X|...|...")
        assert apply_symmetry_coord((0, 0), 1) == (0, 2)

    def test_board_and_coord_agree(self):
        board = board_from_string("XO.|.X.|...")
        for k in range(8):
            moved = apply_symmetry_board(board, k)
            assert cell(moved, apply_symmetry_coord((0, 1), k)) is Mark.P2

    def test_canonical_board(self):
        board = board_from_string("X..|...|...")
        assert all(canonical_board(b) == canonical_board(board) for b in get_all_symmetries(board))

    def test_random_symmetry(self):
        board = board_from_string("X..|...|...")
        assert get_random_symmetry(board, np.random.default_rng(0)) in get_all_symmetries(board)

    @pytest.mark.parametrize("text, turn", [
        ("X..|.O.|..X", Mark.P2),
        ("X..|...|...", Mark.P2),
        ("XO.|.X.|...", Mark.P2),
    ])
    def test_rules_commute_with_symmetries(self, text, turn):
        board = board_from_string(text)
        name, moves = explain_moves(board, turn)[0]
        for k in range(8):
            got_name, got = explain_moves(apply_symmetry_board(board, k), turn)[0]
            assert got_name == name
            assert set(got) == {apply_symmetry_coord(m, k) for m in moves}


class TestEval:
    def test_minimax_player_plays_optimally(self):
        player = MinimaxPlayer(randomize=False)
        board = board_from_string("XX.|OO.|...")
        assert player.ask_for_move(board, Mark.P1) == (0, 2)

    def test_vs_random(self):
        results = eval_vs_random(EvalConfig(games=10, progress=False))
        assert results["games"] == 10
        assert results["rules_l"] == 0.0
        assert results["rules_w"] + results["rules_d"] == pytest.approx(1.0)

    def test_vs_minimax_draws(self):
        results = eval_vs_minimax(EvalConfig(games=6, progress=False))
        assert results["rules_l"] == 0.0
        assert results["rules_w"] == 0.0

    def test_first_moves_are_optimal_in_tactical_spots(self):
        for text, turn in [("XX.|OO.|...", Mark.P1), ("O..|.O.|...", Mark.P1), ("X..|.O.|..X", Mark.P2)]:
            board = board_from_string(text)
            _, optimal = minimax_value_and_moves(board, turn)
            assert set(best_moves(board, turn)[0]) <= set(optimal)
