"""
tictac - Optimal TicTacToe from Newell & Simon's heuristic rules.

This package implements an immutable board model, an ordered chain of
heuristic rules that finds the best moves, and move selectors (formidable
and 'trembling hand') built on top of it. An exact minimax solver is
included as an oracle for evaluation.
"""

from .board import (
    Board,
    Mark,
    Outcome,
    InvalidCoordinate,
    EMPTY_BOARD,
    empty_board,
    board_from_string,
    cell,
    cells,
    candidates,
    game_over,
    play,
    opponent,
)
from .strategy import RULES, RULE_NAMES, best_moves, rules, explain_moves
from .players import (
    NoLegalMove,
    Player,
    ComputerPlayer,
    FormidableComputer,
    TremblingComputer,
    RandomPlayer,
    select_move,
    first_choice,
    trembling_choice,
)
from .referee import Referee, MatchResult, IllegalMove, run_match, begin
from .minimax import minimax_value_and_moves, iter_all_legal_nonterminal_states
from .symmetries import apply_symmetry_board, apply_symmetry_coord, canonical_board, SYM_MAPS
from .eval import (
    EvalConfig,
    eval_vs_random,
    eval_vs_minimax,
    eval_oracle_agreement_all_states,
    eval_symmetry_consistency,
)

__version__ = "0.1.0"
__all__ = [
    "Board",
    "Mark",
    "Outcome",
    "InvalidCoordinate",
    "EMPTY_BOARD",
    "empty_board",
    "board_from_string",
    "cell",
    "cells",
    "candidates",
    "game_over",
    "play",
    "opponent",
    "RULES",
    "RULE_NAMES",
    "best_moves",
    "rules",
    "explain_moves",
    "NoLegalMove",
    "Player",
    "ComputerPlayer",
    "FormidableComputer",
    "TremblingComputer",
    "RandomPlayer",
    "select_move",
    "first_choice",
    "trembling_choice",
    "Referee",
    "MatchResult",
    "IllegalMove",
    "run_match",
    "begin",
    "minimax_value_and_moves",
    "iter_all_legal_nonterminal_states",
    "apply_symmetry_board",
    "apply_symmetry_coord",
    "canonical_board",
    "SYM_MAPS",
    "EvalConfig",
    "eval_vs_random",
    "eval_vs_minimax",
    "eval_oracle_agreement_all_states",
    "eval_symmetry_consistency",
]
