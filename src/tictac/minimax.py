"""
Exact minimax solver for TicTacToe with caching.

Used as an oracle to grade the rule chain, never to choose moves in play.
"""

from itertools import product
from typing import Dict, Iterator, List, Tuple

from .board import (
    Board,
    Coordinate,
    Mark,
    Outcome,
    candidates,
    game_over,
    is_legal_board,
    opponent,
    play,
    side_to_move,
)


# Cache: (board, turn) -> (value, best_moves_tuple)
_MINIMAX_CACHE: Dict[Tuple[Board, Mark], Tuple[int, Tuple[Coordinate, ...]]] = {}


def minimax_value_and_moves(board: Board, turn: Mark) -> Tuple[int, List[Coordinate]]:
    """
    Compute minimax value and best moves from current state.

    Args:
        board: Current board state
        turn: Player to move

    Returns:
        (value, best_moves) where:
        - value: +1 (win), 0 (draw), -1 (loss) from turn's perspective
        - best_moves: list of moves achieving optimal value, row-major
    """
    key = (board, turn)
    if key in _MINIMAX_CACHE:
        v, best = _MINIMAX_CACHE[key]
        return v, list(best)

    outcome = game_over(board)
    if outcome.is_terminal:
        if outcome is Outcome.TIE:
            v = 0
        elif outcome.winner == turn:
            v = +1
        else:
            v = -1
        _MINIMAX_CACHE[key] = (v, tuple())
        return v, []

    best_v = -2
    best_moves: List[Coordinate] = []

    for coord in candidates(board):
        child_v, _ = minimax_value_and_moves(play(board, turn, coord), opponent(turn))
        v_here = -child_v  # Negate for opponent's perspective

        if v_here > best_v:
            best_v = v_here
            best_moves = [coord]
        elif v_here == best_v:
            best_moves.append(coord)

    _MINIMAX_CACHE[key] = (best_v, tuple(best_moves))
    return best_v, best_moves


def clear_cache():
    """Clear minimax cache (useful for memory management)."""
    _MINIMAX_CACHE.clear()


def cache_size() -> int:
    """Return current cache size."""
    return len(_MINIMAX_CACHE)


def iter_all_legal_nonterminal_states() -> Iterator[Tuple[Board, Mark]]:
    """
    Iterate over all legal non-terminal board states.

    Yields:
        (board, turn) tuples for exhaustive evaluation.
    """
    for marks in product((Mark.BLANK, Mark.P1, Mark.P2), repeat=9):
        board = Board(marks)
        if not is_legal_board(board):
            continue
        if game_over(board).is_terminal:
            continue

        yield board, side_to_move(board)
