"""
Optimal TicTacToe strategy as an ordered chain of heuristic rules.

Follows Newell and Simon's 1972 tic-tac-toe program: optimal play is to
choose a move from the earliest rule that yields any candidates.

Each rule is a pure function (board, turn) -> list of coordinates, in
row-major order and without duplicates.
"""

from typing import Callable, List, Tuple

from .board import (
    CENTER,
    COORDS,
    Board,
    Coordinate,
    Mark,
    Outcome,
    candidates,
    cell,
    corners,
    game_over,
    opponent,
    opposite_corner,
    play,
    sides,
)

Rule = Callable[[Board, Mark], List[Coordinate]]


# Win: if the turn's player can win, win.

def winning_play(board: Board, turn: Mark, coord: Coordinate) -> bool:
    """True if marking `coord` wins the game for `turn`."""
    if cell(board, coord) is not Mark.BLANK:
        return False
    return game_over(play(board, turn, coord)) is Outcome.for_winner(turn)


def winning_plays(board: Board, turn: Mark) -> List[Coordinate]:
    return [coord for coord in candidates(board) if winning_play(board, turn, coord)]


# Block: if the opponent could win next, take that square.
# (With two distinct threats against us the game is already lost.)

def blocking_plays(board: Board, turn: Mark) -> List[Coordinate]:
    return winning_plays(board, opponent(turn))


# Fork: create two winning threats at once, so the opponent can block only one.

def forking_play(board: Board, turn: Mark, coord: Coordinate) -> bool:
    if cell(board, coord) is not Mark.BLANK:
        return False
    return len(winning_plays(play(board, turn, coord), turn)) > 1


def forking_plays(board: Board, turn: Mark) -> List[Coordinate]:
    return [coord for coord in candidates(board) if forking_play(board, turn, coord)]


# Blocking an opponent's fork.
#
# Option 1: threaten a win, so the opponent is forced to block, provided the
# square they block on does not hand them a fork.
# Option 2: occupy the square the opponent would fork from.

def fork_blocking_plays_threat(board: Board, turn: Mark) -> List[Coordinate]:
    opp = opponent(turn)
    plays = []
    for coord in candidates(board):
        hypothetical = play(board, turn, coord)
        threatened_wins = winning_plays(hypothetical, turn)
        if any(not forking_play(hypothetical, opp, t) for t in threatened_wins):
            plays.append(coord)
    return plays


def fork_blocking_plays_occupy(board: Board, turn: Mark) -> List[Coordinate]:
    return forking_plays(board, opponent(turn))


# Center. Between perfect players an opening corner makes no difference.

def center_play(board: Board, turn: Mark) -> List[Coordinate]:
    return [CENTER] if cell(board, CENTER) is Mark.BLANK else []


# Opposite corner: answer an opponent's corner with the corner across from it.

def opposite_corner_plays(board: Board, turn: Mark) -> List[Coordinate]:
    opp = opponent(turn)
    plays = {
        opposite_corner(corner)
        for corner, mark in corners(board).items()
        if mark is opp and cell(board, opposite_corner(corner)) is Mark.BLANK
    }
    return [coord for coord in COORDS if coord in plays]


def empty_corner_plays(board: Board, turn: Mark) -> List[Coordinate]:
    return [coord for coord, mark in corners(board).items() if mark is Mark.BLANK]


def empty_side_plays(board: Board, turn: Mark) -> List[Coordinate]:
    return [coord for coord, mark in sides(board).items() if mark is Mark.BLANK]


def just_play_something(board: Board, turn: Mark) -> List[Coordinate]:
    """Every blank cell, so a losing computer still moves."""
    return candidates(board)


# Ordered by priority. The first non-empty result is the optimal one; the
# rest are, roughly, in decreasing order of quality.
RULES: Tuple[Tuple[str, Rule], ...] = (
    ("win", winning_plays),
    ("block", blocking_plays),
    ("fork", forking_plays),
    ("block-fork-threat", fork_blocking_plays_threat),
    ("block-fork-occupy", fork_blocking_plays_occupy),
    ("center", center_play),
    ("opposite-corner", opposite_corner_plays),
    ("empty-corner", empty_corner_plays),
    ("empty-side", empty_side_plays),
    ("anything", just_play_something),
)

RULE_NAMES: Tuple[str, ...] = tuple(name for name, _ in RULES)


def explain_moves(board: Board, turn: Mark) -> List[Tuple[str, List[Coordinate]]]:
    """
    Apply every rule in order and keep the non-empty ones.

    Returns:
        [(rule_name, moves), ...] in priority order. Non-empty whenever the
        board has a blank cell.
    """
    explained = []
    for name, rule in RULES:
        moves = rule(board, turn)
        if moves:
            explained.append((name, moves))
    return explained


def best_moves(board: Board, turn: Mark) -> List[List[Coordinate]]:
    """Candidate move lists from every non-empty rule, best first."""
    return [moves for _, moves in explain_moves(board, turn)]


rules = best_moves
