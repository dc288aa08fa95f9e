"""
Move selection and computer players.

A selection function turns the rule chain's ordered candidate lists into a
single move. The formidable computer always picks from the first list and
breaks ties at random; weaker computers use a different selection over the
same candidates and never touch the rules themselves.
"""

from typing import Callable, List, Optional

import numpy as np

from .board import Board, Coordinate, Mark, candidates
from .strategy import best_moves

Selection = Callable[[List[List[Coordinate]], np.random.Generator], Coordinate]

# Process-wide tie-break source, used when callers don't pass their own.
_DEFAULT_RNG = np.random.default_rng()


class NoLegalMove(RuntimeError):
    """select_move() was asked to move on a full board."""


def _choice(moves: List[Coordinate], rng: np.random.Generator) -> Coordinate:
    return moves[int(rng.integers(len(moves)))]


def first_choice(move_sets: List[List[Coordinate]], rng: np.random.Generator) -> Coordinate:
    """Uniformly random move among the highest-priority candidates."""
    return _choice(move_sets[0], rng)


def trembling_choice(tremble: float) -> Selection:
    """
    Build a 'trembling hand' selection.

    The computer finds the best moves, but with probability `tremble` its
    finger slips to a uniformly chosen candidate list (possibly the best one).

    Args:
        tremble: slip probability in [0, 1]. 0 plays like first_choice.
    """
    if not 0.0 <= tremble <= 1.0:
        raise ValueError(f"tremble must be in [0, 1], got {tremble}")

    def select(move_sets: List[List[Coordinate]], rng: np.random.Generator) -> Coordinate:
        if len(move_sets) > 1 and rng.random() < tremble:
            moves = move_sets[int(rng.integers(len(move_sets)))]
        else:
            moves = move_sets[0]
        return _choice(moves, rng)

    return select


def select_move(
    board: Board,
    turn: Mark,
    rng: Optional[np.random.Generator] = None,
    selection: Selection = first_choice,
) -> Coordinate:
    """
    Choose a move for `turn`.

    Args:
        board: Current board
        turn: Player to move
        rng: Tie-break source; seed it for reproducible choices
        selection: How to pick from the rule chain's candidate lists

    Returns:
        A coordinate that is blank on `board`.

    Raises:
        NoLegalMove: if the board has no blank cell.
    """
    if not candidates(board):
        raise NoLegalMove(f"No blank cell left to play for {turn.name}")
    move_sets = best_moves(board, turn)
    return selection(move_sets, _DEFAULT_RNG if rng is None else rng)


class Player:
    """Anything that can decide a move: a human at a console or a computer."""

    def __init__(self, name: str, mark: str):
        self.name = name
        self.mark = mark

    def ask_for_move(self, board: Board, turn: Mark) -> Coordinate:
        """Given a board and turn, return the coordinate this player chooses."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, mark={self.mark!r})"


class ComputerPlayer(Player):
    """Computer player picking from the rule chain with a given selection."""

    def __init__(
        self,
        name: str,
        mark: str,
        selection: Selection = first_choice,
        rng: Optional[np.random.Generator] = None,
    ):
        super().__init__(name, mark)
        self.selection = selection
        self.rng = rng

    def ask_for_move(self, board: Board, turn: Mark) -> Coordinate:
        return select_move(board, turn, rng=self.rng, selection=self.selection)


class FormidableComputer(ComputerPlayer):
    """Selects the best known move; ties are broken at random."""

    def __init__(self, name: str, mark: str, rng: Optional[np.random.Generator] = None):
        super().__init__(name, mark, selection=first_choice, rng=rng)


class TremblingComputer(ComputerPlayer):
    """Weakened computer: sometimes plays from a lower-priority rule."""

    def __init__(
        self,
        name: str,
        mark: str,
        tremble: float = 0.25,
        rng: Optional[np.random.Generator] = None,
    ):
        super().__init__(name, mark, selection=trembling_choice(tremble), rng=rng)
        self.tremble = tremble


class RandomPlayer(Player):
    """Plays any blank cell uniformly at random."""

    def __init__(self, name: str = "Random", mark: str = "?", rng: Optional[np.random.Generator] = None):
        super().__init__(name, mark)
        self.rng = rng

    def ask_for_move(self, board: Board, turn: Mark) -> Coordinate:
        moves = candidates(board)
        if not moves:
            raise NoLegalMove(f"No blank cell left to play for {turn.name}")
        return _choice(moves, _DEFAULT_RNG if self.rng is None else self.rng)
