"""
Referee hooks and the match loop.

The referee handles everything a front-end needs around a game (meeting
the players, showing the board, announcing moves and results); run_match
drives the players over the board model until an outcome is reached.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .board import (
    EMPTY_BOARD,
    Board,
    Coordinate,
    InvalidCoordinate,
    Mark,
    Outcome,
    cell,
    game_over,
    opponent,
    play,
)
from .players import Player

MatchUp = Dict[Mark, Player]


class IllegalMove(RuntimeError):
    """A player chose a cell that cannot be played."""


class Referee:
    """Front-end hooks called by run_match. Defaults are silent."""

    def introduce(self, match_up: MatchUp) -> MatchUp:
        """Gets information about the players."""
        return match_up

    def nudge(self, player: Player):
        """Lets a player know it's their turn."""

    def announce(self, player: Player, move: Coordinate):
        """Declares the move a player chose."""

    def conclude(self, outcome: Outcome, match_up: MatchUp):
        """Congratulates the winner or declares a draw."""

    def display(self, board: Board, turn: Mark, match_up: MatchUp):
        """Shows a representation of a board."""


@dataclass
class MatchResult:
    """How a match ended and the moves that led there."""
    outcome: Outcome
    board: Board
    moves: List[Tuple[Mark, Coordinate]] = field(default_factory=list)


def run_match(
    referee: Referee,
    match_up: MatchUp,
    board: Board = EMPTY_BOARD,
    turn: Mark = Mark.P1,
) -> MatchResult:
    """
    Play rounds until the game is over.

    Each round: display the board; if the game is over, conclude and stop;
    otherwise nudge the player to move, ask for a move, announce it, play it
    and hand the turn to the opponent.

    Raises:
        IllegalMove: if a player returns an occupied or off-board cell.
    """
    moves: List[Tuple[Mark, Coordinate]] = []
    while True:
        outcome = game_over(board)
        referee.display(board, turn, match_up)
        if outcome.is_terminal:
            referee.conclude(outcome, match_up)
            return MatchResult(outcome, board, moves)

        player = match_up[turn]
        referee.nudge(player)
        move = player.ask_for_move(board, turn)
        try:
            occupied = cell(board, move) is not Mark.BLANK
        except InvalidCoordinate as e:
            raise IllegalMove(f"{player.name} chose an off-board cell: {e}") from e
        if occupied:
            raise IllegalMove(f"{player.name} chose occupied cell {move}")

        referee.announce(player, move)
        board = play(board, turn, move)
        moves.append((turn, move))
        turn = opponent(turn)


def begin(referee: Referee, match_up: MatchUp) -> MatchResult:
    """Begins a game with known players on an empty board, P1 first."""
    return run_match(referee, match_up, EMPTY_BOARD, Mark.P1)
