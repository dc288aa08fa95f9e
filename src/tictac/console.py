"""
Console front-end: a human player typing cell numbers and a referee that
talks to the terminal.

Cells are numbered 1-9 in row-major order:
 1 | 2 | 3
===+===+===
 4 | 5 | 6
===+===+===
 7 | 8 | 9
"""

from typing import Callable, Dict, Optional

import numpy as np

from .board import COORDS, Board, Coordinate, Mark, Outcome, cell
from .players import ComputerPlayer, FormidableComputer, Player, TremblingComputer
from .referee import MatchUp, Referee
from .strategy import explain_moves

COORD_TO_NUMBER: Dict[Coordinate, str] = {coord: str(i + 1) for i, coord in enumerate(COORDS)}
NUMBER_TO_COORD: Dict[str, Coordinate] = {n: coord for coord, n in COORD_TO_NUMBER.items()}

PREAMBLE = (
    "TIC|   |   "
    "\n===+===+===\n "
    "  |TAC|   "
    "\n===+===+===\n "
    "  |   |TOE  \n"
)

DEFAULT_MARKS = {Mark.P1: "X", Mark.P2: "O"}
DEFAULT_COMPUTER_NAMES = {Mark.P1: "Hal the Computer", Mark.P2: "Ava the Robot"}


def glyph(board: Board, match_up: MatchUp, coord: Coordinate) -> str:
    """The owning player's mark, or the cell's number if it is blank."""
    mark = cell(board, coord)
    if mark is Mark.BLANK:
        return COORD_TO_NUMBER[coord]
    return match_up[mark].mark


def render_board(board: Board, match_up: MatchUp) -> str:
    lines = []
    for r in range(3):
        lines.append(" " + " | ".join(glyph(board, match_up, (r, c)) for c in range(3)))
    return "\n===+===+===\n".join(lines) + "\n"


class ConsolePlayer(Player):
    """A human choosing moves by typing a cell number."""

    def __init__(
        self,
        name: str,
        mark: str,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        super().__init__(name, mark)
        self.input_fn = input_fn
        self.output_fn = output_fn

    def ask_for_move(self, board: Board, turn: Mark) -> Coordinate:
        while True:
            response = self.input_fn(
                "Enter the number of the move you want to make, then press <Enter>. > "
            ).strip()
            coord = NUMBER_TO_COORD.get(response)
            if coord is None:
                self.output_fn("That's not a move you can make -- only numbers are valid moves.")
            elif cell(board, coord) is not Mark.BLANK:
                self.output_fn("That square is occupied. Pick a number in one of the boxes on the board.")
            else:
                return coord


class ConsoleReferee(Referee):
    """
    Referee for a game at the terminal.

    Args:
        input_fn: Reads a line given a prompt (default: input)
        output_fn: Writes a line (default: print)
        tremble: Slip probability for computer players; 0 is formidable
        seed: Seed for the computer players' tie-breaks
        explain: Also say which rule a computer's move came from
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        tremble: float = 0.0,
        seed: Optional[int] = None,
        explain: bool = False,
    ):
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.tremble = tremble
        self.rng = np.random.default_rng(seed)
        self.explain = explain
        self._board: Optional[Board] = None
        self._turn: Optional[Mark] = None

    def _computer(self, turn: Mark) -> ComputerPlayer:
        name = DEFAULT_COMPUTER_NAMES[turn]
        if self.tremble > 0:
            return TremblingComputer(name, DEFAULT_MARKS[turn], tremble=self.tremble, rng=self.rng)
        return FormidableComputer(name, DEFAULT_MARKS[turn], rng=self.rng)

    def introduce_player(self, turn: Mark, match_up: MatchUp) -> MatchUp:
        """Ask for a name, or make this player a computer on <Enter>."""
        label = "One" if turn is Mark.P1 else "Two"
        name = self.input_fn(
            f"Player {label}: What is your name? (Or press <Enter> for computer player) > "
        ).strip()
        if name:
            player = ConsolePlayer(name, DEFAULT_MARKS[turn], self.input_fn, self.output_fn)
        else:
            player = self._computer(turn)
        return {**match_up, turn: player}

    def mark_player(self, turn: Mark, match_up: MatchUp) -> MatchUp:
        """Ask for the player's mark, defaulting to the traditional X's and O's."""
        response = self.input_fn(
            "What mark do you want for this player's moves? "
            f"(Press <Enter> for the traditional \"{DEFAULT_MARKS[turn]}\"): > "
        ).strip()
        if response:
            match_up[turn].mark = response
        return match_up

    def introduce(self, match_up: MatchUp) -> MatchUp:
        self.output_fn("Let's play some tic-tac-toe!")
        for turn in (Mark.P1, Mark.P2):
            match_up = self.introduce_player(turn, match_up)
            match_up = self.mark_player(turn, match_up)
        self.output_fn("\nReady... set... go!\n")
        return match_up

    def nudge(self, player: Player):
        self.output_fn(f"It's {player.name}'s turn.\n")

    def announce(self, player: Player, move: Coordinate):
        self.output_fn(f"{player.name} plays {player.mark} at {COORD_TO_NUMBER[move]}:")
        if self.explain and isinstance(player, ComputerPlayer) and self._board is not None:
            for rule_name, moves in explain_moves(self._board, self._turn):
                if move in moves:
                    self.output_fn(f"  ({rule_name})")
                    break

    def conclude(self, outcome: Outcome, match_up: MatchUp):
        if outcome is Outcome.TIE:
            self.output_fn("It's a draw!")
        else:
            self.output_fn(f"{match_up[outcome.winner].name} wins!")

    def display(self, board: Board, turn: Mark, match_up: MatchUp):
        self._board = board
        self._turn = turn
        self.output_fn(render_board(board, match_up))
