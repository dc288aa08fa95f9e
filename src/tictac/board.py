"""
TicTacToe board model: marks, outcomes, and pure board transitions.

Board representation: frozen tuple of 9 Marks in row-major order
  - Mark.BLANK (0): empty
  - Mark.P1 (+1): first player
  - Mark.P2 (-1): second player

Coordinates are (row, col) pairs with each component in [0, 2].
Boards are immutable values; play() returns a new board.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, List, Optional, Tuple

Coordinate = Tuple[int, int]

IN_RANGE = (0, 1, 2)

# All coordinates in lexicographic (row-major) order
COORDS: Tuple[Coordinate, ...] = tuple((r, c) for r in IN_RANGE for c in IN_RANGE)

CORNERS: Tuple[Coordinate, ...] = ((0, 0), (0, 2), (2, 0), (2, 2))
SIDES: Tuple[Coordinate, ...] = ((0, 1), (1, 0), (1, 2), (2, 1))
CENTER: Coordinate = (1, 1)


class InvalidCoordinate(ValueError):
    """A coordinate or line index outside the 3x3 grid."""


class Mark(IntEnum):
    """Contents of a cell. P1 and P2 double as turns."""
    P1 = 1
    P2 = -1
    BLANK = 0


Triple = Dict[Coordinate, Mark]


class Outcome(Enum):
    """Result of inspecting a board."""
    P1_WINS = "p1"
    P2_WINS = "p2"
    TIE = "tie"
    ONGOING = "ongoing"

    @property
    def winner(self) -> Optional[Mark]:
        if self is Outcome.P1_WINS:
            return Mark.P1
        if self is Outcome.P2_WINS:
            return Mark.P2
        return None

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.ONGOING

    @classmethod
    def for_winner(cls, mark: Mark) -> "Outcome":
        """Outcome in which `mark` has won."""
        if mark == Mark.P1:
            return cls.P1_WINS
        if mark == Mark.P2:
            return cls.P2_WINS
        raise ValueError(f"{mark!r} cannot win a game")


def _index(coord) -> int:
    """Convert (row, col) to flat index, validating the coordinate."""
    try:
        r, c = coord
    except (TypeError, ValueError):
        raise InvalidCoordinate(f"Coordinate must be a (row, col) pair, got {coord!r}") from None
    if not all(isinstance(v, int) and not isinstance(v, bool) and v in IN_RANGE for v in (r, c)):
        raise InvalidCoordinate(f"Invalid position {coord!r}. Row and column must be 0-2.")
    return r * 3 + c


def check_coord(coord) -> Coordinate:
    """Validate a coordinate and return it as a (row, col) tuple."""
    _index(coord)
    r, c = coord
    return r, c


def _check_line_index(n: int) -> int:
    if not isinstance(n, int) or isinstance(n, bool) or n not in IN_RANGE:
        raise InvalidCoordinate(f"Line index must be 0-2, got {n!r}")
    return n


def _check_turn(turn: Mark) -> Mark:
    if turn not in (Mark.P1, Mark.P2):
        raise ValueError(f"Turn must be Mark.P1 or Mark.P2, got {turn!r}")
    return Mark(turn)


@dataclass(frozen=True)
class Board:
    """Immutable board: one Mark per cell, row-major."""
    marks: Tuple[Mark, ...]

    def __post_init__(self):
        if len(self.marks) != 9:
            raise ValueError(f"Board needs exactly 9 cells, got {len(self.marks)}")
        try:
            marks = tuple(Mark(m) for m in self.marks)
        except ValueError as e:
            raise ValueError(f"Board cells must be Marks: {e}") from None
        object.__setattr__(self, "marks", marks)

    def __str__(self) -> str:
        symbols = {Mark.BLANK: ".", Mark.P1: "X", Mark.P2: "O"}
        return "\n".join(
            "".join(symbols[self.marks[r * 3 + c]] for c in IN_RANGE) for r in IN_RANGE
        )


def empty_board() -> Board:
    """Board with all 9 cells blank."""
    return Board((Mark.BLANK,) * 9)


EMPTY_BOARD = empty_board()


def board_from_string(text: str) -> Board:
    """
    Parse a board from 9 cell characters.

    'X' is P1, 'O' is P2, '.' or '_' is blank. Whitespace and '|' are ignored,
    so "XO.|.X.|..O" and a three-line grid both work.
    """
    symbols = {"X": Mark.P1, "O": Mark.P2, ".": Mark.BLANK, "_": Mark.BLANK}
    chars = [ch for ch in text.upper() if not ch.isspace() and ch != "|"]
    try:
        return Board(tuple(symbols[ch] for ch in chars))
    except KeyError as e:
        raise ValueError(f"Unknown cell character {e.args[0]!r}") from None


def opponent(turn: Mark) -> Mark:
    """Return the turn of the player opposing this turn."""
    return Mark.P2 if _check_turn(turn) is Mark.P1 else Mark.P1


def cell(board: Board, coord: Coordinate) -> Mark:
    """Return the mark at (row, col)."""
    return board.marks[_index(coord)]


def cells(board: Board) -> List[Mark]:
    """Return the marks of all cells, in lexicographic order of coordinates."""
    return list(board.marks)


def _select(board: Board, coords) -> Triple:
    return {coord: board.marks[_index(coord)] for coord in coords}


def row(board: Board, n: int) -> Triple:
    """Return the nth row of a board."""
    n = _check_line_index(n)
    return _select(board, [(n, c) for c in IN_RANGE])


def col(board: Board, n: int) -> Triple:
    """Return the nth column of a board."""
    n = _check_line_index(n)
    return _select(board, [(r, n) for r in IN_RANGE])


def neg_diagonal(board: Board) -> Triple:
    """Diagonal with negative slope: (0,0), (1,1), (2,2)."""
    return _select(board, [(i, i) for i in IN_RANGE])


def pos_diagonal(board: Board) -> Triple:
    """Diagonal with positive slope: (0,2), (1,1), (2,0)."""
    return _select(board, [(i, 2 - i) for i in IN_RANGE])


def rows(board: Board) -> List[Triple]:
    return [row(board, n) for n in IN_RANGE]


def cols(board: Board) -> List[Triple]:
    return [col(board, n) for n in IN_RANGE]


def diags(board: Board) -> List[Triple]:
    return [neg_diagonal(board), pos_diagonal(board)]


def triples(board: Board) -> List[Triple]:
    """All 8 winning lines: rows, columns, then diagonals."""
    return rows(board) + cols(board) + diags(board)


def candidates(board: Board) -> List[Coordinate]:
    """Return coordinates of blank cells, row-major."""
    return [coord for coord, m in zip(COORDS, board.marks) if m is Mark.BLANK]


def corners(board: Board) -> Triple:
    return _select(board, CORNERS)


def sides(board: Board) -> Triple:
    """The four edge midpoints (neither corner nor center)."""
    return _select(board, SIDES)


def opposite_corner(coord: Coordinate) -> Coordinate:
    """Map a corner to its point-symmetric partner, e.g. (0, 2) -> (2, 0)."""
    _index(coord)
    if tuple(coord) not in CORNERS:
        raise InvalidCoordinate(f"{coord!r} is not a corner")
    r, c = coord
    return (2 - r, 2 - c)


def winning_triple(triple: Triple) -> Optional[Mark]:
    """Given a line of three cells, return the shared player mark, or None."""
    marks = set(triple.values())
    if len(marks) == 1:
        (mark,) = marks
        if mark is not Mark.BLANK:
            return mark
    return None


def game_over(board: Board) -> Outcome:
    """
    Inspect a board.

    Returns:
        the winner's Outcome if any line is uniformly marked, else TIE if the
        board is full, else ONGOING. Every line is checked before declaring a
        tie, since a full board can still contain a win.
    """
    for triple in triples(board):
        winner = winning_triple(triple)
        if winner is not None:
            return Outcome.for_winner(winner)
    if Mark.BLANK not in board.marks:
        return Outcome.TIE
    return Outcome.ONGOING


def play(board: Board, turn: Mark, coord: Coordinate) -> Board:
    """
    Return the board resulting from `turn` marking `coord`.

    Playing an occupied cell returns `board` unchanged. Callers relying on a
    rejected write must check cell() first.
    """
    turn = _check_turn(turn)
    idx = _index(coord)
    if board.marks[idx] is not Mark.BLANK:
        return board
    marks = list(board.marks)
    marks[idx] = turn
    return Board(tuple(marks))


def side_to_move(board: Board) -> Mark:
    """Infer side to move from mark counts (P1 plays first)."""
    p1_cnt = board.marks.count(Mark.P1)
    p2_cnt = board.marks.count(Mark.P2)
    return Mark.P1 if p1_cnt == p2_cnt else Mark.P2


def is_legal_board(board: Board) -> bool:
    """Check that mark counts and winners respect the rules of play."""
    p1_cnt = board.marks.count(Mark.P1)
    p2_cnt = board.marks.count(Mark.P2)

    # P1 goes first, so p1_cnt == p2_cnt or p1_cnt == p2_cnt + 1
    if not (p1_cnt == p2_cnt or p1_cnt == p2_cnt + 1):
        return False

    winners = {winning_triple(t) for t in triples(board)} - {None}
    return len(winners) < 2
