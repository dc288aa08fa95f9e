"""
D4 symmetry transforms for TicTacToe boards and coordinates (8 transforms).

Rotations: 0°, 90°, 180°, 270°
Reflections: horizontal, vertical, main diagonal, anti-diagonal
"""

from typing import List

import numpy as np

from .board import Board, Coordinate, check_coord


def _idx(r: int, c: int) -> int:
    """Convert (row, col) to flat index."""
    return r * 3 + c


def _transform(r: int, c: int, k: int) -> Coordinate:
    if k == 0:   return r, c                # identity
    elif k == 1: return c, 2 - r            # rotate 90
    elif k == 2: return 2 - r, 2 - c        # rotate 180
    elif k == 3: return 2 - c, r            # rotate 270
    elif k == 4: return r, 2 - c            # reflect horizontal
    elif k == 5: return 2 - r, c            # reflect vertical
    elif k == 6: return c, r                # reflect main diag
    else:        return 2 - c, 2 - r        # reflect anti-diag


def _build_symmetry_maps():
    """Build 8 permutation maps: mp[target] = source."""
    maps = []
    for k in range(8):
        mp = np.zeros(9, dtype=np.int64)
        for r in range(3):
            for c in range(3):
                rt, ct = _transform(r, c, k)
                mp[_idx(rt, ct)] = _idx(r, c)
        maps.append(mp)
    return maps


# Pre-computed symmetry maps
SYM_MAPS = _build_symmetry_maps()


def apply_symmetry_board(board: Board, sym_id: int) -> Board:
    """
    Apply symmetry transform to board.

    Args:
        board: Board to transform
        sym_id: symmetry ID (0-7)

    Returns:
        Transformed board
    """
    marks = np.asarray(board.marks, dtype=np.int64)
    return Board(tuple(int(m) for m in marks[SYM_MAPS[sym_id]]))


def apply_symmetry_coord(coord: Coordinate, sym_id: int) -> Coordinate:
    """Where `coord` lands under the same transform as apply_symmetry_board."""
    r, c = check_coord(coord)
    return _transform(r, c, sym_id)


def get_all_symmetries(board: Board) -> List[Board]:
    """Return all 8 symmetric versions of a board."""
    return [apply_symmetry_board(board, k) for k in range(8)]


def get_random_symmetry(board: Board, rng: np.random.Generator) -> Board:
    """Return a random symmetric version of the board."""
    sym_id = int(rng.integers(0, 8))
    return apply_symmetry_board(board, sym_id)


def canonical_board(board: Board) -> Board:
    """Representative of the board's symmetry class (smallest cell tuple)."""
    return min(get_all_symmetries(board), key=lambda b: tuple(int(m) for m in b.marks))
