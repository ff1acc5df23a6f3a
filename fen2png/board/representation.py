"""
Decoded board representation.

A Board holds the 64 squares exactly as they will be drawn: row 0 is the
top row of the diagram and column 0 its left column. When the board is
flipped the grid has already been rotated by 180 degrees, so consumers
never need to know about orientation to lay out squares.

Cell values are one-character placement symbols:
    ' '         empty square
    RNBQKP      white pieces
    rnbqkp      black pieces
    d, x        dot and cross markers (no python-chess equivalent)

Board Orientation (unflipped):
    - Row 0 = Rank 8 (Black's back rank)
    - Row 7 = Rank 1 (White's back rank)
    - Column 0 = A-file
    - Column 7 = H-file
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

import chess
import numpy as np

from fen2png.board.glyphs import EMPTY


class Side(Enum):
    """Side to move, as far as the FEN record tells us."""

    WHITE = "white"
    BLACK = "black"
    UNKNOWN = "unknown"


def rotate_180(cells: np.ndarray) -> np.ndarray:
    """
    Rotate a square grid by 180 degrees.

    Reversing both axes is the same operation as reversing the whole
    piece-placement string character by character: rank order and file
    order both invert, and single-digit empty runs read the same either way.
    Applying it twice returns the original grid.
    """
    return np.flip(cells, axis=(0, 1))


@dataclass(frozen=True, eq=False)
class Board:
    """An 8x8 grid of placement symbols plus orientation and turn metadata."""

    cells: np.ndarray
    flipped: bool = False
    side_to_move: Side = Side.UNKNOWN

    def __post_init__(self):
        cells = np.array(self.cells, dtype="<U1")
        if cells.shape != (8, 8):
            raise ValueError(f"Invalid board shape: {cells.shape}. Expected (8, 8)")
        cells.setflags(write=False)
        object.__setattr__(self, "cells", cells)

    def symbol_at(self, row: int, col: int) -> str:
        """Placement symbol at a display position (' ' for empty)."""
        return str(self.cells[row, col])

    def is_empty(self, row: int, col: int) -> bool:
        return self.symbol_at(row, col) == EMPTY

    def unflipped(self) -> "Board":
        """The same position as seen from White's side."""
        if not self.flipped:
            return self
        return Board(rotate_180(self.cells), flipped=False, side_to_move=self.side_to_move)

    def placement(self) -> str:
        """
        Serialize the grid back to a piece-placement field.

        The grid is written as displayed, so a flipped board serializes to
        the reversed field. Markers are kept.
        """
        ranks: List[str] = []
        for row in self.cells:
            chars: List[str] = []
            empty_count = 0
            for symbol in row:
                if symbol == EMPTY:
                    empty_count += 1
                    continue
                if empty_count > 0:
                    chars.append(str(empty_count))
                    empty_count = 0
                chars.append(str(symbol))
            if empty_count > 0:
                chars.append(str(empty_count))
            ranks.append("".join(chars))
        return "/".join(ranks)

    def to_chess_board(self) -> chess.BaseBoard:
        """
        Convert to a python-chess BaseBoard.

        Orientation is undone and dot/cross markers are dropped, since
        standard FEN has no way to express them.
        """
        board = chess.BaseBoard(None)
        cells = self.unflipped().cells

        for row in range(8):
            for col in range(8):
                symbol = str(cells[row, col])
                if symbol.lower() not in chess.PIECE_SYMBOLS[1:]:
                    continue
                square = chess.square(col, 7 - row)
                board.set_piece_at(square, chess.Piece.from_symbol(symbol))

        return board
