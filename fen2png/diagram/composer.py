"""
Diagram composer.

Lays a decoded Board out as 10 rows of 10 font code points, one text line
per row, in the style of a printed book diagram:

    +--------+      top frame
    8rnbqkbnr|      rank rows: label or left edge, 8 squares, right edge
    ...
    1RNBQKBNR|
    +abcdefgh+      bottom frame: corners around letters or bottom edge

The font is monospaced with a cell size of size/10 pixels, so the text
grid is the pixel grid. Light and dark square glyphs alternate by
(column + row) % 2, counted from the top-left square as displayed; the
fonts are drawn so that the top-left square is the light one.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

import numpy as np

from fen2png.board.glyphs import MERIDA, GlyphTable
from fen2png.board.representation import Board, Side
from fen2png.config import RenderOptions

ROWS = 10
COLUMNS = 10


@dataclass(frozen=True)
class TurnIndicator:
    """A glyph drawn off the grid, next to the top-right corner of the board.

    The anchor is expressed in cells: the glyph starts at ``column`` and
    sits on the baseline of row ``row`` (the first rank row by default,
    baseline at ``(row + 1) * cell``), raised by ``raise_fraction`` of a row.
    """

    glyph: str
    column: int = 9
    row: int = 1
    raise_fraction: float = 1 / 3


@dataclass(frozen=True, eq=False)
class DiagramRows:
    """Composed diagram: a (10, 10) grid of code points plus an optional overlay."""

    rows: np.ndarray
    turn_indicator: Optional[TurnIndicator] = None

    def __post_init__(self):
        rows = np.array(self.rows, dtype=np.uint32)
        if rows.shape != (ROWS, COLUMNS):
            raise ValueError(f"Invalid diagram shape: {rows.shape}. Expected ({ROWS}, {COLUMNS})")
        rows.setflags(write=False)
        object.__setattr__(self, "rows", rows)

    def __len__(self) -> int:
        return ROWS

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines())

    def lines(self) -> List[str]:
        """Each row as a string, ready to hand to a text rasterizer."""
        return ["".join(chr(code) for code in row) for row in self.rows]


def _codes(glyphs: List[str]) -> List[int]:
    return [ord(glyph) for glyph in glyphs]


def compose(
    board: Board,
    glyphs: GlyphTable = MERIDA,
    options: Optional[RenderOptions] = None,
) -> DiagramRows:
    """
    Compose the glyph rows for a board.

    Args:
        board: Decoded board, cells already in display order
        glyphs: Font glyph table
        options: Rendering options (coordinates, turn_indicator are read)

    Returns:
        DiagramRows with 10 rows of 10 code points
    """
    options = options or RenderOptions()
    rows: List[List[int]] = []

    # Coordinates follow the view: a flipped board reads 1..8 top to bottom
    # and h..a left to right.
    def label_index(i: int) -> int:
        return 7 - i if board.flipped else i

    # Top
    rows.append(_codes([glyphs.top_left_corner] + [glyphs.top_side] * 8 + [glyphs.top_right_corner]))

    # Middle
    for y in range(8):
        if options.coordinates:
            row = [glyphs.numbers[label_index(y)]]
        else:
            row = [glyphs.left_side]
        for x in range(8):
            row.append(glyphs.glyph(board.symbol_at(y, x), (x + y) % 2))
        row.append(glyphs.right_side)
        rows.append(_codes(row))

    # Bottom
    if options.coordinates:
        bottom = [glyphs.letters[label_index(x)] for x in range(8)]
    else:
        bottom = [glyphs.bottom_side] * 8
    rows.append(_codes([glyphs.bottom_left_corner] + bottom + [glyphs.bottom_right_corner]))

    indicator = None
    if options.turn_indicator and board.side_to_move is Side.BLACK:
        indicator = TurnIndicator(glyphs.turn_indicator)

    return DiagramRows(np.array(rows, dtype=np.uint32), turn_indicator=indicator)
