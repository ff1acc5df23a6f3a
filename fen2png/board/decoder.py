"""
FEN piece-placement decoder.

Turns a FEN record (only the first field is mandatory) into a Board ready
for layout. Validation happens in this order, and the first failure wins:

    1. at least one whitespace-delimited field      EmptyInputError
    2. side-to-move field present when auto-flip    MissingSideToMoveError
    3. exactly 8 '/'-separated ranks                RankCountError
    4. every character a digit 1-8 or known symbol  UnknownPieceSymbolError
    5. every rank expands to exactly 8 files        FileCountError

Dot ('d') and cross ('x') markers are accepted wherever a piece may stand.

When the board is flipped, steps 3-5 run on the reversed placement field,
so error messages quote ranks as they read after reversal.
"""

import logging
from typing import List, Optional

import numpy as np

from fen2png.board.glyphs import EMPTY, MERIDA, GlyphTable
from fen2png.board.representation import Board, Side
from fen2png.config import RenderOptions
from fen2png.exceptions import (
    EmptyInputError,
    FileCountError,
    MissingSideToMoveError,
    RankCountError,
    UnknownPieceSymbolError,
)

logger = logging.getLogger(__name__)

RANK_SEPARATOR = "/"
BLACK_TO_MOVE = " b "


def decode_rank(rank: str, glyphs: GlyphTable = MERIDA) -> List[str]:
    """
    Expand one rank of the placement field into 8 cells.

    Args:
        rank: Rank text between '/' separators, e.g. "2p1P3"
        glyphs: Table defining which symbols are known

    Returns:
        List of 8 placement symbols (' ' for empty squares)

    Raises:
        UnknownPieceSymbolError: On a character that is not a digit 1-8 or a symbol
        FileCountError: If the rank does not expand to exactly 8 files
    """
    known = glyphs.symbols
    cells: List[str] = []

    for char in rank:
        if "1" <= char <= "8":
            cells.extend(EMPTY * int(char))
        elif char in known:
            cells.append(char)
        else:
            raise UnknownPieceSymbolError(char, rank)

    if len(cells) != 8:
        raise FileCountError(len(cells), rank)

    return cells


def detect_side_to_move(fen: str) -> Side:
    """
    Side to move according to the raw FEN text.

    This is a substring test for " b " anywhere in the record, not a
    lookup of the second field, so "8/8/8/8/8/8/8/8 b" (no trailing
    field) reads as white.
    """
    return Side.BLACK if BLACK_TO_MOVE in fen else Side.WHITE


def decode(
    fen: str,
    options: Optional[RenderOptions] = None,
    glyphs: GlyphTable = MERIDA,
) -> Board:
    """
    Decode a FEN record into a Board.

    Args:
        fen: FEN record; fields after the placement are optional
        options: Rendering options (flip, auto_flip, turn_indicator are read)
        glyphs: Glyph table defining the accepted symbols

    Returns:
        Board with cells in display order

    Raises:
        FENError: One of its subclasses, see the module docstring
    """
    options = options or RenderOptions()

    fields = fen.split()
    if not fields:
        raise EmptyInputError()

    if options.auto_flip and len(fields) < 2:
        raise MissingSideToMoveError()

    flip = options.flip or (options.auto_flip and fields[1] == "b")

    # Reversing the whole field turns rank order and file order around at
    # once (a 180 degree rotation, see rotate_180). Digit runs are single
    # characters, so they survive the reversal unchanged.
    placement = fields[0][::-1] if flip else fields[0]

    ranks = placement.split(RANK_SEPARATOR)
    if len(ranks) != 8:
        raise RankCountError(len(ranks))

    cells = np.array([decode_rank(rank, glyphs) for rank in ranks], dtype="<U1")

    side = detect_side_to_move(fen) if options.turn_indicator else Side.UNKNOWN

    logger.debug(f"Decoded {fields[0]} (flipped={flip}, side_to_move={side.value})")

    return Board(cells, flipped=flip, side_to_move=side)
