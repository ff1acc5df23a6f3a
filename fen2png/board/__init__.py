"""
Board Decoding Module

Turns the piece-placement field of a FEN record into a Board whose cells
are already in display order.

Key Components:
    - GlyphTable / MERIDA: symbol to font code point mapping
    - decode: FEN record -> Board (validation, flip, side to move)
    - Board: immutable 8x8 grid with python-chess conversion

Data Flow:
    FEN string -> decode() -> Board -> diagram.compose()
"""

from fen2png.board.decoder import decode, decode_rank, detect_side_to_move
from fen2png.board.glyphs import MERIDA, GlyphTable
from fen2png.board.representation import Board, Side, rotate_180

__all__ = [
    "decode",
    "decode_rank",
    "detect_side_to_move",
    "MERIDA",
    "GlyphTable",
    "Board",
    "Side",
    "rotate_180",
]
