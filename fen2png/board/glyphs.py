"""
Glyph tables for diagram fonts.

A chess diagram font draws every piece twice, once on a light square and
once on a dark (hatched) square. The table maps each placement symbol to
that pair of code points, and also carries the board frame, the coordinate
labels and the turn-indicator glyph.

Symbols:
    ' '         empty square
    R N B Q K P white pieces
    r n b q k p black pieces
    d           dot marker
    x           cross marker
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

from fen2png.exceptions import UnknownPieceSymbolError

EMPTY = " "
DOT = "d"
CROSS = "x"

LIGHT = 0
DARK = 1


@dataclass(frozen=True)
class GlyphTable:
    """Immutable mapping from board symbols to font code points."""

    pieces: Mapping[str, Tuple[str, str]]
    numbers: Tuple[str, ...]  # label for display row 0..7 (top to bottom)
    letters: Tuple[str, ...]  # label for display column 0..7 (left to right)
    top_left_corner: str
    top_side: str
    top_right_corner: str
    left_side: str
    right_side: str
    bottom_left_corner: str
    bottom_side: str
    bottom_right_corner: str
    turn_indicator: str

    def __post_init__(self):
        if EMPTY not in self.pieces:
            raise ValueError("glyph table needs an entry for the empty square")
        for symbol, pair in self.pieces.items():
            if len(symbol) != 1 or len(pair) != 2:
                raise ValueError(f"invalid glyph pair for symbol {symbol!r}: {pair!r}")
        if len(self.numbers) != 8 or len(self.letters) != 8:
            raise ValueError("glyph table needs exactly 8 numbers and 8 letters")
        # Freeze the caller's dict so the table cannot change after construction
        object.__setattr__(self, "pieces", MappingProxyType(dict(self.pieces)))

    @property
    def symbols(self) -> FrozenSet[str]:
        """Placement symbols (excluding the empty square) this table can draw."""
        return frozenset(s for s in self.pieces if s != EMPTY)

    def glyph(self, symbol: str, parity: int) -> str:
        """
        Code point for a symbol on a square of the given parity.

        Args:
            symbol: Placement symbol, or ' ' for an empty square
            parity: (file + rank) % 2; 0 selects the light variant

        Raises:
            UnknownPieceSymbolError: If the table has no entry for symbol
        """
        try:
            pair = self.pieces[symbol]
        except KeyError:
            raise UnknownPieceSymbolError(symbol) from None
        return pair[parity % 2]


MERIDA = GlyphTable(
    pieces={
        EMPTY: ("\uf020", "\uf02b"),
        "R": ("\uf072", "\uf052"),
        "N": ("\uf06e", "\uf04e"),
        "B": ("\uf062", "\uf042"),
        "Q": ("\uf071", "\uf051"),
        "K": ("\uf06b", "\uf04b"),
        "P": ("\uf070", "\uf050"),
        "r": ("\uf074", "\uf054"),
        "n": ("\uf06d", "\uf04d"),
        "b": ("\uf076", "\uf056"),
        "q": ("\uf077", "\uf057"),
        "k": ("\uf06c", "\uf04c"),
        "p": ("\uf06f", "\uf04f"),
        DOT: ("\uf02e", "\uf03a"),
        CROSS: ("\uf078", "\uf058"),
    },
    # 8 down to 1, then a to h
    numbers=("\uf0c7", "\uf0c6", "\uf0c5", "\uf0c4", "\uf0c3", "\uf0c2", "\uf0c1", "\uf0c0"),
    letters=("\uf0c8", "\uf0c9", "\uf0ca", "\uf0cb", "\uf0cc", "\uf0cd", "\uf0ce", "\uf0cf"),
    top_left_corner="\uf031",
    top_side="\uf032",
    top_right_corner="\uf033",
    left_side="\uf034",
    right_side="\uf035",
    bottom_left_corner="\uf037",
    bottom_side="\uf038",
    bottom_right_corner="\uf039",
    turn_indicator="\uf02e",
)
