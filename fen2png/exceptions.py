"""
Errors raised while decoding a FEN record.

All decode errors derive from FENError (itself a ValueError), so callers
that only care about "bad input" can catch a single type.
"""

from typing import Optional


class FENError(ValueError):
    """Base class for FEN decoding failures."""


class EmptyInputError(FENError):
    """The FEN record has no whitespace-delimited fields."""

    def __init__(self):
        super().__init__("empty FEN")


class MissingSideToMoveError(FENError):
    """Auto-flip was requested but the side-to-move field is absent."""

    def __init__(self):
        super().__init__("auto-flip requires the side-to-move field in FEN")


class RankCountError(FENError):
    """The piece placement does not split into exactly 8 ranks."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"{count} ranks in FEN")


class FileCountError(FENError):
    """A rank expands to a number of files other than 8."""

    def __init__(self, count: int, rank: str):
        self.count = count
        self.rank = rank
        super().__init__(f"{count} files in FEN at rank {rank!r}")


class UnknownPieceSymbolError(FENError):
    """A rank contains a character that is neither a digit 1-8 nor a known symbol."""

    def __init__(self, symbol: str, rank: Optional[str] = None):
        self.symbol = symbol
        self.rank = rank
        super().__init__(f"unknown piece {symbol!r} in FEN")
