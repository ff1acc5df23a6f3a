"""
End-to-end diagram rendering.

Chains the stages for one FEN record:

    decode() -> compose() -> rasterize() -> encode_png() [-> base64] -> output
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PIL import Image

from fen2png.board.decoder import decode
from fen2png.board.glyphs import MERIDA, GlyphTable
from fen2png.config import RenderOptions, find_font
from fen2png.diagram.composer import DiagramRows, compose
from fen2png.diagram.encoder import encode_base64, encode_png, write_output
from fen2png.diagram.rasterizer import FontLike, load_font, rasterize

logger = logging.getLogger(__name__)


class DiagramRenderer:
    """Render FEN records to PNG diagrams with one font and one set of options."""

    def __init__(
        self,
        options: Optional[RenderOptions] = None,
        glyphs: GlyphTable = MERIDA,
        font_path: Optional[Union[str, Path]] = None,
        font: Optional[FontLike] = None,
    ):
        """
        Initialize the renderer. The font is loaded once here and shared by
        every record rendered afterwards.

        Args:
            options: Rendering options (uses defaults if None)
            glyphs: Glyph table matching the font
            font_path: TrueType file (None = auto-detect)
            font: Already loaded font; skips file lookup when given

        Raises:
            FileNotFoundError: If no font file can be found
        """
        self.options = options or RenderOptions()
        self.glyphs = glyphs

        if font is None:
            path = find_font(str(font_path) if font_path else None)
            font = load_font(path, self.options.size)
        self.font = font

    def compose(self, fen: str) -> DiagramRows:
        """Decode and lay out a FEN record without rasterizing it."""
        board = decode(fen, self.options, self.glyphs)
        return compose(board, self.glyphs, self.options)

    def render(self, fen: str) -> Image.Image:
        """
        Render a FEN record to an image.

        Raises:
            FENError: If the record cannot be decoded
        """
        return rasterize(self.compose(fen), self.font, self.options)

    def render_bytes(self, fen: str) -> bytes:
        """PNG bytes for a FEN record, base64-wrapped when options.base64 is set."""
        data = encode_png(self.render(fen))
        if self.options.base64:
            data = encode_base64(data)
        return data

    def render_to(self, fen: str, destination: Union[str, Path]) -> None:
        """Render a FEN record and write it to a file, or stdout for "-"."""
        logger.debug(f"Rendering {fen!r} -> {destination}")
        write_output(self.render_bytes(fen), destination)
