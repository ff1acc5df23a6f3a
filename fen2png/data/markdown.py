"""
Markdown filter that turns ```fen code blocks into embedded diagrams.

A block looks like:

    ```fen
    r1bqkbnr/pppp1ppp/2n5/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R w KQkq - 2 3
    --coordinates --turn-indicator
    ```

The first non-blank line is the FEN record. The optional next non-blank line
carries the same --options the command line accepts; without any,
--grayscale is implied.
The block is replaced by an image whose target is a base64 data URI and
whose title is the FEN. Blocks that fail to render are left as they are.
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Union

from fen2png.board.glyphs import MERIDA, GlyphTable
from fen2png.cli import parse_render_options
from fen2png.config import find_font
from fen2png.diagram.rasterizer import FontLike, load_font
from fen2png.exceptions import FENError
from fen2png.pipeline import DiagramRenderer

logger = logging.getLogger(__name__)

# Body lines may not start with a fence, so an empty or malformed block
# never runs on into the next one
FEN_BLOCK = re.compile(
    r"^```[ \t]*\{?\.?fen\}?[ \t]*\n(?P<body>(?:(?!```)[^\n]*\n)*)```[ \t]*$",
    re.MULTILINE,
)
OPTION_TOKEN = re.compile(r"--\S+")


class MarkdownFilter:
    """Replace fen code blocks in Markdown text with inline PNG images."""

    def __init__(
        self,
        glyphs: GlyphTable = MERIDA,
        font_path: Optional[Union[str, Path]] = None,
    ):
        self.glyphs = glyphs
        self.font_path = find_font(str(font_path) if font_path else None)
        self._fonts: Dict[int, FontLike] = {}

    def _font(self, size: int) -> FontLike:
        if size not in self._fonts:
            self._fonts[size] = load_font(self.font_path, size)
        return self._fonts[size]

    def render_block(self, body: str) -> str:
        """
        Markdown image for one block body.

        Raises:
            FENError: If the FEN cannot be decoded
            ValueError: If the option line is invalid
        """
        lines = [line for line in body.splitlines() if line.strip()]
        fen = lines[0].strip() if lines else ""
        flags: List[str] = OPTION_TOKEN.findall(lines[1]) if len(lines) > 1 else []
        if not flags:
            flags = ["--grayscale"]
        flags.append("--base64")

        options = parse_render_options(flags)
        renderer = DiagramRenderer(options, self.glyphs, font=self._font(options.size))
        encoded = renderer.render_bytes(fen).decode("ascii")
        title = fen.replace('"', '\\"')
        return f'![](data:image/png;base64,{encoded} "{title}")'

    def _replace(self, match: "re.Match[str]") -> str:
        body = match.group("body")
        try:
            return self.render_block(body)
        except (FENError, ValueError) as e:
            logger.warning(f"Leaving fen block unchanged: {e}")
            return match.group(0)

    def apply(self, text: str) -> str:
        """Return text with every fen block replaced by its diagram."""
        return FEN_BLOCK.sub(self._replace, text)
