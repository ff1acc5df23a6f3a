"""
fen2png

Turns chess positions written in FEN into printed-book style PNG diagrams,
drawn with a chess diagram font such as Merida.

## Architecture

1. **board**: FEN decoding
   - GlyphTable: symbol -> (light square, dark square) code points
   - decode(): placement field -> Board, with flip and side-to-move handling

2. **diagram**: Layout and output
   - compose(): Board -> 10x10 grid of glyphs (frame, labels, squares)
   - rasterize(): glyph rows -> Pillow image
   - encode_png() / encode_base64()

3. **data**: Many records at once
   - CSV batch rendering
   - Markdown ```fen block filter

## Quick Start

```python
from fen2png import DiagramRenderer, RenderOptions

renderer = DiagramRenderer(RenderOptions(coordinates=True), font_path="merida.ttf")
renderer.render_to("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w", "start.png")
```

From the shell:

```bash
python -m fen2png --coordinates "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w" start.png
```
"""

__version__ = "0.1.0"

from fen2png.board import MERIDA, Board, GlyphTable, Side, decode
from fen2png.config import RenderOptions
from fen2png.diagram import DiagramRows, compose
from fen2png.exceptions import (
    EmptyInputError,
    FENError,
    FileCountError,
    MissingSideToMoveError,
    RankCountError,
    UnknownPieceSymbolError,
)
from fen2png.pipeline import DiagramRenderer

__all__ = [
    "MERIDA",
    "Board",
    "GlyphTable",
    "Side",
    "decode",
    "RenderOptions",
    "DiagramRows",
    "compose",
    "DiagramRenderer",
    "FENError",
    "EmptyInputError",
    "MissingSideToMoveError",
    "RankCountError",
    "FileCountError",
    "UnknownPieceSymbolError",
]
