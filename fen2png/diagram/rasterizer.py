"""
Glyph rasterizer built on Pillow.

Draws each composed row as one line of text. Row i sits on the baseline
(i + 1) * cell, where cell = size / 10 is both the line height and the
glyph advance of the diagram font.
"""

import logging
from pathlib import Path
from typing import Union

from PIL import Image, ImageDraw, ImageFont

from fen2png.config import RenderOptions
from fen2png.diagram.composer import DiagramRows

logger = logging.getLogger(__name__)

FontLike = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


def load_font(font_path: Union[str, Path], size: int) -> ImageFont.FreeTypeFont:
    """
    Load the diagram font sized for a size x size canvas.

    Raises:
        OSError: If the file cannot be read as a TrueType font
    """
    font = ImageFont.truetype(str(font_path), size=size / 10)
    logger.info(f"Loaded diagram font: {font_path} ({size}px diagram)")
    return font


def new_canvas(options: RenderOptions) -> Image.Image:
    """Blank canvas filled with the background colour."""
    if options.grayscale:
        red, green, blue = options.background
        # ITU-R 601-2 luma, as Image.convert("L") computes it
        luma = (red * 299 + green * 587 + blue * 114) // 1000
        return Image.new("L", (options.size, options.size), luma)
    return Image.new("RGBA", (options.size, options.size), options.background + (255,))


def _fill(options: RenderOptions):
    if options.grayscale:
        red, green, blue = options.foreground
        return (red * 299 + green * 587 + blue * 114) // 1000
    return options.foreground + (255,)


def rasterize(diagram: DiagramRows, font: FontLike, options: RenderOptions) -> Image.Image:
    """
    Render composed rows onto a new canvas.

    Args:
        diagram: Composed glyph rows
        font: Font loaded at size / 10 pixels
        options: Size and colours

    Returns:
        size x size image, mode "L" when grayscale else "RGBA"
    """
    canvas = new_canvas(options)
    draw = ImageDraw.Draw(canvas)
    fill = _fill(options)
    cell = options.cell_size

    for i, line in enumerate(diagram.lines()):
        draw.text((0, (i + 1) * cell), line, font=font, fill=fill, anchor="ls")

    indicator = diagram.turn_indicator
    if indicator is not None:
        # Offset of size/2 in 26.6 fixed point, i.e. size/128 pixels
        x = indicator.column * cell - options.size / 128
        y = (indicator.row + 1) * cell - cell * indicator.raise_fraction
        draw.text((x, y), indicator.glyph, font=font, fill=fill, anchor="ls")

    return canvas
