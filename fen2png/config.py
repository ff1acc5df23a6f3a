"""
Rendering configuration for FEN diagrams.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

DEFAULT_SIZE = 400
DEFAULT_BACKGROUND = "FFFFFF"
DEFAULT_FOREGROUND = "000000"

FONT_ENV_VAR = "FEN2PNG_FONT"

# Font candidates (checked in order of priority)
FONT_CANDIDATES = [
    "fonts/merida.ttf",
    str(Path(__file__).parent / "fonts" / "merida.ttf"),
    str(Path.home() / ".fonts" / "merida.ttf"),
    "/usr/local/share/fonts/merida.ttf",
    "/usr/share/fonts/truetype/merida/merida.ttf",
]


def parse_color(value: str) -> Color:
    """
    Parse a hexadecimal RRGGBB colour.

    Args:
        value: Six hex digits, with or without a leading '#'

    Returns:
        (red, green, blue) tuple

    Raises:
        ValueError: If value is not a valid RRGGBB string
    """
    digits = value[1:] if value.startswith("#") else value
    if len(digits) != 6:
        raise ValueError(f"invalid colour {value!r}, expected RRGGBB")
    try:
        packed = int(digits, 16)
    except ValueError:
        raise ValueError(f"invalid colour {value!r}, expected RRGGBB") from None
    return (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF


@dataclass(frozen=True)
class RenderOptions:
    """Options controlling how a FEN record is turned into a diagram.

    The core never mutates an instance; the command surface builds one
    and hands it to the decoder, composer and rasterizer.
    """

    size: int = DEFAULT_SIZE
    """Diagram width and height in pixels"""

    background: Color = parse_color(DEFAULT_BACKGROUND)
    """Canvas colour"""

    foreground: Color = parse_color(DEFAULT_FOREGROUND)
    """Glyph colour"""

    grayscale: bool = False
    """Produce a single-channel image"""

    coordinates: bool = False
    """Draw rank numbers and file letters in the frame"""

    flip: bool = False
    """View the board from Black's side"""

    auto_flip: bool = False
    """Flip when the side-to-move field is 'b'"""

    turn_indicator: bool = False
    """Mark the diagram when Black is to move"""

    base64: bool = False
    """Wrap the encoded PNG in base64"""

    def __post_init__(self):
        """Validate options after initialization."""
        if self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")

        for name in ("background", "foreground"):
            color = getattr(self, name)
            if len(color) != 3 or not all(0 <= channel <= 255 for channel in color):
                raise ValueError(f"{name} must be an (r, g, b) tuple in 0..255, got {color!r}")

    @property
    def cell_size(self) -> float:
        """Height of one text row and width of one glyph, in pixels."""
        return self.size / 10


def find_font(font_path: Optional[str] = None) -> Path:
    """
    Locate the diagram font file.

    Args:
        font_path: Explicit path; falls back to $FEN2PNG_FONT, then known locations

    Returns:
        Path to an existing TrueType file

    Raises:
        FileNotFoundError: If no font file can be found
    """
    candidates: List[str] = []
    if font_path:
        candidates.append(font_path)
    elif os.getenv(FONT_ENV_VAR):
        candidates.append(os.environ[FONT_ENV_VAR])
    else:
        candidates.extend(FONT_CANDIDATES)

    for candidate in candidates:
        path = Path(candidate).expanduser()
        if path.is_file():
            logger.debug(f"Using diagram font: {path}")
            return path

    raise FileNotFoundError(
        f"Diagram font not found (tried: {', '.join(candidates)})\n"
        f"Pass --font=<path> or set {FONT_ENV_VAR} to the Merida TrueType file"
    )
