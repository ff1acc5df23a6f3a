"""
Diagram layout, rasterization and encoding.
"""

from fen2png.diagram.composer import DiagramRows, TurnIndicator, compose
from fen2png.diagram.encoder import encode_base64, encode_png, write_output
from fen2png.diagram.rasterizer import load_font, rasterize

__all__ = [
    "DiagramRows",
    "TurnIndicator",
    "compose",
    "encode_base64",
    "encode_png",
    "write_output",
    "load_font",
    "rasterize",
]
