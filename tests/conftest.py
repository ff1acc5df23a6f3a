"""
Fixtures shared by the pipeline, batch, markdown and CLI tests.

Rendering needs the Merida font, which the test environment does not
ship. These fixtures replace font loading and rasterization with stand-ins
that still produce real (tiny) Pillow images.
"""

from unittest.mock import MagicMock

import pytest
from PIL import Image


@pytest.fixture
def fake_rasterize(monkeypatch):
    """Replace rasterize() in the pipeline with one returning a blank canvas."""
    calls = []

    def rasterize(diagram, font, options):
        calls.append((diagram, font, options))
        mode = "L" if options.grayscale else "RGBA"
        return Image.new(mode, (8, 8))

    monkeypatch.setattr("fen2png.pipeline.rasterize", rasterize)
    return calls


@pytest.fixture
def fake_font(monkeypatch, tmp_path):
    """Make font lookup and loading succeed without a real font file."""
    font_path = tmp_path / "merida.ttf"
    font_path.write_bytes(b"")
    loaded = []

    def load_font(path, size):
        loaded.append((path, size))
        return MagicMock(name=f"font-{size}")

    monkeypatch.setenv("FEN2PNG_FONT", str(font_path))
    monkeypatch.setattr("fen2png.pipeline.load_font", load_font)
    monkeypatch.setattr("fen2png.data.markdown.load_font", load_font)
    return loaded
