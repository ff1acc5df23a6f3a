"""
Image encoding and output sinks.
"""

import base64
import io
import logging
import sys
from pathlib import Path
from typing import Union

from PIL import Image

logger = logging.getLogger(__name__)

STDOUT = "-"


def encode_png(image: Image.Image) -> bytes:
    """Encode an image as PNG bytes."""
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def encode_base64(data: bytes) -> bytes:
    """Standard base64 (with padding, no line breaks)."""
    return base64.b64encode(data)


def write_output(data: bytes, destination: Union[str, Path]) -> None:
    """
    Write encoded bytes to a file, or to stdout when destination is "-".

    Raises:
        OSError: If the file cannot be written
    """
    if str(destination) == STDOUT:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        logger.debug(f"Wrote {len(data)} bytes to stdout")
        return

    Path(destination).write_bytes(data)
    logger.info(f"Wrote {destination} ({len(data):,} bytes)")
