"""
Rendering many diagrams at once: CSV batch files and Markdown documents.
"""

from fen2png.data.batch import BatchFileError, BatchRecord, BatchRenderer, BatchReport, read_batch_file
from fen2png.data.markdown import MarkdownFilter

__all__ = [
    "BatchFileError",
    "BatchRecord",
    "BatchRenderer",
    "BatchReport",
    "read_batch_file",
    "MarkdownFilter",
]
