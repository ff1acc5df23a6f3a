"""
Run fen2png from the command line.

Usage:
    python -m fen2png [options] <fen> <output-file>
"""

import sys

from fen2png.cli import main

if __name__ == "__main__":
    sys.exit(main())
