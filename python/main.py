#!/usr/bin/env python3
"""Sliding puzzle engine.

Usage::

    python main.py shuffle -r 4 -c 4      # random solvable 4×4 board
    python main.py solve "1,2,3,4,5,0,7,8,6"
    python main.py --help
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from npuzzle.cli import app  # noqa: E402

if __name__ == "__main__":
    app()
