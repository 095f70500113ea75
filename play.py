#!/usr/bin/env python3
"""
Play m,n tic-tac-toe in the terminal against the minimax opponent.

Usage:
    python play.py                      # 3x3, computer plays O
    python play.py --rows 3 --cols 4
    python play.py --two-player
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from mnk.cli import play_main


if __name__ == "__main__":
    play_main()
