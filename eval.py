#!/usr/bin/env python3
"""
Evaluate the minimax opponent against a random player.

Usage:
    python eval.py
    python eval.py --games 500 --seed 1
    python eval.py --ordering legacy --out runs/legacy.json
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from mnk.cli import eval_main


if __name__ == "__main__":
    eval_main()
