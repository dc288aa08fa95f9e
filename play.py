#!/usr/bin/env python3
"""
Play TicTacToe at the console, against a person or the computer.

Usage:
    python play.py                     # Formidable computer
    python play.py --tremble 0.3       # Computer that slips now and then
    python play.py --seed 7 --explain  # Reproducible, and say why it moved
"""

import sys
import argparse
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictac import begin
from tictac.console import PREAMBLE, ConsoleReferee


def main():
    parser = argparse.ArgumentParser(description="Play TicTacToe")
    parser.add_argument("--seed", type=int, default=None, help="Seed for computer tie-breaks")
    parser.add_argument("--tremble", type=float, default=0.0,
                        help="Probability a computer plays a lower-priority move (0-1)")
    parser.add_argument("--explain", action="store_true", help="Show the rule behind computer moves")

    args = parser.parse_args()

    if not 0.0 <= args.tremble <= 1.0:
        parser.error("--tremble must be between 0 and 1")

    print(PREAMBLE)
    referee = ConsoleReferee(tremble=args.tremble, seed=args.seed, explain=args.explain)

    try:
        match_up = referee.introduce({})
        begin(referee, match_up)
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
