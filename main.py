"""
Main entry point for console TicTacToe.

This script ties together:
- Logic (board, win checking, AI, game session) from the tictactoe package
- The colored console UI from ui.py

Run this script to play TicTacToe in the terminal!
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from tictactoe.config import Difficulty, GameMode, GameSettings
from tictactoe.game_state import Geometry
from ui import TicTacToeUI


def build_parser() -> argparse.ArgumentParser:
    """Command line options. Anything left out is asked for in the menus."""
    parser = argparse.ArgumentParser(description="TicTacToe on a 3x3 board or a 3x3x3 cube")
    parser.add_argument(
        "--board",
        choices=[geometry.value for geometry in Geometry],
        help="Board type: 2d (3x3) or 3d (3x3x3)"
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GameMode],
        help="single (vs AI) or multi (vs human)"
    )
    parser.add_argument(
        "--difficulty",
        choices=[level.name.lower() for level in Difficulty],
        help="AI difficulty for single-player games"
    )
    parser.add_argument(
        "--name",
        help="Your name (Player 1 in multiplayer)"
    )
    parser.add_argument(
        "--name2",
        help="Player 2 name in multiplayer"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the AI play first (as X)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the AI's random choices (repeatable games)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log AI decisions to stderr"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=GameSettings.LOG_FORMAT,
    )

    ui = TicTacToeUI(
        geometry=Geometry(args.board) if args.board else None,
        mode=GameMode(args.mode) if args.mode else None,
        difficulty=Difficulty[args.difficulty.upper()] if args.difficulty else None,
        player_one_name=args.name,
        player_two_name=args.name2,
        ai_first=args.ai_first,
        rng=random.Random(args.seed),
    )
    return ui.run()


if __name__ == "__main__":
    sys.exit(main())
