"""
Command-line interface for playing a game in the terminal.
"""

import argparse
import logging
from typing import List, Optional

from totito.api import parse_move_list, play_game
from totito.games.engine import GameEngine
from totito.utils.config import LOG_LEVELS, Config


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play a two-player 3x3 game in the terminal"
    )
    parser.add_argument(
        "--first", "-f",
        choices=["X", "O"],
        default="X",
        help="Player who moves first (default: X)",
    )
    parser.add_argument(
        "--log-level", "-l",
        choices=list(LOG_LEVELS),
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--moves", "-m",
        type=str,
        default=None,
        help="Semicolon-separated scripted moves (e.g., '0,0;1,1;0,1'). Disables prompting.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    config = Config(first_player=args.first, log_level=args.log_level)
    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    moves = None
    if args.moves is not None:
        try:
            moves = parse_move_list(args.moves)
        except ValueError as e:
            print(f"Invalid --moves: {e}")
            return 2

    engine = GameEngine(config)
    play_game(engine, moves=moves)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
