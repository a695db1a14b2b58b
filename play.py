from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from config import (
    computer_side,
    get_computer_settings,
    get_ui_settings,
    load_config_from_file,
    setup_logging,
    starting_player,
)
from checkers.console import CheckersTextConsole, run_game
from checkers.engine import CheckersLogic
from checkers.strategy import get_move_strategy


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Play forward-only checkers in the terminal")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("--computer", dest="vs_computer", action="store_true",
                      help="Play against the computer")
    mode.add_argument("--pvp", dest="vs_computer", action="store_false",
                      help="Two players at one terminal")
    ap.set_defaults(vs_computer=None)
    ap.add_argument("--seed", type=int, default=None, help="Seed for the computer's move picker")
    ap.add_argument("--config", default=None, help="JSON configuration file")
    ap.add_argument("--log-level", default=None, type=str.upper,
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.config:
        load_config_from_file(args.config)
    setup_logging(args.log_level)

    seed = args.seed if args.seed is not None else get_computer_settings().seed
    engine = CheckersLogic(starting_player())
    try:
        run_game(
            engine,
            CheckersTextConsole(),
            vs_computer=args.vs_computer,
            strategy=get_move_strategy(seed),
            computer_side=computer_side(),
            show_legal_moves=get_ui_settings().show_legal_moves,
        )
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
