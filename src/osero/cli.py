"""
Console entry point for Osero.
"""
import argparse
import logging
import os
import sys
from typing import Callable, List, Optional, TextIO

from .config import Config, get_default_config
from .game import OseroGame, RULE
from .logger import setup_logger

logger = logging.getLogger(__name__)


def load_config(path: Optional[str]) -> Config:
    """Load the config file if it exists, otherwise use defaults."""
    if path and os.path.exists(path):
        return Config.load(path)
    if path:
        logger.warning("Config file %s not found, using default configuration", path)
    return get_default_config()


def main(argv: Optional[List[str]] = None, input_fn: Callable[[str], str] = input,
         out: Optional[TextIO] = None) -> int:
    """Show the banner, ask to start, and play one game. Returns the exit status."""
    parser = argparse.ArgumentParser(description='Play Osero in the console')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file')
    args = parser.parse_args(argv)

    out = out or sys.stdout
    config = load_config(args.config)
    session = setup_logger(config)

    try:
        print(RULE, file=out)
        print("-       Osero        -", file=out)
        print(RULE, file=out)
        print("A two-player Reversi game for the console.", file=out)
        if input_fn("Start the game? (y/n): ").strip() != config.game.affirmative_answer:
            print("Exiting the game.", file=out)
            return 0

        OseroGame(config=config, input_fn=input_fn, out=out).run()
        return 0
    except KeyboardInterrupt:
        print("\nInterrupted.", file=out)
        return 130
    except EOFError:
        logger.error("Standard input closed before the game finished")
        return 1
    finally:
        session.close()


if __name__ == "__main__":
    sys.exit(main())
