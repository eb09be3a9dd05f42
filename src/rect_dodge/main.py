"""
main.py
-------
Command-line entry point for rect-dodge.

Usage:
    rect-dodge                          # default tuning from config/game.json
    rect-dodge --config my_game.json    # alternate tuning file
    rect-dodge --log-level VERBOSE      # per-frame trace output
"""

import argparse
import sys

from rect_dodge.core.debug.debug_logger import DebugLogger, LoggerConfig
from rect_dodge.core.runtime.game_config import GameConfig
from rect_dodge.core.runtime.game_settings import Debug


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rect-dodge", description="Dodge and shoot falling squares")
    parser.add_argument("--config", default="game.json",
                        help="Gameplay config file (name in config/ or absolute path)")
    parser.add_argument("--log-level", default=LoggerConfig.LOG_LEVEL,
                        choices=list(DebugLogger.LEVEL_VALUES),
                        help="Console log verbosity")
    parser.add_argument("--quiet", action="store_true",
                        help="Disable console logging")
    parser.add_argument("--debug-hud", action="store_true",
                        help="Start with the debug overlay visible")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    DebugLogger.set_level(args.log_level)
    if args.quiet:
        LoggerConfig.ENABLE_LOGGING = False
    if args.debug_hud:
        Debug.HUD_VISIBLE = True

    # Imported here so --help works without initializing pygame
    from rect_dodge.core.runtime.main_loop import MainLoop

    MainLoop(config=GameConfig.load(args.config)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
