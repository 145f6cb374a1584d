"""
Main application module.
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import Settings
from .console import ParkingLotConsole
from .utils import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parkinglot",
        description="Interactive parking lot slot allocator.")
    parser.add_argument("--slots", type=int, default=None,
                        help="create the lot with this many slots instead of asking")
    parser.add_argument("--log-level", default=None,
                        help="logging level (default: WARNING or $PARKINGLOT_LOG_LEVEL)")
    parser.add_argument("--log-file", default=None,
                        help="also write logs to this file")
    return parser


def load_settings(argv: Optional[List[str]] = None) -> Settings:
    """Environment settings with command-line flags layered on top."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        base = Settings.from_env()
    except ValidationError as e:
        parser.error(f"invalid environment settings: {e}")

    overrides = {}
    if args.slots is not None:
        overrides["total_slots"] = args.slots
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.log_file is not None:
        overrides["log_file"] = args.log_file

    try:
        return Settings(**{**base.model_dump(), **overrides})
    except ValidationError as e:
        parser.error(str(e))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point of the application."""
    settings = load_settings(argv)
    configure_logging(settings.log_level, settings.log_file)
    return ParkingLotConsole(settings=settings).run()


if __name__ == "__main__":
    sys.exit(main())
