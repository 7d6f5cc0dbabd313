#!/usr/bin/env python3
"""CLI entry point for owner-mapping"""

import argparse
import sys

from .config import get_settings
from .main import run
from .utils import setup_logging


def parse_arguments(argv=None, settings=None):
    settings = settings or get_settings()
    parser = argparse.ArgumentParser(description="Map extracted owner text to structured owner records")
    parser.add_argument("--input-dir", type=str, default=settings.input_dir,
                        help="Directory of per-property JSON files (sales + current owner lines)")
    parser.add_argument("--output-dir", type=str, default=settings.output_dir,
                        help="Directory where owner_data.json is written")
    parser.add_argument("--log-level", type=str, default=settings.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Level for the log file under logs/")
    return parser.parse_args(argv)


def main(argv=None):
    """Main CLI entry point"""
    settings = get_settings()
    args = parse_arguments(argv, settings)
    setup_logging(args.log_level)

    try:
        failed = run(args.input_dir, args.output_dir, settings.vocabulary())
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        sys.exit(1)

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
