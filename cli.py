#!/usr/bin/env python3
"""
cli.py - Command Line Launcher

Starts the greeting server on port 3000.

Usage:
    python cli.py [--log-level DEBUG]
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from boot.mains import run


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Greeting server")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level (default: GREETR_LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    run(args.log_level)


if __name__ == "__main__":
    main()
