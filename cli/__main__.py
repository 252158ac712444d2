#!/usr/bin/env python3
"""
Tally CLI - Interactive in-memory bank account ledger.

Usage:
    python -m cli [--config PATH] [--log-level LEVEL]

Accounts exist only for the lifetime of the session; choose 8 at the menu
(or close input) to exit.
"""

import sys
import argparse
from pathlib import Path
from cli.menu import run_session
from config import load_config
from services.base import Services
from logger import setup_logging, shutdown_logging


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Tally - In-memory bank account ledger",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: ~/.config/tally.toml)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Override the configured file log level",
    )
    args = parser.parse_args()

    try:
        config = load_config(args.config)
        if args.log_level:
            config.log_level = args.log_level

        setup_logging(config)

        # One services container (and registry) per session
        services = Services(config)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)

    try:
        run_session(services)
    finally:
        shutdown_logging()


if __name__ == "__main__":
    main()
