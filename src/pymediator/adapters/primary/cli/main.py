#!/usr/bin/env python3
import argparse
import logging
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from the working directory
dotenv_path = Path.cwd() / '.env'
if dotenv_path.exists():
    load_dotenv(dotenv_path)

from pymediator.configuration.settings import get_settings
from .demo_cli import setup_demo_commands
from .item_cli import setup_item_commands
from .order_cli import setup_order_commands


def configure_logging(level: str) -> None:
    """Configure root logging for CLI runs"""
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    )


def main():
    parser = argparse.ArgumentParser(description="Mediator request dispatch")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override PYMEDIATOR_LOG_LEVEL"
    )
    subparsers = parser.add_subparsers(dest="command")

    # Setup subcommands
    setup_item_commands(subparsers)
    setup_order_commands(subparsers)
    setup_demo_commands(subparsers)

    args = parser.parse_args()

    configure_logging(args.log_level or get_settings().log_level)

    # Use func attribute set by set_defaults
    if hasattr(args, "func"):
        sys.exit(args.func(args))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
