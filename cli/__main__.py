#!/usr/bin/env python3
"""
SurfReset CLI - reset the editor's local state and drive its onboarding.

Usage:
    python -m cli [-v] <command> <subcommand> [options]

Commands:
    state    Reset caches, user data and machine identifiers
    app      Launch the editor, complete onboarding, auto-login

Examples:
    python -m cli state paths
    python -m cli state reset --yes
    python -m cli state reset-ids
    python -m cli app launch
    python -m cli app onboard
    python -m cli app login --email me@example.com
"""

import sys
import argparse
from cli import app, state
from config import load_config
from services.base import Services
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="SurfReset - editor state reset and onboarding automation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log at DEBUG level for this run",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    # Register each command's subparser
    state.setup_parser(subparsers)
    app.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config, level="DEBUG" if args.verbose else None)

            # Create services container for dependency injection
            services = Services(config)
            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
