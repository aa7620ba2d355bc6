#!/usr/bin/env python3

import sys
from services.orchestrator import ResetOrchestrator
from logger import get_logger

logger = get_logger()


def report(result):
    """Log an OperationResult and exit non-zero on failure."""
    if result.success:
        logger.info(f"\n✓ {result.message}")
    else:
        logger.error(f"\n✗ {result.error}")
        sys.exit(1)


def cmd_paths(args, services):
    """Show which editor paths exist."""
    statuses = services.identifiers.detect_paths()

    logger.info(f"\n{services.config.app_name} paths:")
    logger.info("=" * 80)
    for status in statuses:
        mark = "✓" if status.exists else "✗"
        logger.info(f"{mark} {status.name:<16} {status.path}")

    found = sum(1 for status in statuses if status.exists)
    logger.info(f"\nFound {found} of {len(statuses)} paths")


def cmd_reset(args, services):
    """Run the full reset after confirmation."""
    if not args.yes:
        logger.info(f"\nApp data:  {services.config.app_support_dir}")
        logger.info(f"Cache:     {services.config.cache_dir}")
        response = input(
            f"\nThis closes {services.config.app_name} and deletes its caches, "
            "session data and identifiers. Continue? (yes/no): "
        )
        if response.strip().lower() != "yes":
            logger.info("Reset cancelled.")
            return

    report(ResetOrchestrator(services).full_reset())


def cmd_reset_ids(args, services):
    """Replace identifiers in place, keeping the rest of storage.json."""
    ids = services.identifiers.reset_machine_ids()
    logger.info(f"\n✓ Machine ids reset (devDeviceId {ids.dev_device_id})")


def setup_parser(subparsers):
    """Setup state subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "state",
        help="Reset the editor's local state",
        description="Inspect and reset caches, user data and machine identifiers",
    )

    state_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available state commands",
        dest="subcommand",
        required=True,
    )

    # state paths
    paths_parser = state_subparsers.add_parser(
        "paths", help="Show which editor paths exist"
    )
    paths_parser.set_defaults(func=cmd_paths)

    # state reset
    reset_parser = state_subparsers.add_parser(
        "reset", help="Close the editor and wipe caches, user data and identifiers"
    )
    reset_parser.add_argument(
        "--yes", "-y", action="store_true", help="Skip the confirmation prompt"
    )
    reset_parser.set_defaults(func=cmd_reset)

    # state reset-ids
    reset_ids_parser = state_subparsers.add_parser(
        "reset-ids", help="Only replace the machine identifiers"
    )
    reset_ids_parser.set_defaults(func=cmd_reset_ids)
