#!/usr/bin/env python3

import sys
from getpass import getpass
from cli.state import report
from models.credentials import Credentials
from services.orchestrator import ResetOrchestrator
from logger import get_logger

logger = get_logger()


def cmd_launch(args, services):
    """Start the editor from its install location."""
    if not services.launcher.launch():
        sys.exit(1)


def cmd_onboard(args, services):
    """Click through onboarding in an already running editor."""
    report(services.onboarding.complete())


def cmd_login(args, services):
    """Reset, relaunch and prepare the browser login."""
    password = getpass("Password: ")
    if not password:
        logger.error("Password cannot be empty.")
        sys.exit(1)

    credentials = Credentials(email=args.email, password=password)
    result = ResetOrchestrator(services).auto_login(credentials)
    report(result)

    if result.details.get("needs_browser_login"):
        logger.info("Finish the login in the browser window that was opened.")


def setup_parser(subparsers):
    """Setup app subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "app",
        help="Launch and drive the editor",
        description="Launch the editor, complete onboarding and auto-login",
    )

    app_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available app commands",
        dest="subcommand",
        required=True,
    )

    # app launch
    launch_parser = app_subparsers.add_parser("launch", help="Start the editor")
    launch_parser.set_defaults(func=cmd_launch)

    # app onboard
    onboard_parser = app_subparsers.add_parser(
        "onboard", help="Complete the first-run screens with keyboard input"
    )
    onboard_parser.set_defaults(func=cmd_onboard)

    # app login
    login_parser = app_subparsers.add_parser(
        "login", help="Full reset, relaunch, onboarding and browser hand-off"
    )
    login_parser.add_argument("--email", required=True, help="Account email")
    login_parser.set_defaults(func=cmd_login)
