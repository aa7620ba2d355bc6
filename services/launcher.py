"""Locating and starting the editor executable."""

import os
import subprocess
import sys
from pathlib import Path
from typing import Callable, Optional
from config import Config
from logger import get_logger

logger = get_logger()


class ExecutableNotFoundError(Exception):
    """None of the known install locations contains the editor."""


def open_with_default_handler(path: Path) -> None:
    """Hand a path to the OS default-open mechanism."""
    if sys.platform == "win32":
        os.startfile(path)
    elif sys.platform == "darwin":
        subprocess.run(["open", str(path)], check=True)
    else:
        subprocess.run(["xdg-open", str(path)], check=True)


class AppLauncher:
    """Starts the editor from the first install location that exists.

    Args:
        config: Application configuration with executable candidates.
        opener: Callable that opens a path, defaults to the OS handler.
    """

    def __init__(self, config: Config, opener: Optional[Callable[[Path], None]] = None):
        self.config = config
        self.opener = opener or open_with_default_handler

    def locate_executable(self) -> Path:
        """Return the first candidate install path that exists.

        Raises:
            ExecutableNotFoundError: If no candidate exists.
        """
        for candidate in self.config.executable_candidates:
            if candidate.exists():
                logger.info(f"✓ Found {self.config.app_name}: {candidate}")
                return candidate

        raise ExecutableNotFoundError(
            f"{self.config.app_name} not found, make sure it is installed"
        )

    def launch(self) -> bool:
        """Start the editor.

        Only checks that the open call itself did not fail; whether the
        process actually comes up is not verified.

        Returns:
            True if the open call succeeded, False otherwise.

        Raises:
            ExecutableNotFoundError: If the editor is not installed.
        """
        logger.info(f"\n🚀 Launching {self.config.app_name}...")

        app_path = self.locate_executable()
        try:
            self.opener(app_path)
        except (OSError, subprocess.CalledProcessError) as e:
            logger.error(f"  ✗ Launch failed: {e}")
            return False

        logger.info(f"  ✓ {self.config.app_name} started")
        return True
