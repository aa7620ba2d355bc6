"""Process lifecycle control for the target editor."""

import time
from typing import Callable, List
import psutil
from config import Config
from logger import get_logger

logger = get_logger()


class ProcessController:
    """Finds and stops the editor process by image name.

    Args:
        config: Application configuration (process name, timing).
        sleep: Sleep function, injectable for tests.
    """

    def __init__(self, config: Config, sleep: Callable[[float], None] = time.sleep):
        self.config = config
        self.sleep = sleep

    def _matching_processes(self) -> List[psutil.Process]:
        target = self.config.process_name.lower()
        matches = []
        for proc in psutil.process_iter(["name"]):
            name = proc.info.get("name") or ""
            if name.lower() == target:
                matches.append(proc)
        return matches

    def is_running(self) -> bool:
        """Check the OS process table for the editor.

        Returns:
            True if at least one matching process exists. Errors while
            reading the process table are treated as "not running".
        """
        try:
            return bool(self._matching_processes())
        except psutil.Error as e:
            logger.debug(f"Could not read process table: {e}")
            return False

    def _signal_all(self, force: bool) -> None:
        for proc in self._matching_processes():
            try:
                if force:
                    proc.kill()
                else:
                    proc.terminate()
            except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
                logger.debug(f"Skipping pid {proc.pid}: {e}")

    def terminate(self) -> bool:
        """Stop the editor: graceful first, then forced.

        Returns:
            True once both attempts have been made, even if a process is
            still alive (a warning is logged). False only if an unexpected
            error interrupted the sequence.
        """
        name = self.config.app_name
        wait = self.config.timing.terminate_wait
        try:
            logger.info(f"\n🚫 Closing {name}...")

            if not self.is_running():
                logger.info(f"✓ {name} is not running")
                return True

            logger.info(f"{name} is running, shutting it down...")

            logger.info("Attempt 1: graceful shutdown...")
            self._signal_all(force=False)
            self.sleep(wait)
            if not self.is_running():
                logger.info(f"✓ {name} closed")
                return True

            logger.info("Attempt 2: forced shutdown...")
            self._signal_all(force=True)
            self.sleep(wait)
            if not self.is_running():
                logger.info(f"✓ {name} force-closed")
                return True

            logger.warning(f"⚠️  {name} may still be running, continuing anyway")
            return True

        except psutil.Error as e:
            logger.error(f"Failed to close {name}: {e}")
            return False
