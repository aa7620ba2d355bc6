"""Open-loop driver for the editor's first-run screens.

The driver waits for the main window, then presses a fixed sequence of keys
with fixed delays. Nothing checks that a key press had the intended effect;
a change in the onboarding layout or slow rendering breaks the sequence.
"""

import time
from typing import Callable
from config import Config
from automation.base import Keyboard, WindowQuery
from automation.keys import CONFIRM, NAVIGATE
from models.result import OnboardingState, OperationResult
from logger import get_logger

logger = get_logger()


class OnboardingDriver:
    """Clicks through onboarding with keyboard input.

    Args:
        config: Application configuration (window title, timing).
        windows: Window lookup backend.
        keyboard: Key event backend.
        sleep: Sleep function, injectable for tests.
        clock: Monotonic clock, injectable for tests.
    """

    def __init__(
        self,
        config: Config,
        windows: WindowQuery,
        keyboard: Keyboard,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config
        self.windows = windows
        self.keyboard = keyboard
        self.sleep = sleep
        self.clock = clock

    def wait_for_window(self) -> bool:
        """Poll for the editor window until it appears or the timeout passes.

        The window is always queried at least once, even with a zero timeout.

        Returns:
            True if the window was seen, False on timeout.
        """
        timing = self.config.timing
        title = self.config.window_title
        start = self.clock()

        while True:
            try:
                if self.windows.exists(title):
                    logger.info(f"✓ Detected {title} window")
                    return True
            except Exception as e:
                logger.debug(f"Window query failed, retrying: {e}")

            if self.clock() - start >= timing.window_timeout:
                return False
            self.sleep(timing.window_poll_interval)

    def _activate(self) -> None:
        if not self.windows.activate(self.config.window_title):
            logger.warning("Failed to activate window")

    def _press(self, key: str, delay: float) -> None:
        self.keyboard.press(key)
        self.sleep(delay)

    def complete(self) -> OperationResult:
        """Run the onboarding key sequence.

        Returns:
            Success with onboarding=COMPLETED after the sequence ran,
            success with onboarding=NO_WINDOW if the window never appeared,
            or a failure with onboarding=FAILED if a backend raised.
        """
        timing = self.config.timing
        try:
            logger.info("\n🎯 Completing onboarding...")
            logger.info(f"\nWaiting for {self.config.window_title} window...")

            if not self.wait_for_window():
                logger.warning(
                    "⚠️  No window detected, the editor may already be set up"
                )
                return OperationResult.ok(
                    "No window detected", onboarding=OnboardingState.NO_WINDOW
                )

            logger.info(f"Waiting for the window to settle ({timing.settle_delay}s)...")
            self.sleep(timing.settle_delay)

            self._activate()
            self.sleep(timing.activate_delay)

            total = timing.confirm_pages + 1
            for step in range(1, timing.confirm_pages + 1):
                logger.info(f"--- Step {step}/{total}: press Enter ---")
                self._activate()
                self.sleep(timing.pre_confirm_delay)
                self._press(CONFIRM, timing.confirm_delay)
                self.sleep(timing.between_pages_delay)

            logger.info(f"\n--- Step {total}/{total}: navigate to Log in ---")
            self._activate()
            self.sleep(timing.activate_delay)

            for _ in range(timing.navigate_presses):
                self._press(NAVIGATE, timing.navigate_delay)

            self._press(CONFIRM, timing.confirm_delay)
            self.sleep(timing.final_delay)

            logger.info("\n✓ Onboarding finished, the browser should be open")
            return OperationResult.ok(
                "Onboarding completed", onboarding=OnboardingState.COMPLETED
            )

        except Exception as e:
            logger.warning(f"⚠️  Onboarding failed: {e}")
            return OperationResult.failed(str(e), onboarding=OnboardingState.FAILED)
