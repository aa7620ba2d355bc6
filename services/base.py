"""Base services container for dependency injection."""

import time
from typing import Callable
from config import Config


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject fakes for testing. Desktop automation backends are only
    created when the onboarding driver is first used and no fakes were given.

    Args:
        config: Application configuration object.
        windows: Optional WindowQuery backend (testing).
        keyboard: Optional Keyboard backend (testing).
        opener: Optional callable used to open the executable (testing).
        sleep: Sleep function shared by every timed step.
        clock: Monotonic clock for the window poll loop.
    """

    def __init__(
        self,
        config: Config,
        windows=None,
        keyboard=None,
        opener=None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config
        self.sleep = sleep
        self.clock = clock
        self._windows = windows
        self._keyboard = keyboard
        self._onboarding = None

        # Lazy import to avoid circular dependencies
        from services.processes import ProcessController
        from services.state_reset import StateResetService
        from services.identifiers import IdentifierService
        from services.launcher import AppLauncher

        self.processes = ProcessController(config, sleep=sleep)
        self.state = StateResetService(config)
        self.identifiers = IdentifierService(config, state=self.state)
        self.launcher = AppLauncher(config, opener=opener)

    @property
    def onboarding(self):
        """The onboarding driver, created on first access."""
        if self._onboarding is None:
            from automation.onboarding import OnboardingDriver

            windows, keyboard = self._windows, self._keyboard
            if windows is None or keyboard is None:
                from automation import get_desktop_backends

                desktop_windows, desktop_keyboard = get_desktop_backends()
                windows = windows or desktop_windows
                keyboard = keyboard or desktop_keyboard

            self._onboarding = OnboardingDriver(
                self.config, windows, keyboard, sleep=self.sleep, clock=self.clock
            )
        return self._onboarding
