"""Real desktop backends: pywinctl for windows, pyautogui for keys.

Importing this module needs a graphical session, so it is only loaded by
automation.factory when no fake backends were supplied.
"""

import pyautogui
import pywinctl as pwc
from automation.base import Keyboard, WindowQuery
from automation.keys import normalize_key
from logger import get_logger

logger = get_logger()


class DesktopWindows(WindowQuery):
    """Window lookups through pywinctl."""

    def _find(self, title: str):
        windows = pwc.getWindowsWithTitle(title)
        return windows[0] if windows else None

    def exists(self, title: str) -> bool:
        return self._find(title) is not None

    def activate(self, title: str) -> bool:
        window = self._find(title)
        if window is None:
            return False
        try:
            return bool(window.activate(wait=True))
        except Exception as e:
            # pywinctl surfaces platform-specific errors here
            logger.warning(f"Failed to activate window '{title}': {e}")
            return False


class DesktopKeyboard(Keyboard):
    """Synthetic key events through pyautogui."""

    def press(self, key: str) -> None:
        pyautogui.press(normalize_key(key))

    def type_text(self, text: str) -> None:
        pyautogui.write(text)
