"""Factory for the desktop automation backends."""

from typing import Tuple
from automation.base import Keyboard, WindowQuery
from logger import get_logger

logger = get_logger()


def get_desktop_backends() -> Tuple[WindowQuery, Keyboard]:
    """Create the real window and keyboard backends.

    The import is deferred so that code paths (and tests) which never touch
    the desktop do not need a display.

    Returns:
        (WindowQuery, Keyboard) pair.
    """
    from automation.desktop import DesktopKeyboard, DesktopWindows

    logger.debug("Initializing desktop automation backends")
    return DesktopWindows(), DesktopKeyboard()
