"""Interfaces for the desktop automation backends."""

from abc import ABC, abstractmethod


class WindowQuery(ABC):
    """Looks up top-level windows by title.

    Implementations wrap a platform windowing API; tests use an in-memory
    fake.
    """

    @abstractmethod
    def exists(self, title: str) -> bool:
        """Return True if a window with exactly this title exists."""
        pass

    @abstractmethod
    def activate(self, title: str) -> bool:
        """Bring the window with this title to the foreground.

        Returns:
            True if a window was found and activated.
        """
        pass


class Keyboard(ABC):
    """Emits synthetic key events to the focused window."""

    @abstractmethod
    def press(self, key: str) -> None:
        """Press and release a single key (see automation.keys)."""
        pass

    @abstractmethod
    def type_text(self, text: str) -> None:
        """Type a string character by character."""
        pass
