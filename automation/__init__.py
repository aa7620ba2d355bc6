"""Desktop automation for the editor's onboarding screens."""

from automation.factory import get_desktop_backends

__all__ = ["get_desktop_backends"]
