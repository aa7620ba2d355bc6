"""Outcome objects returned by every public operation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class OnboardingState(str, Enum):
    """How the onboarding driver finished.

    NO_WINDOW is reported as a success, but it only means no window showed
    up before the timeout: the editor may already be set up, or it may have
    failed to start.
    """

    COMPLETED = "completed"
    NO_WINDOW = "no_window"
    FAILED = "failed"


@dataclass
class OperationResult:
    """Structured result: callers inspect this instead of catching exceptions.

    Attributes:
        success: Whether the operation achieved its goal.
        message: Human readable summary on success.
        error: Human readable reason on failure.
        details: Optional extra fields (e.g. needs_browser_login).
    """

    success: bool
    message: Optional[str] = None
    error: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, message: str, **details) -> "OperationResult":
        return cls(success=True, message=message, details=details)

    @classmethod
    def failed(cls, error: str, **details) -> "OperationResult":
        return cls(success=False, error=error, details=details)

    def to_dict(self) -> dict:
        """Flatten into {success, message|error, ...details}."""
        data: Dict[str, Any] = {"success": self.success}
        if self.success:
            data["message"] = self.message
        else:
            data["error"] = self.error
        for key, value in self.details.items():
            data[key] = value.value if isinstance(value, Enum) else value
        return data
