"""Exceptions raised by the scaffold's helpers."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from e2e.polling import PollOutcome


class FrameworkError(Exception):
    """Base class for scaffold errors."""
    pass


class ConfigurationError(FrameworkError):
    """Raised when a helper is used without the settings it needs."""
    pass


class ConditionNotMet(FrameworkError):
    """Raised when a retried wait ends without the condition holding."""

    def __init__(self, message: str, outcome: "PollOutcome"):
        super().__init__(message)
        self.outcome = outcome


class StatusMismatch(FrameworkError):
    """Raised when an HTTP response carries an unexpected status code."""

    def __init__(self, expected: int, actual: int, url: Optional[str] = None):
        super().__init__(f"Status mismatch: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual
        self.url = url
