"""Playwright end-to-end test scaffold."""

from e2e.api import ApiHelper
from e2e.auth import AuthHelper, has_storage_state, storage_state_path
from e2e.config import FrameworkConfig
from e2e.errors import ConditionNotMet, ConfigurationError, FrameworkError, StatusMismatch
from e2e.logging_setup import STEP, configure_logging, log_step
from e2e.navigation import Navigator
from e2e.polling import InvalidConfiguration, PollConfig, PollOutcome, PollStatus, poll
from e2e.screenshots import ScreenshotHelper
from e2e.session import SessionManager
from e2e.waits import WaitHelper

__all__ = [
    "ApiHelper",
    "AuthHelper",
    "ConditionNotMet",
    "ConfigurationError",
    "FrameworkConfig",
    "FrameworkError",
    "InvalidConfiguration",
    "Navigator",
    "PollConfig",
    "PollOutcome",
    "PollStatus",
    "STEP",
    "ScreenshotHelper",
    "SessionManager",
    "StatusMismatch",
    "WaitHelper",
    "configure_logging",
    "has_storage_state",
    "log_step",
    "poll",
    "storage_state_path",
]
