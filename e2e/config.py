"""Configuration defaults for the end-to-end test scaffold."""

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from e2e.polling import PollConfig

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return default


@dataclass
class FrameworkConfig:
    """All configurable defaults for the browser, waits, and artifacts."""

    # Targets
    base_url: str = "https://playwright.dev/"
    api_base_url: Optional[str] = None

    # Timeouts (milliseconds)
    navigation_timeout: int = 30_000
    action_timeout: int = 10_000
    wait_timeout: int = 10_000
    cookie_banner_timeout: int = 2_000
    cookie_dismiss_delay: int = 500

    # Browser
    browser_name: str = "chromium"
    headless: bool = True
    viewport_width: int = 1280
    viewport_height: int = 720
    chromium_args: List[str] = field(default_factory=lambda: [
        "--disable-dev-shm-usage",
        "--no-first-run",
        "--disable-features=TranslateUI",
    ])

    # Artifacts
    screenshot_dir: str = "screenshots"
    auth_dir: str = ".auth"
    storage_state_name: str = "auth.json"

    # Condition polling
    poll_max_attempts: int = 5
    poll_retry_delay: float = 1.0  # seconds, fixed between attempts

    # Logging
    ci: bool = False  # debug output is suppressed on CI
    log_level: str = "INFO"

    def poll_config(self) -> PollConfig:
        return PollConfig(
            max_attempts=self.poll_max_attempts,
            retry_delay=self.poll_retry_delay,
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FrameworkConfig":
        """Build a config from environment variables, keeping defaults for unset keys."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            base_url=env.get("BASE_URL", defaults.base_url),
            api_base_url=env.get("API_BASE_URL") or defaults.api_base_url,
            browser_name=env.get("BROWSER", defaults.browser_name),
            headless=_parse_bool(env.get("HEADLESS"), defaults.headless),
            screenshot_dir=env.get("SCREENSHOT_DIR", defaults.screenshot_dir),
            auth_dir=env.get("AUTH_DIR", defaults.auth_dir),
            ci=_parse_bool(env.get("CI"), defaults.ci),
            log_level=env.get("LOG_LEVEL", defaults.log_level).upper(),
        )
