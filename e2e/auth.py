"""AuthHelper — log in and persist Playwright storage state between runs."""

import logging
from pathlib import Path
from typing import Optional

from e2e.config import FrameworkConfig


def storage_state_path(name: Optional[str] = None, config: Optional[FrameworkConfig] = None) -> Path:
    config = config or FrameworkConfig()
    return Path(config.auth_dir) / (name or config.storage_state_name)


def has_storage_state(name: Optional[str] = None, config: Optional[FrameworkConfig] = None) -> bool:
    return storage_state_path(name, config).exists()


class AuthHelper:
    """Saves and clears authenticated sessions for a page's browser context."""

    def __init__(
        self,
        page,
        config: Optional[FrameworkConfig] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.page = page
        self.config = config or FrameworkConfig()
        self._logger = logger or logging.getLogger(__name__)
        Path(self.config.auth_dir).mkdir(parents=True, exist_ok=True)

    async def login(
        self,
        username: str,
        password: str,
        storage_state_name: Optional[str] = None,
        login_path: Optional[str] = None,
    ) -> Path:
        """Optionally submit the login form at ``login_path``, then save storage state."""
        self._logger.info(f"Logging in as {username}")

        if login_path:
            await self.page.goto(login_path, timeout=self.config.navigation_timeout)
            await self.page.fill('[name="username"]', username)
            await self.page.fill('[name="password"]', password)
            await self.page.click('button[type="submit"]')
            await self.page.wait_for_load_state("domcontentloaded")

        state_path = storage_state_path(storage_state_name, self.config)
        await self.page.context.storage_state(path=str(state_path))
        self._logger.info(f"Authentication state saved to {state_path}")
        return state_path

    async def logout(self):
        self._logger.info("Logging out and clearing session")
        await self.page.context.clear_cookies()
