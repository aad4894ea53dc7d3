"""Navigator — navigation and load-state waits composed into page objects."""

import logging
import re
from typing import Optional

from e2e.config import FrameworkConfig
from e2e.errors import ConfigurationError

COOKIE_ACCEPT_SELECTORS = [
    'button:has-text("Accept")',
    'button:has-text("Accept All")',
    'button:has-text("Accept Cookies")',
    '[data-testid="cookie-accept"]',
    '[class*="cookie"][class*="accept"]',
]


class Navigator:
    """Page navigation capability shared by page objects."""

    def __init__(
        self,
        page,
        url: str = "",
        header: str = "",
        config: Optional[FrameworkConfig] = None,
        logger: Optional[logging.Logger] = None,
        owner: str = "page",
    ):
        self.page = page
        self.url = url
        self.header = header
        self.config = config or FrameworkConfig()
        self.owner = owner
        self._logger = logger or logging.getLogger(__name__)

    def _timeout(self, timeout: Optional[int]) -> int:
        return self.config.navigation_timeout if timeout is None else timeout

    async def visit(self, custom_url: Optional[str] = None):
        url = custom_url or self.url
        if not url:
            raise ConfigurationError(
                f"No URL specified for {self.owner}. Please provide a URL."
            )
        self._logger.info(f"Navigating to {url}")
        await self.page.goto(url, timeout=self.config.navigation_timeout)

    async def wait_for_dom_content_loaded(self, timeout: Optional[int] = None):
        await self.page.wait_for_load_state(
            "domcontentloaded", timeout=self._timeout(timeout)
        )

    async def wait_for_page_load(self, timeout: Optional[int] = None):
        """Wait for the configured URL (if any) and for the DOM to be loaded."""
        if self.url:
            await self.page.wait_for_url(
                re.compile(re.escape(self.url)),
                timeout=self._timeout(timeout),
            )
        await self.wait_for_dom_content_loaded(timeout)

    async def reload_page(self):
        await self.page.reload()
        await self.wait_for_dom_content_loaded()

    async def accept_cookies(self) -> bool:
        """Click the first visible cookie-consent button. Returns True if one was clicked."""
        for selector in COOKIE_ACCEPT_SELECTORS:
            try:
                button = self.page.locator(selector).first
                if await button.is_visible(timeout=self.config.cookie_banner_timeout):
                    await button.click()
                    await self.page.wait_for_timeout(self.config.cookie_dismiss_delay)
                    self._logger.debug(f"Accepted cookies via {selector}")
                    return True
            except Exception as e:
                self._logger.debug(f"Cookie selector {selector} failed: {e}")
        return False

    def header_with_text(self, locator):
        return locator.get_by_text(self.header, exact=True)
