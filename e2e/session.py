"""SessionManager — Playwright lifecycle: browser, contexts, request contexts, cleanup."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from playwright.async_api import async_playwright

from e2e.config import FrameworkConfig
from e2e.errors import ConfigurationError

logger = logging.getLogger(__name__)


class SessionManager:
    """Owns one Playwright instance and the browser and contexts launched from it."""

    def __init__(self, config: Optional[FrameworkConfig] = None):
        self.config = config or FrameworkConfig()
        self._playwright = None
        self._browser = None
        self._contexts: List = []
        self._request_contexts: List = []

    async def __aenter__(self) -> "SessionManager":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def initialize(self):
        """Start Playwright and launch the configured browser."""
        if self._browser:
            return
        self._playwright = await async_playwright().start()
        browser_type = getattr(self._playwright, self.config.browser_name, None)
        if browser_type is None:
            await self._playwright.stop()
            self._playwright = None
            raise ConfigurationError(f"Unknown browser: {self.config.browser_name}")

        args = self.config.chromium_args if self.config.browser_name == "chromium" else []
        try:
            self._browser = await browser_type.launch(headless=self.config.headless, args=args)
        except BaseException:
            await self._playwright.stop()
            self._playwright = None
            raise
        logger.info(
            f"SessionManager: {self.config.browser_name} launched (headless={self.config.headless})"
        )

    async def new_context(self, storage_state: Optional[Union[str, Path]] = None):
        """Create a browser context with the configured viewport, base URL, and timeouts."""
        if not self._browser:
            await self.initialize()

        context = await self._browser.new_context(
            base_url=self.config.base_url,
            viewport={
                "width": self.config.viewport_width,
                "height": self.config.viewport_height,
            },
            storage_state=str(storage_state) if storage_state else None,
        )
        context.set_default_timeout(self.config.action_timeout)
        context.set_default_navigation_timeout(self.config.navigation_timeout)
        self._contexts.append(context)
        return context

    async def new_page(self, storage_state: Optional[Union[str, Path]] = None):
        context = await self.new_context(storage_state=storage_state)
        return await context.new_page()

    async def new_request_context(self):
        """Create an APIRequestContext rooted at the API (or app) base URL."""
        if not self._playwright:
            await self.initialize()
        request = await self._playwright.request.new_context(
            base_url=self.config.api_base_url or self.config.base_url,
        )
        self._request_contexts.append(request)
        return request

    async def is_healthy(self) -> bool:
        """Check if the browser is connected and the newest page responds."""
        if not self._browser or not self._browser.is_connected():
            return False
        if not self._contexts:
            return True

        try:
            pages = self._contexts[-1].pages
            if pages:
                await pages[-1].evaluate("() => true")
            return True
        except Exception as e:
            logger.warning(f"SessionManager: health check failed: {e}")
            return False

    async def close(self):
        """Gracefully close request contexts, browser contexts, the browser, and Playwright."""
        for request in self._request_contexts:
            try:
                await request.dispose()
            except Exception as e:
                logger.warning(f"Error disposing request context: {e}")
        self._request_contexts.clear()

        for context in self._contexts:
            try:
                await context.close()
            except Exception as e:
                logger.warning(f"Error closing context: {e}")
        self._contexts.clear()

        if self._browser:
            try:
                await self._browser.close()
            except Exception as e:
                logger.error(f"Error closing browser: {e}")
            self._browser = None

        if self._playwright:
            try:
                await self._playwright.stop()
            except Exception as e:
                logger.error(f"Error stopping Playwright: {e}")
            self._playwright = None
        logger.info("SessionManager: closed")
