"""WaitHelper — element, URL, and load-state waits plus retried conditions."""

import logging
import re
from typing import Optional, Union

from playwright.async_api import expect

from e2e.config import FrameworkConfig
from e2e.errors import ConditionNotMet
from e2e.polling import PollConfig, PollOutcome, Predicate, poll


class WaitHelper:
    """Reusable waits bound to one Playwright page."""

    def __init__(
        self,
        page,
        config: Optional[FrameworkConfig] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.page = page
        self.config = config or FrameworkConfig()
        self._logger = logger or logging.getLogger(__name__)

    def _timeout(self, timeout: Optional[int]) -> int:
        return self.config.wait_timeout if timeout is None else timeout

    async def wait_for_visible(self, selector: str, timeout: Optional[int] = None):
        self._logger.debug(f"Waiting for element to be visible: {selector}")
        await expect(self.page.locator(selector)).to_be_visible(timeout=self._timeout(timeout))

    async def wait_for_hidden(self, selector: str, timeout: Optional[int] = None):
        self._logger.debug(f"Waiting for element to be hidden: {selector}")
        await expect(self.page.locator(selector)).to_be_hidden(timeout=self._timeout(timeout))

    async def wait_for_element_count(self, selector: str, count: int, timeout: Optional[int] = None):
        self._logger.debug(f"Waiting for {count} elements: {selector}")
        await expect(self.page.locator(selector)).to_have_count(count, timeout=self._timeout(timeout))

    async def wait_for_text(self, text: str, timeout: Optional[int] = None):
        self._logger.debug(f"Waiting for text: {text}")
        await self.page.wait_for_selector(
            f"text={text}", timeout=self._timeout(timeout), state="visible"
        )

    async def wait_for_url_pattern(self, pattern: Union[str, re.Pattern], timeout: Optional[int] = None):
        self._logger.debug(f"Waiting for URL pattern: {pattern}")
        await self.page.wait_for_url(pattern, timeout=self._timeout(timeout))

    async def wait_for_network_idle(self, timeout: Optional[int] = None):
        self._logger.debug("Waiting for network idle")
        await self.page.wait_for_load_state("networkidle", timeout=self._timeout(timeout))

    async def _page_sleep(self, seconds: float):
        await self.page.wait_for_timeout(seconds * 1000)

    async def wait_with_retry(
        self,
        condition: Predicate,
        max_retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
    ) -> PollOutcome:
        """Poll ``condition`` on the page's clock; raise ConditionNotMet unless it holds."""
        config = PollConfig(
            max_attempts=self.config.poll_max_attempts if max_retries is None else max_retries,
            retry_delay=self.config.poll_retry_delay if retry_delay is None else retry_delay,
        )
        outcome = await poll(condition, config, sleep=self._page_sleep, log=self._logger)
        if outcome.succeeded:
            return outcome

        message = f"Condition not met after {outcome.attempts} attempts ({outcome.status.value})"
        self._logger.error(message)
        raise ConditionNotMet(message, outcome) from outcome.error
