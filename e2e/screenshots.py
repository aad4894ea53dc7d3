"""ScreenshotHelper — full-page, element, and on-failure captures."""

import logging
import re
import time
from pathlib import Path
from typing import Optional

from e2e.config import FrameworkConfig


def sanitize_title(title: str) -> str:
    return re.sub(r"[^a-z0-9]", "_", title, flags=re.IGNORECASE).lower()


class ScreenshotHelper:
    def __init__(
        self,
        page,
        config: Optional[FrameworkConfig] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.page = page
        self.config = config or FrameworkConfig()
        self._logger = logger or logging.getLogger(__name__)

    def _path(self, filename: str) -> Path:
        directory = Path(self.config.screenshot_dir)
        directory.mkdir(parents=True, exist_ok=True)
        return directory / filename

    async def capture_full_page(self, filename: str) -> bytes:
        self._logger.info(f"Capturing full page screenshot: {filename}")
        return await self.page.screenshot(path=str(self._path(filename)), full_page=True)

    async def capture_element(self, selector: str, filename: str) -> bytes:
        self._logger.info(f"Capturing element screenshot: {selector} -> {filename}")
        element = self.page.locator(selector)
        return await element.screenshot(path=str(self._path(filename)))

    async def capture_on_failure(self, title: str, status: Optional[str]) -> Optional[Path]:
        """Capture a full-page screenshot unless the test passed."""
        if status == "passed":
            return None
        filename = f"failure-{sanitize_title(title)}-{int(time.time() * 1000)}.png"
        await self.capture_full_page(filename)
        self._logger.error(f"Test failed: {title}. Screenshot captured.")
        return self._path(filename)
