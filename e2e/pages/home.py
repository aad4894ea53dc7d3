"""Home page object."""

from typing import Optional
from urllib.parse import urljoin

from e2e.config import FrameworkConfig
from e2e.data.constants import HomePageTexts, Routes
from e2e.navigation import Navigator


class HomePage:
    def __init__(self, page, config: Optional[FrameworkConfig] = None):
        self.page = page
        self.config = config or FrameworkConfig()
        self.nav = Navigator(
            page,
            url=urljoin(self.config.base_url, Routes.HOME),
            header=HomePageTexts.HEADER,
            config=self.config,
            owner=type(self).__name__,
        )

    async def visit(self):
        await self.nav.visit()

    async def wait_for_page_load(self):
        await self.nav.wait_for_page_load()

    def header_text(self):
        """Locator for the highlighted word in the hero heading."""
        return self.page.get_by_role("heading", name="Playwright").locator("span")

    def header_with_text(self):
        return self.nav.header_with_text(self.header_text())
