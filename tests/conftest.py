"""
Shared fixtures for the unit suite, and the --run-e2e switch that gates tests
driving a real browser.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from e2e.config import FrameworkConfig


def pytest_addoption(parser):
    parser.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="run tests marked e2e against a real browser",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-e2e"):
        return
    skip_e2e = pytest.mark.skip(reason="needs --run-e2e")
    for item in items:
        if item.get_closest_marker("e2e"):
            item.add_marker(skip_e2e)


@pytest.fixture
def config(tmp_path):
    return FrameworkConfig(
        screenshot_dir=str(tmp_path / "screenshots"),
        auth_dir=str(tmp_path / ".auth"),
        poll_retry_delay=0.01,
    )


@pytest.fixture
def mock_locator():
    locator = MagicMock()
    locator.first = locator
    locator.is_visible = AsyncMock(return_value=False)
    locator.click = AsyncMock()
    locator.screenshot = AsyncMock(return_value=b"png")
    return locator


@pytest.fixture
def mock_page(mock_locator):
    """A Playwright Page stand-in: sync locator factories, async actions."""
    page = MagicMock()
    page.url = "https://playwright.dev/"
    page.locator = MagicMock(return_value=mock_locator)
    for name in (
        "goto",
        "reload",
        "fill",
        "click",
        "screenshot",
        "wait_for_load_state",
        "wait_for_url",
        "wait_for_selector",
        "wait_for_timeout",
    ):
        setattr(page, name, AsyncMock())
    page.screenshot.return_value = b"png"
    page.context.storage_state = AsyncMock()
    page.context.clear_cookies = AsyncMock()
    return page
