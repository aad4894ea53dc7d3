"""Fixtures for tests that drive a real browser.

Every test here is marked ``e2e`` and only runs with ``pytest --run-e2e``.
Settings come from the environment (see FrameworkConfig.from_env).
"""

import logging
from pathlib import Path

import pytest
import pytest_asyncio

from e2e.api import ApiHelper
from e2e.config import FrameworkConfig
from e2e.logging_setup import configure_logging
from e2e.pages import HomePage
from e2e.screenshots import ScreenshotHelper
from e2e.session import SessionManager
from e2e.waits import WaitHelper

logger = logging.getLogger("e2e.run")


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest.fixture(scope="session")
def e2e_config():
    """Global setup and teardown for a browser run."""
    config = FrameworkConfig.from_env()
    configure_logging(config)
    Path(config.screenshot_dir).mkdir(parents=True, exist_ok=True)
    Path(config.auth_dir).mkdir(parents=True, exist_ok=True)
    logger.info("Global setup running...")
    yield config
    logger.info("Global teardown running...")


@pytest_asyncio.fixture
async def session(e2e_config):
    async with SessionManager(e2e_config) as sm:
        yield sm


@pytest_asyncio.fixture
async def page(request, session, e2e_config):
    page = await session.new_page()
    yield page
    report = getattr(request.node, "rep_call", None)
    if report is not None:
        status = "passed" if report.passed else report.outcome
        await ScreenshotHelper(page, e2e_config).capture_on_failure(request.node.name, status)


@pytest.fixture
def home_page(page, e2e_config):
    return HomePage(page, e2e_config)


@pytest.fixture
def waits(page, e2e_config):
    return WaitHelper(page, e2e_config)


@pytest_asyncio.fixture
async def api_helper(session):
    request = await session.new_request_context()
    return ApiHelper(request)
