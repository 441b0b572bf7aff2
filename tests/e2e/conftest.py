"""
Pytest fixtures for Playwright E2E tests.

This module provides fixtures for session settings, the browser, a fresh
context and page per test, and the page manager. Every test in this package
is skipped when the ngx-admin app at ``E2E_BASE_URL`` cannot be reached.
"""

import logging
import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
import requests
from playwright.async_api import (
    Browser,
    BrowserContext,
    Page,
    Playwright,
    async_playwright,
)
from playwright.async_api import Error as PlaywrightError

from ngx_e2e.config import E2ESettings, configure_logging, get_settings
from ngx_e2e.pages import PageManager

logger = logging.getLogger(__name__)

SCREENSHOT_DIR = "test-results/screenshots"


# =============================================================================
# Configuration
# =============================================================================

@pytest.fixture(scope="session")
def settings() -> E2ESettings:
    """Session settings from the environment or ``E2E_CONFIG_FILE``."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Running E2E tests against %s on %s",
                settings.base_url, settings.browser)
    return settings


@pytest.fixture(scope="session")
def app_available(settings: E2ESettings) -> str:
    """Skip the session's E2E tests when the app does not answer."""
    try:
        response = requests.get(settings.base_url, timeout=5)
    except requests.RequestException as e:
        pytest.skip(f"ngx-admin not reachable at {settings.base_url}: {e}")
    if response.status_code >= 500:
        pytest.skip(
            f"ngx-admin at {settings.base_url} answered {response.status_code}")
    return settings.base_url


# =============================================================================
# Playwright Fixtures
# =============================================================================

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def playwright() -> AsyncGenerator[Playwright, None]:
    """Create a Playwright instance for the test session."""
    async with async_playwright() as pw:
        yield pw


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser(
    playwright: Playwright, settings: E2ESettings, app_available: str
) -> AsyncGenerator[Browser, None]:
    """Launch the configured browser once per session."""
    browser_type = getattr(playwright, settings.browser)
    try:
        browser = await browser_type.launch(**settings.to_launch_options())
    except PlaywrightError as e:
        pytest.skip(f"Cannot launch {settings.browser}: {e.message}")
    yield browser
    await browser.close()


@pytest_asyncio.fixture(loop_scope="session")
async def context(
    browser: Browser, settings: E2ESettings
) -> AsyncGenerator[BrowserContext, None]:
    """
    Create a new browser context for each test.

    This provides isolation between tests with separate cookies,
    storage, and other browser state.
    """
    context = await browser.new_context(**settings.to_context_options())
    context.set_default_timeout(settings.default_timeout)
    context.set_default_navigation_timeout(settings.navigation_timeout)

    yield context
    await context.close()


@pytest_asyncio.fixture(loop_scope="session")
async def page(
    request, context: BrowserContext
) -> AsyncGenerator[Page, None]:
    """Open the app's root page; keep a screenshot when the test fails."""
    page = await context.new_page()
    await page.goto("/")

    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        os.makedirs(SCREENSHOT_DIR, exist_ok=True)
        path = f"{SCREENSHOT_DIR}/{request.node.name}.png"
        await page.screenshot(path=path)
        logger.info("Saved failure screenshot to %s", path)
    await page.close()


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Hook to store test result for the screenshot in the page fixture."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


# =============================================================================
# Page Object Fixtures
# =============================================================================

@pytest.fixture
def page_manager(page: Page, settings: E2ESettings) -> PageManager:
    """Page manager bound to this test's page."""
    return PageManager.from_settings(page, settings)
