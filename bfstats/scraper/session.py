# bfstats/scraper/session.py
"""
Browser session management for rendering tracker profile pages.

The tracker is a client-rendered app that keeps telemetry requests alive,
so pages never reach network idle. Rendering waits for DOM parse, then for
a stat marker, then a short fixed grace delay for values to populate.
"""

import logging

from playwright.async_api import Browser, Page, Playwright, Route
from playwright_stealth import Stealth

from ..config import ScraperConfig
from .locator import STATS_MARKER_SELECTOR

LOGGER = logging.getLogger(__name__)

LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-blink-features=AutomationControlled",
]

STEALTH = Stealth()


async def launch_browser(playwright: Playwright, config: ScraperConfig) -> Browser:
    """
    Launch an isolated Chromium instance.

    Runs without the OS sandbox so it works inside containers.

    Raises:
        playwright.async_api.Error: If the browser cannot be started
    """
    return await playwright.chromium.launch(
        headless=config.headless,
        args=LAUNCH_ARGS,
        timeout=config.launch_timeout_ms,
    )


def make_resource_blocker(blocked_types):
    """Build a route handler that aborts requests of the given resource types."""
    blocked = frozenset(blocked_types)

    async def block_heavy_resources(route: Route) -> None:
        if route.request.resource_type in blocked:
            await route.abort()
        else:
            await route.continue_()

    return block_heavy_resources


async def open_stats_page(browser: Browser, config: ScraperConfig) -> Page:
    """
    Open a page with a desktop fingerprint, stealth evasions and
    image/font/media requests blocked.
    """
    context = await browser.new_context(
        viewport={"width": config.viewport_width, "height": config.viewport_height},
        user_agent=config.user_agent,
        locale=config.locale,
    )
    page = await context.new_page()
    await STEALTH.apply_stealth_async(page)
    await page.route("**/*", make_resource_blocker(config.blocked_resource_types))
    return page


async def render_page(page: Page, url: str, config: ScraperConfig) -> str:
    """
    Navigate to url and return the rendered HTML once stats are on screen.

    Raises:
        playwright.async_api.TimeoutError: On navigation or marker timeout
    """
    await page.goto(url, wait_until="domcontentloaded", timeout=config.navigation_timeout_ms)
    await page.wait_for_selector(STATS_MARKER_SELECTOR, timeout=config.marker_timeout_ms)

    # Values fill in after the marker shows up, with no DOM signal to wait on.
    await page.wait_for_timeout(config.grace_delay_ms)

    return await page.content()


async def close_browser(browser: Browser) -> None:
    """
    Close browser and cleanup.

    A failure here is logged, not raised, so it never hides the error that
    triggered the teardown.
    """
    try:
        await browser.close()
    except Exception as exc:
        LOGGER.warning("Failed to close browser: %s", exc)
