from __future__ import annotations

import logging
from typing import Optional

from bs4 import BeautifulSoup
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from ..config import ScraperConfig
from ..models import StatisticsRecord
from .aggregator import aggregate_class_usage, aggregate_statistics
from .session import close_browser, launch_browser, open_stats_page, render_page

LOGGER = logging.getLogger(__name__)


class ExtractionError(Exception):
    """Raised when the profile page could not be rendered."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


def parse_statistics_html(html: str) -> StatisticsRecord:
    """Build a StatisticsRecord from rendered profile HTML."""
    soup = BeautifulSoup(html, "html.parser")
    return StatisticsRecord(**aggregate_class_usage(soup), **aggregate_statistics(soup))


class StatsScraper:
    """Tracker profile stats scraper using Playwright.

    Each call launches its own browser and closes it before returning,
    so concurrent calls share nothing.
    """

    def __init__(self, config: Optional[ScraperConfig] = None):
        self.config = config or ScraperConfig()

    async def extract_statistics(self, url: str) -> StatisticsRecord:
        """Render url and extract its statistics.

        Raises:
            ExtractionError: On browser launch failure, navigation timeout or
                stat marker timeout. The browser is closed before raising.
        """
        LOGGER.info("Extracting stats from %s", url)
        html = await self._render(url)
        record = parse_statistics_html(html)
        LOGGER.info(
            "Extracted stats from %s: kills=%s deaths=%s kd=%s",
            url, record.kills, record.deaths, record.kill_death,
        )
        return record

    async def _render(self, url: str) -> str:
        try:
            async with async_playwright() as playwright:
                browser = await launch_browser(playwright, self.config)
                try:
                    page = await open_stats_page(browser, self.config)
                    return await render_page(page, url, self.config)
                finally:
                    await close_browser(browser)
        # OSError / NotImplementedError come from starting the driver subprocess
        except (PlaywrightError, OSError, NotImplementedError) as exc:
            raise ExtractionError(f"Failed to render stats page {url}: {exc}", cause=exc) from exc


async def extract_statistics(url: str, config: Optional[ScraperConfig] = None) -> StatisticsRecord:
    """Convenience wrapper: one-off extraction with a fresh scraper."""
    return await StatsScraper(config).extract_statistics(url)
