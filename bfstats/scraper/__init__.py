# bfstats/scraper/__init__.py
"""
Web scraping module for tracker profile stats.

Playwright renders the page, BeautifulSoup reads the stat widgets.
"""

from .aggregator import aggregate_class_usage, aggregate_statistics
from .core import ExtractionError, StatsScraper, extract_statistics, parse_statistics_html
from .locator import find_stat_value

__all__ = [
    'aggregate_class_usage',
    'aggregate_statistics',
    'find_stat_value',
    'parse_statistics_html',
    'extract_statistics',
    'StatsScraper',
    'ExtractionError',
]
