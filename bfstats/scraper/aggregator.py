# bfstats/scraper/aggregator.py
"""
Aggregate stat widgets scattered over a rendered profile page.

The page repeats the same labels across per-mode cards, so detail cards are
summed while the summary grid is read exactly once.
"""

import logging
from typing import Any, Dict, List

from bs4 import BeautifulSoup

from ..models import ClassPlaytime, compute_kill_death
from ..parser import format_hours, parse_duration_minutes, parse_number
from .locator import (
    CLASS_BLOCK_SELECTOR,
    CLASS_NAME_SELECTOR,
    CLASS_TIME_SELECTOR,
    CLASSES_TITLE_KEYWORD,
    DETAIL_GRID_SELECTOR,
    SUMMARY_GRID_SELECTOR,
    element_text,
    find_card_by_title,
    find_stat_value,
)

LOGGER = logging.getLogger(__name__)

# label on page -> record field
SUMMARY_STATS = {
    'HS%': 'hs_percent',
    'Objectives Captured': 'objectives_captured',
    'Objectives Destroyed': 'objectives_destroyed',
}

DETAIL_STATS = {
    'Kills': 'kills',
    'Wins': 'wins',
    'Losses': 'losses',
    'Assists': 'assists',
    'Deaths': 'deaths',
    'Revives': 'revives',
}


def collect_class_playtimes(document: BeautifulSoup) -> List[ClassPlaytime]:
    """Read (class name, minutes) for every block of the 'Classes' card."""
    section = find_card_by_title(document, CLASSES_TITLE_KEYWORD)
    if section is None:
        LOGGER.debug("No '%s' card on page", CLASSES_TITLE_KEYWORD)
        return []

    playtimes = []
    for block in section.select(CLASS_BLOCK_SELECTOR):
        name = element_text(block.select_one(CLASS_NAME_SELECTOR))
        raw_time = element_text(block.select_one(CLASS_TIME_SELECTOR)) or ""
        playtimes.append(ClassPlaytime(name, parse_duration_minutes(raw_time)))
    return playtimes


def aggregate_class_usage(document: BeautifulSoup) -> Dict[str, Any]:
    """
    Compute the most played class and total time played.

    Returns:
        {'best_class': str or None, 'time_played': '<hours>h'}
        Ties on playtime go to the class listed first.
    """
    best_class = None
    max_minutes = -1
    total_minutes = 0

    for playtime in collect_class_playtimes(document):
        total_minutes += playtime.minutes
        if playtime.minutes > max_minutes:
            max_minutes = playtime.minutes
            best_class = playtime.class_name

    return {
        'best_class': best_class,
        'time_played': format_hours(total_minutes),
    }


def aggregate_statistics(document: BeautifulSoup) -> Dict[str, Any]:
    """
    Read summary stats once and sum counters over every detail grid.

    A label missing from one grid leaves the running total untouched.

    Returns:
        Dict keyed by StatisticsRecord field names, including kill_death
    """
    result: Dict[str, Any] = {field: 0 for field in SUMMARY_STATS.values()}
    result.update({field: 0 for field in DETAIL_STATS.values()})

    summary = document.select_one(SUMMARY_GRID_SELECTOR)
    if summary is not None:
        for label, field in SUMMARY_STATS.items():
            result[field] = parse_number(find_stat_value(summary, label))
    else:
        LOGGER.debug("No summary grid on page")

    grids = document.select(DETAIL_GRID_SELECTOR)
    LOGGER.debug("Found %d detail grids", len(grids))
    for grid in grids:
        for label, field in DETAIL_STATS.items():
            raw = find_stat_value(grid, label)
            if raw is None:
                continue
            result[field] += parse_number(raw)

    result['kill_death'] = compute_kill_death(result['kills'], result['deaths'])
    return result
