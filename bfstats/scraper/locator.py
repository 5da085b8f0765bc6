# bfstats/scraper/locator.py
"""
Stat widget lookup on tracker profile pages.

All CSS signatures of the tracker markup live here. When the page layout
changes, this is the file to update.
"""

from typing import Iterator, Optional

from bs4 import BeautifulSoup, Tag

from ..models import RawStatToken

# Stat widgets come in a vertical and a horizontal layout.
STAT_WIDGET_SELECTOR = ".stat-ver, .stat-hor"
STAT_NAME_SELECTOR = ".stat-name"
STAT_VALUE_SELECTOR = ".stat-value"

# Present once the client-side app has rendered any stats.
STATS_MARKER_SELECTOR = STAT_NAME_SELECTOR

SUMMARY_GRID_SELECTOR = ".grid.grid-cols-2.gap-px"
DETAIL_GRID_SELECTOR = ".v3-card__body.grid.grid-cols-2"

CARD_SELECTOR = "section.v3-card"
CARD_TITLE_SELECTOR = ".v3-card__title"
CLASSES_TITLE_KEYWORD = "Classes"
CLASS_BLOCK_SELECTOR = ".flex.items-center.gap-4"
CLASS_NAME_SELECTOR = "span.text-12"
CLASS_TIME_SELECTOR = ".stat-value span"


def element_text(element: Optional[Tag]) -> Optional[str]:
    """Trimmed text content of an element, None if the element is missing."""
    if element is None:
        return None
    return element.get_text().strip()


def iter_stat_tokens(container: Tag) -> Iterator[RawStatToken]:
    """Yield (label, value) for every stat widget in container, in document order."""
    for widget in container.select(STAT_WIDGET_SELECTOR):
        label = element_text(widget.select_one(STAT_NAME_SELECTOR))
        if label is None:
            continue
        yield RawStatToken(label, element_text(widget.select_one(STAT_VALUE_SELECTOR)))


def find_stat_value(container: Tag, label: str) -> Optional[str]:
    """
    Find the value text of the stat labeled `label` inside container.

    Labels are compared case-insensitively after trimming whitespace.
    The first matching widget wins.

    Returns:
        Value text, or None when no widget carries that label
    """
    wanted = label.strip().lower()
    for token in iter_stat_tokens(container):
        if token.label.lower() == wanted:
            return token.value
    return None


def find_card_by_title(document: BeautifulSoup, keyword: str) -> Optional[Tag]:
    """First card section whose title contains keyword (case-sensitive)."""
    for card in document.select(CARD_SELECTOR):
        title = element_text(card.select_one(CARD_TITLE_SELECTOR))
        if title is not None and keyword in title:
            return card
    return None
