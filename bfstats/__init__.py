# bfstats/__init__.py
"""
Battlefield tracker profile stats extraction.

Renders a tracker profile page with Playwright and turns its stat widgets
into a normalized StatisticsRecord.
"""

from .models import StatisticsRecord

__all__ = ['StatisticsRecord']
