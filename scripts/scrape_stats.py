#!/usr/bin/env python3
# scripts/scrape_stats.py
"""
CLI script for extracting stats from a tracker profile page.

Usage:
    python scripts/scrape_stats.py --url https://tracker.gg/bf6/profile/4128/overview
    python scripts/scrape_stats.py --url <profile url> --headed --grace-delay 3000
    python scripts/scrape_stats.py --html saved_page.html --dump-tokens
"""

import sys
import os
import argparse
import asyncio
import json
import logging

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from bs4 import BeautifulSoup
from dotenv import load_dotenv

from bfstats.config import ScraperConfig
from bfstats.scraper import ExtractionError, StatsScraper, parse_statistics_html
from bfstats.scraper.locator import DETAIL_GRID_SELECTOR, SUMMARY_GRID_SELECTOR, iter_stat_tokens


def dump_tokens(html: str) -> None:
    """Print every stat widget of the summary and detail grids."""
    soup = BeautifulSoup(html, 'html.parser')
    summary = soup.select_one(SUMMARY_GRID_SELECTOR)
    if summary is not None:
        print("[SUMMARY]")
        for token in iter_stat_tokens(summary):
            print(f"  {token.label}: {token.value}")
    for index, grid in enumerate(soup.select(DETAIL_GRID_SELECTOR), start=1):
        print(f"[DETAIL {index}]")
        for token in iter_stat_tokens(grid):
            print(f"  {token.label}: {token.value}")


def main():
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        description='Extract normalized stats from a tracker profile page',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/scrape_stats.py --url <profile url>
  python scripts/scrape_stats.py --url <profile url> --headed --verbose
  python scripts/scrape_stats.py --html page_dump.html --dump-tokens
        """
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--url', help='Profile overview URL to render')
    source.add_argument('--html', metavar='FILE', help='Parse a saved page instead of launching a browser')

    parser.add_argument(
        '--headed',
        action='store_true',
        default=False,
        help='Run in headed mode (visible browser)'
    )
    parser.add_argument('--navigation-timeout', type=int, metavar='MS', help='Page navigation timeout')
    parser.add_argument('--marker-timeout', type=int, metavar='MS', help='Stat marker wait timeout')
    parser.add_argument('--grace-delay', type=int, metavar='MS', help='Wait after the marker appears')
    parser.add_argument(
        '--dump-tokens',
        action='store_true',
        help='Print every stat widget found (with --html)'
    )
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')

    args = parser.parse_args()
    if args.dump_tokens and not args.html:
        parser.error('--dump-tokens requires --html')

    load_dotenv()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.html:
        with open(args.html, 'r', encoding='utf-8') as f:
            html = f.read()
        if args.dump_tokens:
            dump_tokens(html)
        print(json.dumps(parse_statistics_html(html).to_dict(), indent=2))
        return

    config = ScraperConfig.from_environment()
    if args.headed:
        config.headless = False
    if args.navigation_timeout is not None:
        config.navigation_timeout_ms = args.navigation_timeout
    if args.marker_timeout is not None:
        config.marker_timeout_ms = args.marker_timeout
    if args.grace_delay is not None:
        config.grace_delay_ms = args.grace_delay

    print(f"[BROWSER] Opening browser ({'headless' if config.headless else 'headed'} mode)...")
    print(f"[NAVIGATE] {args.url}")

    try:
        record = asyncio.run(StatsScraper(config).extract_statistics(args.url))
    except ExtractionError as e:
        print("\n" + "=" * 60)
        print("✗ ERROR")
        print("=" * 60)
        print(str(e))
        print("")
        if "timeout" in str(e).lower():
            print("The page may be blocked or the tracker changed its layout.")
            print("Try --headed, or raise --marker-timeout.")
        print("")
        sys.exit(1)

    print(json.dumps(record.to_dict(), indent=2))


if __name__ == '__main__':
    main()
