# tests/test_cli.py

import json
import os
from unittest.mock import patch

import pytest

from scripts.scrape_stats import main

FIXTURE = os.path.join(os.path.dirname(__file__), "fixtures", "profile_overview.html")


class TestScrapeStatsCli:
    """Test argument handling of the scrape_stats script."""

    def test_dump_tokens_with_url_is_rejected(self, capsys):
        argv = ["scrape_stats.py", "--url", "https://tracker.example/p", "--dump-tokens"]
        with patch("sys.argv", argv), \
                patch("scripts.scrape_stats.StatsScraper") as scraper_cls:
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 2
        assert "--dump-tokens requires --html" in capsys.readouterr().err
        scraper_cls.assert_not_called()

    def test_html_file_prints_record(self, capsys):
        with patch("sys.argv", ["scrape_stats.py", "--html", FIXTURE]):
            main()

        data = json.loads(capsys.readouterr().out)
        assert data["bestClass"] == "Engineer"
        assert data["kills"] == 1550

    def test_dump_tokens_with_html_lists_grids(self, capsys):
        with patch("sys.argv", ["scrape_stats.py", "--html", FIXTURE, "--dump-tokens"]):
            main()

        out = capsys.readouterr().out
        assert "[SUMMARY]" in out
        assert "[DETAIL 1]" in out
