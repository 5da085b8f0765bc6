"""Configuration for the scraper and the HTTP service"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/123.0.0.0 Safari/537.36"
)


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ScraperConfig:
    """Browser and timing settings for one extraction"""

    headless: bool = True

    # Timeouts (milliseconds, Playwright convention)
    launch_timeout_ms: int = 30000
    navigation_timeout_ms: int = 45000
    marker_timeout_ms: int = 15000
    grace_delay_ms: int = 1500

    # Browser fingerprint
    user_agent: str = DEFAULT_USER_AGENT
    viewport_width: int = 1920
    viewport_height: int = 1080
    locale: str = "en-US"

    blocked_resource_types: Tuple[str, ...] = ("image", "font", "media")

    @classmethod
    def from_environment(cls) -> "ScraperConfig":
        """Create config from environment variables, falling back to defaults"""
        return cls(
            headless=_env_bool("SCRAPER_HEADLESS", "true"),
            launch_timeout_ms=int(os.getenv("SCRAPER_LAUNCH_TIMEOUT_MS", "30000")),
            navigation_timeout_ms=int(os.getenv("SCRAPER_NAVIGATION_TIMEOUT_MS", "45000")),
            marker_timeout_ms=int(os.getenv("SCRAPER_MARKER_TIMEOUT_MS", "15000")),
            grace_delay_ms=int(os.getenv("SCRAPER_GRACE_DELAY_MS", "1500")),
            user_agent=os.getenv("SCRAPER_USER_AGENT", DEFAULT_USER_AGENT),
            viewport_width=int(os.getenv("SCRAPER_VIEWPORT_WIDTH", "1920")),
            viewport_height=int(os.getenv("SCRAPER_VIEWPORT_HEIGHT", "1080")),
            locale=os.getenv("SCRAPER_LOCALE", "en-US"),
        )


@dataclass
class ServiceSettings:
    """Settings for the HTTP service wrapping the scraper"""

    api_key: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 3001
    scraper: ScraperConfig = field(default_factory=ScraperConfig)

    @classmethod
    def from_environment(cls) -> "ServiceSettings":
        return cls(
            api_key=os.getenv("SCRAPER_API_KEY") or None,
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3001")),
            scraper=ScraperConfig.from_environment(),
        )
