from fastapi import FastAPI, Header, HTTPException, Query
import logging
import os
import secrets
import sys
from typing import Optional
from urllib.parse import unquote

from dotenv import load_dotenv

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from bfstats.config import ServiceSettings
from bfstats.scraper import ExtractionError, StatsScraper

load_dotenv()

logger = logging.getLogger(__name__)

app = FastAPI()
settings = ServiceSettings.from_environment()
scraper = StatsScraper(settings.scraper)


def _is_authorized(api_key: Optional[str]) -> bool:
    if not api_key or not settings.api_key:
        return False
    # compare_digest only takes ASCII str, so compare the encoded bytes
    return secrets.compare_digest(api_key.encode("utf-8"), settings.api_key.encode("utf-8"))


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@app.get("/scrape")
async def scrape(
    url: Optional[str] = Query(default=None),
    x_api_key: Optional[str] = Header(default=None),
) -> dict:
    if not _is_authorized(x_api_key):
        raise HTTPException(status_code=401, detail="Unauthorized")

    if not url or not url.strip():
        raise HTTPException(status_code=400, detail="URL is required")

    # Callers encode the target URL on top of query-string encoding.
    target_url = unquote(url.strip())

    try:
        record = await scraper.extract_statistics(target_url)
    except ExtractionError as e:
        logger.exception("Scraping failed for %s", target_url)
        raise HTTPException(status_code=500, detail=f"Scraping failed: {str(e)}")

    return record.to_dict()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
    print("Starting stats scraper service...")
    print(f"Listening on http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
