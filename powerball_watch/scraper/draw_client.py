"""HTTP client for the published draw page.

Fetches the page with aiohttp and flattens every `table tr` into a list of
cell texts, which is all the parser needs.
"""

import asyncio

import aiohttp
from bs4 import BeautifulSoup
from loguru import logger

from powerball_watch.config import settings
from powerball_watch.errors import ConnectivityError
from powerball_watch.scraper.parsers.powerball_parser import RawDocument


def extract_table_rows(html: str | bytes) -> RawDocument:
    """Turn every table row into a list of its `td` texts.

    Header rows (only `th`) become empty lists so row indices line up
    with the document order. Raw bytes are decoded by BeautifulSoup, which
    falls back to a detected encoding when the page is not valid UTF-8.
    """
    soup = BeautifulSoup(html, "html.parser")
    return [
        [td.get_text(" ", strip=True) for td in tr.find_all("td")]
        for tr in soup.select("table tr")
    ]


class DrawPageClient:
    """Fetches the draw page and returns its table rows."""

    def __init__(
        self,
        timeout: float = settings.FETCH_TIMEOUT_SECONDS,
        user_agent: str = settings.FETCH_USER_AGENT,
    ):
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._headers = {"User-Agent": user_agent}

    async def fetch(self, url: str) -> RawDocument:
        """GET the page. Any transport problem or timeout raises ConnectivityError."""
        logger.debug("Fetching draw page {}", url)
        try:
            async with aiohttp.ClientSession(headers=self._headers) as client:
                async with client.get(url, timeout=self._timeout) as resp:
                    if resp.status != 200:
                        raise ConnectivityError(f"draw page returned HTTP {resp.status}")
                    html = await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ConnectivityError(f"could not fetch {url}: {e!r}") from e

        return extract_table_rows(html)


# Singleton
draw_client = DrawPageClient()
