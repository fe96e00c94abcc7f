"""Price source scraping the daily history table of a quote page."""

import http.client
import socket
import time
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

from bs4 import BeautifulSoup

from ..config.defaults import YAHOO_HISTORY_URL, ScrapeParams
from ..data.parsers import is_price_text, parse_price_text
from ..errors import MalformedSourceError, SourceUnavailableError
from .base import BasePriceSource

RETRYABLE_STATUS = (429, 500, 502, 503, 504)


def extract_close_prices(html: str, close_column_index: int = 4,
                         header_rows: int = 1) -> list[float]:
    """
    Read the close column of the first table in ``html``.

    Rows are scanned in page order after skipping ``header_rows``. The scan
    ends at the first row whose close cell is missing or not numeric, which
    is how the footer below the data is recognized.

    Args:
        html: Page markup
        close_column_index: Zero-based cell index of the close price
        header_rows: Number of leading rows that hold headings

    Returns:
        Close prices in page order

    Raises:
        MalformedSourceError: If the page contains no table
    """
    soup = BeautifulSoup(html, "html.parser")
    table = soup.find("table")
    if table is None:
        raise MalformedSourceError("Page contains no price table", source="scrape")

    prices = []
    for row in table.find_all("tr")[header_rows:]:
        cells = row.find_all(["td", "th"])
        if len(cells) <= close_column_index:
            break

        text = cells[close_column_index].get_text(strip=True)
        if not is_price_text(text):
            break

        prices.append(parse_price_text(text))

    return prices


class ScrapePriceSource(BasePriceSource):
    """
    Downloads a quote history page and reads its close column.

    The history table lists the most recent session first, so the default
    orientation is newest first.
    """

    name = "scrape"

    def __init__(self, url_template: str = YAHOO_HISTORY_URL,
                 close_column_index: int = 4, header_rows: int = 1,
                 orientation: str = "newest_first", timeout_seconds: float = 30,
                 retry_attempts: int = 3, retry_delay_seconds: float = 1.0,
                 user_agent: str = ScrapeParams.user_agent):
        super().__init__(orientation)
        self.url_template = url_template
        self.close_column_index = close_column_index
        self.header_rows = header_rows
        self.timeout_seconds = timeout_seconds
        self.retry_attempts = retry_attempts
        self.retry_delay_seconds = retry_delay_seconds
        self.user_agent = user_agent

    @classmethod
    def from_config(cls, params: dict[str, Any]) -> "ScrapePriceSource":
        """Create a source from the ``scrape`` configuration section."""
        return cls(
            url_template=params.get("url_template", YAHOO_HISTORY_URL),
            close_column_index=params.get("close_column_index", 4),
            header_rows=params.get("header_rows", 1),
            orientation=params.get("orientation", "newest_first"),
            timeout_seconds=params.get("timeout_seconds", 30),
            retry_attempts=params.get("retry_attempts", 3),
            retry_delay_seconds=params.get("retry_delay_seconds", 1.0),
            user_agent=params.get("user_agent") or ScrapeParams.user_agent,
        )

    def url_for(self, ticker: str) -> str:
        return self.url_template.format(ticker=quote(ticker, safe=""))

    def load_values(self, ticker: str) -> list[float]:
        url = self.url_for(ticker)
        html = self.fetch(url)
        prices = extract_close_prices(html, self.close_column_index, self.header_rows)

        self.logger.info("Scraped price table", ticker=ticker, url=url, rows=len(prices))
        return prices

    def fetch(self, url: str) -> str:
        """
        Download ``url``, retrying connection failures and 429/5xx responses.

        Raises:
            SourceUnavailableError: If every attempt fails or the server
                answers with a non-retryable status
        """
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml",
        }

        last_error: Optional[Exception] = None
        for attempt in range(1, self.retry_attempts + 1):
            try:
                req = Request(url, headers=headers, method="GET")
                with urlopen(req, timeout=self.timeout_seconds) as response:
                    charset = response.headers.get_content_charset() or "utf-8"
                    return response.read().decode(charset, errors="replace")

            except HTTPError as e:
                if e.code not in RETRYABLE_STATUS:
                    self.logger.error("History page request rejected", url=url, status=e.code)
                    raise SourceUnavailableError(
                        f"HTTP {e.code} fetching {url}: {e.reason}",
                        target=url,
                        attempts=attempt,
                        source=self.name
                    ) from e
                last_error = e

            except (URLError, http.client.HTTPException, ConnectionError, socket.timeout) as e:
                last_error = e

            self.logger.warning(
                "History page fetch failed",
                url=url,
                attempt=attempt,
                max_attempts=self.retry_attempts,
                error=str(last_error)
            )
            if attempt < self.retry_attempts:
                time.sleep(self.retry_delay_seconds)

        raise SourceUnavailableError(
            f"Failed to fetch {url} after {self.retry_attempts} attempts: {last_error}",
            target=url,
            attempts=self.retry_attempts,
            source=self.name
        ) from last_error
