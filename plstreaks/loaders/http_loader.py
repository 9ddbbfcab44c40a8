from typing import Optional

import httpx
from loguru import logger
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    RetryError,
)

from plstreaks.models.season import SeasonData
from .base_loader import (
    BaseSeasonLoader,
    SeasonLoadError,
    SeasonNotFoundError,
    SeasonParseError,
)

# Define common HTTP status codes that warrant a retry
RETRYABLE_STATUS_CODES = {408, 429, 500, 502, 503, 504}


class HttpSeasonLoader(BaseSeasonLoader):
    """Downloads <season>.json files from a static base URL."""

    def __init__(
        self,
        base_url: str,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ):
        self.base_url = str(base_url).rstrip("/")
        self.source = self.base_url
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
        )

    def season_url(self, season: str) -> str:
        return f"{self.base_url}/{season}.json"

    @retry(
        stop=stop_after_attempt(4),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type((httpx.RequestError, httpx.HTTPStatusError)),
        reraise=False,
    )
    async def _get(self, url: str) -> httpx.Response:
        """GETs a URL, raising HTTPStatusError only for retryable statuses."""
        logger.debug(f"Requesting {url}")
        response = await self.client.get(url)
        if response.status_code in RETRYABLE_STATUS_CODES:
            logger.warning(f"Retrying {url} after status {response.status_code}")
            response.raise_for_status()
        return response

    async def fetch_season(self, season: str) -> SeasonData:
        url = self.season_url(season)
        try:
            response = await self._get(url)
        except RetryError as e:
            last = e.last_attempt.exception()
            logger.error(f"Max retries exceeded for {url}. Last exception: {last}")
            raise SeasonLoadError(f"Failed to download {season} after retries") from last

        if response.status_code == 404:
            raise SeasonNotFoundError(f"No season file at {url}")
        if response.is_error:
            raise SeasonLoadError(
                f"HTTP error {response.status_code} downloading {season}"
            )

        try:
            raw = response.json()
        except ValueError as e:
            raise SeasonParseError(f"Response for {season} is not JSON") from e
        return self.parse_season(season, raw)

    async def close(self) -> None:
        """Closes the underlying HTTP client."""
        await self.client.aclose()
        logger.debug(f"Closed HTTP client for {self.source}")
