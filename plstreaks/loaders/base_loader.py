import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, Sequence

from loguru import logger
from pydantic import ValidationError

from plstreaks.models.season import SEASONS, SeasonData


class SeasonLoadError(Exception):
    """Custom exception for season retrieval errors."""

    pass


class SeasonNotFoundError(SeasonLoadError):
    """Exception raised when no data exists for a season."""

    pass


class SeasonParseError(SeasonLoadError):
    """Exception raised when season data cannot be decoded or validated."""

    pass


class BaseSeasonLoader(ABC):
    """Abstract base class for season data sources."""

    source: str = "unknown"

    @abstractmethod
    async def fetch_season(self, season: str) -> SeasonData:
        """Fetch and validate the data for one season.

        Args:
            season: Season id, e.g. "2024-25".

        Returns:
            The validated SeasonData.

        Raises:
            SeasonNotFoundError: The source has no data for the season.
            SeasonParseError: The data exists but is not a valid season file.
            SeasonLoadError: Any other retrieval failure.
        """
        pass

    def parse_season(self, season: str, raw: Any) -> SeasonData:
        """Validates decoded JSON into SeasonData."""
        try:
            return SeasonData.model_validate(raw)
        except ValidationError as e:
            logger.debug(f"Validation errors for {season} from {self.source}: {e}")
            raise SeasonParseError(
                f"Invalid season data for {season} from {self.source}"
            ) from e

    async def close(self) -> None:
        """Releases any resources held by the loader."""
        pass


async def load_all_seasons(
    loader: BaseSeasonLoader, catalog: Sequence[str] = SEASONS
) -> Dict[str, SeasonData]:
    """Fetches every catalog season concurrently.

    A season that fails to load is left out of the result; failures never
    propagate to the caller.
    """
    logger.info(f"Loading {len(catalog)} seasons from {loader.source}...")
    loaded: Dict[str, SeasonData] = {}

    async def load_one(season: str) -> None:
        try:
            loaded[season] = await loader.fetch_season(season)
            logger.debug(f"Loaded season {season}")
        except SeasonNotFoundError:
            logger.info(f"No data for season {season}, skipping.")
        except SeasonLoadError as e:
            logger.warning(f"Could not load season {season}: {e}")
        except Exception as e:
            logger.exception(f"Unexpected error loading season {season}: {e}")

    await asyncio.gather(*(load_one(season) for season in catalog))

    # Keep catalog order regardless of completion order
    ordered = {season: loaded[season] for season in catalog if season in loaded}
    logger.success(f"Loaded {len(ordered)} of {len(catalog)} seasons.")
    return ordered
