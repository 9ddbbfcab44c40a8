import asyncio
import json
from pathlib import Path
from typing import Union

from loguru import logger

from plstreaks.models.season import SeasonData
from .base_loader import (
    BaseSeasonLoader,
    SeasonLoadError,
    SeasonNotFoundError,
    SeasonParseError,
)


class FileSeasonLoader(BaseSeasonLoader):
    """Reads <season>.json files from a local directory."""

    def __init__(self, data_dir: Union[str, Path]):
        self.data_dir = Path(data_dir)
        self.source = str(self.data_dir)

    def season_path(self, season: str) -> Path:
        return self.data_dir / f"{season}.json"

    def _read(self, season: str) -> SeasonData:
        path = self.season_path(season)
        if not path.is_file():
            raise SeasonNotFoundError(f"Season file not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SeasonParseError(f"Invalid JSON in {path}: {e}") from e
        except OSError as e:
            raise SeasonLoadError(f"Could not read {path}: {e}") from e
        logger.debug(f"Read season file {path}")
        return self.parse_season(season, raw)

    async def fetch_season(self, season: str) -> SeasonData:
        return await asyncio.to_thread(self._read, season)
