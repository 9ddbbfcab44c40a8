from plstreaks.config.settings import AppSettings
from .base_loader import BaseSeasonLoader
from .file_loader import FileSeasonLoader
from .http_loader import HttpSeasonLoader


def get_loader(settings: AppSettings) -> BaseSeasonLoader:
    """Picks the HTTP loader when a base URL is configured, else the file loader."""
    if settings.data_base_url:
        return HttpSeasonLoader(
            str(settings.data_base_url), timeout=settings.request_timeout
        )
    return FileSeasonLoader(settings.data_dir)
