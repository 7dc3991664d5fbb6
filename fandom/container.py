"""
Composition root: builds the single FandomApp and hands its state and
dispatcher to whoever needs them. Nothing here is a module-level global.
"""
from typing import Optional, Tuple

import structlog

from .app import DEFAULT_API_URL, DEFAULT_PER_PAGE, Download, FandomApp
from .config import Config
from .fetcher import HTTPFetcher

logger = structlog.get_logger(__name__)


class Container:
    def __init__(self, app: FandomApp, fetcher: Optional[HTTPFetcher] = None):
        self.app = app
        self._fetcher = fetcher

    @property
    def state(self):
        return self.app.state

    @property
    def update(self):
        return self.app.update

    def close(self):
        """Close the fetcher this container created, if any."""
        if self._fetcher is not None:
            self._fetcher.close()
            self._fetcher = None


def _validate_api(api_config) -> Tuple[int, str]:
    """Check the `api` section up front so a bad value fails before any request."""
    try:
        per_page = int(api_config.get('per_page', DEFAULT_PER_PAGE))
    except (TypeError, ValueError):
        raise ValueError(f"api.per_page must be an integer, got {api_config.get('per_page')!r}")
    if per_page < 1:
        raise ValueError(f"api.per_page must be at least 1, got {per_page}")

    api_url = api_config.get('url', DEFAULT_API_URL)
    if not isinstance(api_url, str):
        raise ValueError(f"api.url must be a string, got {api_url!r}")
    try:
        api_url % (per_page, 1)
    except (TypeError, ValueError):
        raise ValueError(f"api.url needs exactly two %d placeholders (limit, batch): {api_url!r}")

    return per_page, api_url


def create_container(config: Optional[Config] = None, download: Optional[Download] = None) -> Container:
    """Build the app from configuration; an explicit download function skips the HTTP fetcher.

    Raises ValueError for unusable configuration values.
    """
    config = config or Config()
    per_page, api_url = _validate_api(config.api)

    fetcher = None
    if download is None:
        fetcher = HTTPFetcher.from_config(config.fetcher)
        download = fetcher

    logger.info("creating_app", api_url=api_url, per_page=per_page)
    try:
        app = FandomApp(per_page=per_page, api_url=api_url, download=download)
    except Exception:
        if fetcher is not None:
            fetcher.close()
        raise
    return Container(app, fetcher=fetcher)
