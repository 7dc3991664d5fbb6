"""
HTTP access to the Wikia list API.

download() is the only call the app relies on. It never raises: timeouts,
connection errors, non-2xx responses and undecodable bodies all come back as
an empty list, so "no results" and "request failed" look the same to callers.
"""
import time
from typing import Dict, List, Optional

import httpx
import structlog
from pydantic import ValidationError

from .models import Wiki, Wikis

logger = structlog.get_logger(__name__)

DEFAULT_USER_AGENT = 'FandomWikis/1.0'


class FetchResult:
    def __init__(
        self,
        url: str,
        status_code: int,
        content: bytes = b'',
        final_url: str = None,
        fetch_time: float = 0.0,
        error: str = None,
    ):
        """Initialize a FetchResult with HTTP response data and metadata."""
        self.url = url
        self.status_code = status_code
        self.content = content
        self.final_url = final_url or url
        self.fetch_time = fetch_time
        self.error = error

    @property
    def success(self) -> bool:
        """Check if the fetch was successful (no error and 2xx status code)."""
        return self.error is None and 200 <= self.status_code < 300


class HTTPFetcher:
    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_redirects: int = 5,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the fetcher; pass a transport to avoid the network in tests."""
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_redirects = max_redirects

        headers = {
            'User-Agent': self.user_agent,
            'Accept': 'application/json',
        }
        self._client = httpx.Client(
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
            max_redirects=self.max_redirects,
            headers=headers,
            transport=transport,
        )

    @classmethod
    def from_config(cls, fetcher_config: Dict, transport: Optional[httpx.BaseTransport] = None) -> "HTTPFetcher":
        """Build a fetcher from the `fetcher` config section; bad values raise ValueError."""
        user_agent = fetcher_config.get('user_agent', DEFAULT_USER_AGENT)
        if user_agent is None or str(user_agent).strip() == '':
            raise ValueError("fetcher.user_agent must not be empty")

        try:
            timeout = float(fetcher_config.get('timeout', 30.0))
            max_redirects = int(fetcher_config.get('max_redirects', 5))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid fetcher configuration: {e}")

        return cls(
            user_agent=str(user_agent),
            timeout=timeout,
            max_redirects=max_redirects,
            transport=transport,
        )

    def fetch(self, url: str) -> FetchResult:
        """GET a URL and return a FetchResult; errors are recorded, not raised."""
        start_time = time.time()

        try:
            response = self._client.get(url)
            fetch_time = time.time() - start_time

            if not response.is_success:
                return FetchResult(
                    url=url,
                    status_code=response.status_code,
                    final_url=str(response.url),
                    fetch_time=fetch_time,
                    error=f"HTTP {response.status_code}"
                )

            return FetchResult(
                url=url,
                status_code=response.status_code,
                content=response.content,
                final_url=str(response.url),
                fetch_time=fetch_time,
            )

        except httpx.TimeoutException as e:
            error = f"Timeout after {self.timeout}s: {str(e)}"

        except httpx.ConnectError as e:
            error = f"Connection error: {str(e)}"

        except httpx.HTTPError as e:
            error = f"HTTP error: {str(e)}"

        except httpx.InvalidURL as e:
            error = f"Invalid URL: {str(e)}"

        return FetchResult(
            url=url,
            status_code=0,
            fetch_time=time.time() - start_time,
            error=error
        )

    def download(self, url: str) -> List[Wiki]:
        """Fetch one page of wikis, or an empty list if anything goes wrong."""
        result = self.fetch(url)
        if not result.success:
            logger.warning("fetch_failed", url=url, final_url=result.final_url, status_code=result.status_code, error=result.error)
            return []

        try:
            wikis = Wikis.model_validate_json(result.content).items
        except ValidationError as e:
            logger.warning("decode_failed", url=url, errors=e.error_count(), error=str(e))
            return []

        logger.info("wikis_fetched", url=url, final_url=result.final_url, count=len(wikis), fetch_time=round(result.fetch_time, 3))
        return wikis

    __call__ = download

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
