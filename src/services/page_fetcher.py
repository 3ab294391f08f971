"""HTTP client for retrieving raw page markup."""

from __future__ import annotations

import requests

from src.models.config import DEFAULT_USER_AGENT
from src.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 15.0
DEFAULT_MAX_REDIRECTS = 10


class PageFetchError(Exception):
    """Raised when a page could not be retrieved."""

    def __init__(self, url: str, detail: str) -> None:
        super().__init__(f"{url}: {detail}")
        self.url = url
        self.detail = detail


class HttpError(PageFetchError):
    """The server answered with a non-success status."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(url, f"HTTP {status_code}")
        self.status_code = status_code


class NetworkError(PageFetchError):
    """Transport failure: DNS, TLS, refused connection, timeout, redirect loop."""


def build_session(
    user_agent: str = DEFAULT_USER_AGENT,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
) -> requests.Session:
    """Create a session that follows at most max_redirects redirects."""
    session = requests.Session()
    session.max_redirects = max_redirects
    session.headers.update({"User-Agent": user_agent})
    return session


class PageFetcher:
    """Fetches HTML for a URL, following redirects."""

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.session = session if session is not None else build_session()
        self.timeout = timeout

    def fetch(self, url: str) -> str:
        """GET the page and return its decoded body.

        Raises:
            HttpError: status outside 200-299.
            NetworkError: any transport-level failure, including timeouts.
        """
        try:
            response = self.session.get(url, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as exc:
            logger.warning("page_fetch_network_error", url=url, error=str(exc))
            raise NetworkError(url, str(exc)) from exc

        if not 200 <= response.status_code < 300:
            logger.warning("page_fetch_http_error", url=url, status_code=response.status_code)
            raise HttpError(url, response.status_code)

        logger.debug("page_fetched", url=url, status_code=response.status_code)
        return response.text
