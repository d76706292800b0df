"""
Single-page HTTP retrieval with bounded connect/read timeouts.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

import requests

logger = logging.getLogger(__name__)

DEFAULT_CONNECT_TIMEOUT = 5.0  # seconds
DEFAULT_READ_TIMEOUT = 5.0  # seconds
DEFAULT_USER_AGENT = "hopspider/1.0"

# urllib3 raises LocationParseError (a ValueError) unwrapped for hosts with
# empty or over-long labels; http.client.InvalidURL is a ValueError too.
FETCH_ERRORS = (requests.RequestException, ValueError)


@dataclass(slots=True)
class Page:
    """A successfully fetched page."""
    url: str
    html: str
    status_code: int


@dataclass(slots=True)
class Unreachable:
    """A fetch that failed at the transport or HTTP level."""
    url: str
    reason: str


FetchResult = Union[Page, Unreachable]


class PageFetcher:
    """
    Fetches one address at a time over a shared ``requests.Session``.

    Failures never raise: they come back as ``Unreachable`` so the caller can
    drop the address and move on.
    """

    def __init__(
        self,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self._owns_session = session is None
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = user_agent
        self.session = session

    def __enter__(self) -> "PageFetcher":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the session if this fetcher opened it."""
        if self._owns_session:
            self.session.close()

    def fetch(self, url: str) -> FetchResult:
        """
        Retrieve ``url`` and return its body as text.

        Connection errors, timeouts, malformed addresses and HTTP error
        statuses all yield ``Unreachable``. The response is closed before
        returning on every path.
        """
        try:
            response = self.session.get(
                url,
                timeout=(self.connect_timeout, self.read_timeout),
                stream=True,
                allow_redirects=True,
            )
        except FETCH_ERRORS as e:
            logger.debug("Request for %s failed: %s", url, e)
            return Unreachable(url=url, reason=str(e))

        try:
            response.raise_for_status()
            html = response.text
        except FETCH_ERRORS as e:
            logger.debug("Reading %s failed: %s", url, e)
            return Unreachable(url=url, reason=str(e))
        finally:
            response.close()

        logger.debug("Fetched %s: %s (%d chars)", url, response.status_code, len(html))
        return Page(
            url=url,
            html=html,
            status_code=response.status_code,
        )
