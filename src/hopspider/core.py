"""
Crawl controller: walks a fixed number of hops from a seed address.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from hopspider.errors import InsufficientLinks
from hopspider.fetcher import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_USER_AGENT,
    Page,
    PageFetcher,
    Unreachable,
)
from hopspider.frontier import Frontier
from hopspider.links import find_link
from hopspider.validation import validate


class CrawlState(enum.Enum):
    RUNNING = "running"
    SUCCESS_TERMINATED = "success_terminated"
    FAILED_TERMINATED = "failed_terminated"


@dataclass(slots=True)
class CrawlStats:
    """Counters collected during a crawl for summary output."""
    pages_visited: int = 0
    pages_unreachable: int = 0
    pages_without_links: int = 0
    unreachable: List[str] = field(default_factory=list)

    def record_unreachable(self, url: str) -> None:
        """Record an address dropped as unreachable."""
        self.pages_unreachable += 1
        self.unreachable.append(url)

    def record_visit(self, found_link: bool) -> None:
        """Record a visited page and whether it yielded a new link."""
        self.pages_visited += 1
        if not found_link:
            self.pages_without_links += 1


class Spider:
    """
    Visits ``hops`` pages starting at ``seed``, following one new link per page.

    Only a successful fetch consumes a hop. An unreachable address is dropped
    and the hop is retried with the next frontier entry. Each iteration removes
    exactly one frontier entry, so the loop always terminates.
    """

    def __init__(
        self,
        hops: int,
        seed: str,
        fetcher: Optional[PageFetcher] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        validate(hops, seed)

        self.hops = hops
        self.seed = seed
        self.remaining_hops = hops
        self.frontier = Frontier([seed])
        self.visited: Set[str] = set()
        self.history: List[str] = []
        self.stats = CrawlStats()
        self.state = CrawlState.RUNNING
        self.logger = logger or logging.getLogger(__name__)
        self._fetcher = fetcher

    def should_visit(self, url: str) -> bool:
        """True if ``url`` has been neither visited nor queued."""
        return url not in self.visited and url not in self.frontier

    def crawl(self) -> List[str]:
        """
        Run the crawl to completion.

        Returns:
            Visited addresses in visit order.

        Raises:
            InsufficientLinks: the frontier emptied with hops still remaining.
        """
        fetcher = self._fetcher if self._fetcher is not None else PageFetcher()
        try:
            while self.remaining_hops > 0:
                if not self.frontier:
                    self.state = CrawlState.FAILED_TERMINATED
                    raise InsufficientLinks(self.remaining_hops)

                url = self.frontier.popleft()
                result = fetcher.fetch(url)

                if isinstance(result, Unreachable):
                    self.logger.warning("Could not connect to %s", url)
                    self.stats.record_unreachable(url)
                    continue

                self._visit(result)
        finally:
            if self._fetcher is None:
                fetcher.close()

        self.state = CrawlState.SUCCESS_TERMINATED
        return list(self.history)

    def _visit(self, page: Page) -> None:
        # recorded first so a self-link is not eligible
        self.visited.add(page.url)
        self.history.append(page.url)

        link = find_link(page.html, self.should_visit)
        if link is not None:
            self.frontier.push(link)
        else:
            self.logger.info("No links found on %s", page.url)

        self.stats.record_visit(link is not None)
        self.logger.info("just visited: %s", page.url)
        self.remaining_hops -= 1


def crawl(
    hops: int,
    seed: str,
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: float = DEFAULT_READ_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
    logger: Optional[logging.Logger] = None,
) -> Tuple[List[str], CrawlStats]:
    """
    Validate the inputs, then crawl ``hops`` pages starting from ``seed``.

    Args:
        hops: Number of pages to visit; must be positive.
        seed: Address to start from.
        connect_timeout: Seconds allowed to establish each connection.
        read_timeout: Seconds allowed between bytes of each response.
        user_agent: User-Agent header to send.
        logger: Sink for progress messages; defaults to this module's logger.

    Returns:
        Tuple of (visited addresses in order, crawl statistics).
    """
    with PageFetcher(
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        user_agent=user_agent,
    ) as fetcher:
        spider = Spider(hops, seed, fetcher=fetcher, logger=logger)
        visited = spider.crawl()
    return visited, spider.stats
