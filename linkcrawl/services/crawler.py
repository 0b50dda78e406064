from typing import List, Optional

import requests

from linkcrawl import config
from linkcrawl.domain.crawl_result import CrawlResult
from linkcrawl.services.crawl_executor import CrawlExecutor
from linkcrawl.services.crawl_policy import CrawlPolicy
from linkcrawl.services.fetcher import Fetcher
from linkcrawl.services.http_service import HttpService
from linkcrawl.services.link_extractor import LinkExtractor
from linkcrawl.services.link_processor import LinkProcessor
from linkcrawl.services.page_fetch_service import PageFetchService


class Crawler:
    """Wires the default collaborators together; any of them can be injected instead."""

    def __init__(
        self,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
        fetcher: Optional[Fetcher] = None,
        link_extractor: Optional[LinkExtractor] = None,
        link_processor: Optional[LinkProcessor] = None,
        crawl_policy: Optional[CrawlPolicy] = None,
    ):
        self.user_agent = user_agent or config.USER_AGENT
        self.timeout = timeout if timeout is not None else config.HTTP_TIMEOUT
        self.fetcher = fetcher or HttpService(
            self.user_agent,
            http_client=requests.get,
            timeout=self.timeout,
            chunk_size=config.CHUNK_SIZE,
        )
        self.page_fetch_service = PageFetchService(self.fetcher, link_extractor or LinkExtractor())
        self.executor = CrawlExecutor(
            page_fetch_service=self.page_fetch_service,
            link_processor=link_processor or LinkProcessor(),
            crawl_policy=crawl_policy or CrawlPolicy(),
        )

    def crawl(self, root_url: str, max_depth: Optional[int] = None) -> CrawlResult:
        """Crawl `root_url`, following same-site links up to `max_depth` hops.

        Raises InvalidInputError for an empty root URL. Every other failure is
        logged and only costs the page or href it happened on.
        """
        if max_depth is None:
            max_depth = config.DEFAULT_DEPTH
        return self.executor.crawl(root_url, max_depth)


def crawl_webpage(root_url: str, max_depth: int, crawler: Optional[Crawler] = None) -> List[str]:
    """Return the sorted same-site URLs reachable from `root_url` within `max_depth` hops."""
    return list((crawler or Crawler()).crawl(root_url, max_depth).links)
