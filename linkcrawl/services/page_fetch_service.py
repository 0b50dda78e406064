import logging
from typing import Generator, Optional

from linkcrawl.domain.crawl_context import CrawlContext
from linkcrawl.exceptions import FetchFailure
from linkcrawl.services.fetcher import Fetcher
from linkcrawl.services.link_extractor import LinkExtractor

logger = logging.getLogger(__name__)


def is_html_content_type(content_type: Optional[str]) -> bool:
    ct = (content_type or '').lower()
    # A missing header is given the benefit of the doubt
    return ct == '' or 'text/html' in ct or 'application/xhtml+xml' in ct


class PageFetchService:
    """Fetches a page via a `Fetcher` and streams its anchor hrefs through `LinkExtractor`.

    Failures are confined to the page: a failed fetch, a non-HTML body or a
    broken stream simply ends that page's hrefs early.
    """

    def __init__(self, fetcher: Fetcher, link_extractor: Optional[LinkExtractor] = None):
        self.fetcher = fetcher
        self.link_extractor = link_extractor or LinkExtractor()

    def iter_hrefs(self, url: str, context: Optional[CrawlContext] = None) -> Generator[str, None, None]:
        """Lazily yield raw hrefs found on `url`.

        The underlying response stays open while hrefs are being consumed and
        is released when the generator finishes or is closed.
        """
        try:
            with self.fetcher.open(url) as response:
                if not is_html_content_type(response.content_type):
                    logger.info("Content type not supported %s. Skipping %s", response.content_type, url)
                    return
                if context is not None:
                    context.pages_fetched += 1
                logger.info("Fetched %s -> status %s", url, response.status_code)
                yield from self.link_extractor.iter_hrefs(response.body, response.encoding)
        except FetchFailure as e:
            if context is not None:
                context.pages_failed += 1
            logger.warning("Fetch failed for %s: %s", url, e)
