import logging
from typing import Callable, Optional

from linkcrawl.domain.crawl_context import CrawlContext
from linkcrawl.exceptions import InvalidURLError
from linkcrawl.services.domain_matcher import same_host
from linkcrawl.services.url_resolver import make_absolute_url

logger = logging.getLogger(__name__)


class LinkProcessor:
    """Runs one href through resolve -> same-site -> not-yet-visited, recording survivors."""

    def __init__(
        self,
        resolve_fn: Optional[Callable[[str, str], Optional[str]]] = None,
        same_host_fn: Optional[Callable[[str, str], bool]] = None,
    ):
        self._resolve = resolve_fn or make_absolute_url
        self._same_host = same_host_fn or same_host

    def process(self, href: str, page_url: str, context: CrawlContext) -> Optional[str]:
        """Return the absolute URL if `href` is a newly discovered same-site link, else None.

        A returned URL has already been marked visited on `context`.
        """
        try:
            link_url = self._resolve(href, page_url)
        except InvalidURLError as e:
            logger.warning("Error creating absolute URL: %s", e)
            return None
        if link_url is None:
            logger.debug("Skipping (no target) %r on %s", href, page_url)
            return None

        if not self._same_host(link_url, context.root_url):
            logger.debug("Skipping (external) %s -> not same host as %s", link_url, context.root_url)
            return None

        if not context.mark_visited(link_url):
            logger.debug("Skipping (visited) %s", link_url)
            return None

        logger.debug("Discovered %s on %s", link_url, page_url)
        return link_url
