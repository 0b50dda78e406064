import logging

logger = logging.getLogger(__name__)


class CrawlPolicy:
    """Depth rules for the crawl.

    `depth` is the number of further hops allowed from the page being read.
    """

    def should_skip_due_to_depth(self, depth: int) -> bool:
        """Check if a page should not be read at all."""
        if depth < 0:
            logger.debug("Skipping (max depth reached) at depth %s", depth)
            return True
        return False

    def should_expand(self, depth: int) -> bool:
        """Check if links found on a page at `depth` may be fetched themselves."""
        return depth - 1 > 0
