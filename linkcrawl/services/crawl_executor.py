import logging
from typing import List, Optional

from linkcrawl.domain.crawl_context import CrawlContext
from linkcrawl.domain.crawl_result import CrawlResult
from linkcrawl.domain.frontier import FrontierFrame
from linkcrawl.exceptions import InvalidInputError
from linkcrawl.services.crawl_policy import CrawlPolicy
from linkcrawl.services.url_resolver import page_key

logger = logging.getLogger(__name__)


class CrawlExecutor:
    """Executes a crawl given configured collaborators.

    This class owns the crawl control-flow: depth-first traversal in document
    order, with each newly discovered link expanded before the next href of
    the same page. It does NOT construct dependencies (see `Crawler`).

    Traversal keeps an explicit stack of `FrontierFrame`s instead of
    recursing, so deep crawls are not bounded by the interpreter's recursion
    limit. Each frame holds the still-open href stream of one page.
    """

    def __init__(
        self,
        *,
        page_fetch_service,
        link_processor,
        crawl_policy: Optional[CrawlPolicy] = None,
    ):
        self.page_fetch_service = page_fetch_service
        self.link_processor = link_processor
        self.crawl_policy = crawl_policy or CrawlPolicy()

    def crawl(self, root_url: str, max_depth: int) -> CrawlResult:
        if not root_url:
            raise InvalidInputError("root URL cannot be empty")

        context = CrawlContext(root_url, max_depth, root_key=page_key(root_url))
        logger.info("Started crawling %s (max depth %s)", root_url, max_depth)
        self.crawl_from(root_url, max_depth, context)

        links = context.sorted_links()
        logger.info(
            "Finished crawling %s: %d links, %d pages fetched, %d failed",
            root_url,
            len(links),
            context.pages_fetched,
            context.pages_failed,
        )
        return CrawlResult(links=tuple(links), pages_fetched=context.pages_fetched, pages_failed=context.pages_failed)

    def crawl_from(self, url: str, depth: int, context: CrawlContext) -> None:
        if self.crawl_policy.should_skip_due_to_depth(depth):
            return

        stack: List[FrontierFrame] = [self._open_frame(url, depth, context)]
        try:
            while stack:
                frame = stack[-1]
                href = next(frame.hrefs, None)
                if href is None:
                    self._close_frame(stack.pop())
                    continue

                link_url = self.link_processor.process(href, frame.page_url, context)
                if link_url is None:
                    continue
                # the root page has already been read; it is recorded but never fetched again
                if context.is_root(page_key(link_url)):
                    continue
                if self.crawl_policy.should_expand(frame.depth):
                    stack.append(self._open_frame(link_url, frame.depth - 1, context))
        finally:
            # release any pages still open if traversal was interrupted
            while stack:
                self._close_frame(stack.pop())

    def _open_frame(self, url: str, depth: int, context: CrawlContext) -> FrontierFrame:
        return FrontierFrame(page_url=url, hrefs=self.page_fetch_service.iter_hrefs(url, context), depth=depth)

    @staticmethod
    def _close_frame(frame: FrontierFrame) -> None:
        close = getattr(frame.hrefs, "close", None)
        if close is not None:
            close()
