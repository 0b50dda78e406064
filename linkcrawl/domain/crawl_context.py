from typing import List, Optional

from linkcrawl.domain.visited_tracker import VisitedTracker


class CrawlContext:
    """State owned by a single crawl invocation."""

    def __init__(
        self,
        root_url: str,
        max_depth: int,
        visited_tracker: Optional[VisitedTracker] = None,
        root_key: Optional[str] = None,
    ):
        self.root_url = root_url
        self.max_depth = max_depth
        # normalised root, so "http://host" and "http://host/" count as the same page
        self.root_key = root_key if root_key is not None else root_url
        self.visited = visited_tracker or VisitedTracker()
        self.pages_fetched = 0
        self.pages_failed = 0

    def mark_visited(self, url: str) -> bool:
        return self.visited.mark(url)

    def is_visited(self, url: str) -> bool:
        return self.visited.is_visited(url)

    def is_root(self, key: str) -> bool:
        return key == self.root_key

    def sorted_links(self) -> List[str]:
        return sorted(self.visited.discovered())
