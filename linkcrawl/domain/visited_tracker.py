from typing import List, Set


class VisitedTracker:
    """
    Tracks which URLs have been discovered during a crawl.

    Membership and discovery order are kept side by side so every URL marked
    here appears exactly once in `discovered()`.
    """

    def __init__(self):
        self._visited: Set[str] = set()
        self._order: List[str] = []

    def mark(self, url: str) -> bool:
        """Mark a URL as visited. Returns False if it was already known."""
        if url in self._visited:
            return False
        self._visited.add(url)
        self._order.append(url)
        return True

    def is_visited(self, url: str) -> bool:
        """Check if a URL has been visited."""
        return url in self._visited

    def discovered(self) -> List[str]:
        """URLs in the order they were first marked."""
        return list(self._order)

    def __len__(self) -> int:
        return len(self._order)
