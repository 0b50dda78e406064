from typing import Iterator, NamedTuple


class FrontierFrame(NamedTuple):
    """One page on the crawl stack: its remaining hrefs and depth budget.

    Every href drawn from `hrefs` is a frontier edge
    (page_url, href, depth) waiting to be resolved and filtered.
    """
    page_url: str
    hrefs: Iterator[str]
    depth: int
