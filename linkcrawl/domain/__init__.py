"""Domain objects for linkcrawl - explicit re-exports to satisfy linters."""
from .crawl_context import CrawlContext as CrawlContext
from .crawl_result import CrawlResult as CrawlResult
from .frontier import FrontierFrame as FrontierFrame
from .http_response import HttpResponse as HttpResponse
from .visited_tracker import VisitedTracker as VisitedTracker

__all__ = ["CrawlContext", "CrawlResult", "FrontierFrame", "HttpResponse", "VisitedTracker"]
