"""Custom exceptions for linkcrawl services."""


class InvalidInputError(ValueError):
    """Raised when a crawl is started with unusable input (e.g. an empty root URL)."""


class InvalidURLError(ValueError):
    """Raised when an href cannot be turned into an absolute URL."""

    def __init__(self, href: str, base_url: str, reason: str = "cannot resolve"):
        self.href = href
        self.base_url = base_url
        self.reason = reason
        super().__init__(f"Cannot make {href!r} absolute against {base_url!r}: {reason}")


class FetchFailure(Exception):
    """Base class for a page that could not be fetched."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(message)


class HttpFetchError(FetchFailure):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.original = original
        super().__init__(url, f"HTTP fetch failed for {url}: {original}")


class HttpStatusError(FetchFailure):
    """Raised when a fetch completes with a status other than 200."""

    def __init__(self, url: str, status_code: int):
        self.status_code = status_code
        super().__init__(url, f"Non-OK status for {url}: {status_code}")
