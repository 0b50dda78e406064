from __future__ import annotations

from typing import ContextManager, Protocol

from linkcrawl.domain.http_response import HttpResponse


class Fetcher(Protocol):
    """Open a URL and hand back a response whose body is read lazily.

    Kept small so the requests-based `HttpService` can be swapped for a fake
    in tests or another client later.
    """

    def open(self, url: str) -> ContextManager[HttpResponse]: ...
