from contextlib import contextmanager

import pytest

from linkcrawl.domain.http_response import HttpResponse
from linkcrawl.exceptions import HttpFetchError, HttpStatusError


class FakeFetcher:
    """In-memory site: url -> html body, url -> int status, or url -> exception."""

    def __init__(self, pages, chunk_size=7, content_type="text/html; charset=utf-8"):
        self.pages = pages
        self.chunk_size = chunk_size
        self.content_type = content_type
        self.opened = []
        self.served = []
        self.closed = []

    def _chunks(self, body: bytes):
        for i in range(0, len(body), self.chunk_size):
            yield body[i:i + self.chunk_size]

    @contextmanager
    def open(self, url):
        self.opened.append(url)
        page = self.pages.get(url, 404)
        if isinstance(page, Exception):
            raise HttpFetchError(url, page)
        if isinstance(page, int):
            raise HttpStatusError(url, page)
        self.served.append(url)
        try:
            yield HttpResponse(200, self._chunks(page.encode("utf-8")), self.content_type, "utf-8")
        finally:
            self.closed.append(url)


@pytest.fixture
def fake_site():
    def _make(pages, **kwargs):
        return FakeFetcher(pages, **kwargs)
    return _make
