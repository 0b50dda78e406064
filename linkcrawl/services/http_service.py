from contextlib import contextmanager
from typing import Callable, Iterator

import requests
from urllib3.exceptions import LocationValueError

from linkcrawl.domain.http_response import HttpResponse
from linkcrawl.exceptions import HttpFetchError, HttpStatusError


class HttpService:
    """
    HTTP client wrapper for streaming web pages.

    Requires http_client callable (normally `requests.get`) for dependency
    injection. This enables easy testing without patching and allows swapping
    HTTP libraries.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: float = 10, chunk_size: int = 8192):
        self.user_agent = user_agent
        self.timeout = timeout
        self.chunk_size = chunk_size
        self.http_client = http_client

    @contextmanager
    def open(self, url: str) -> Iterator[HttpResponse]:
        """GET `url` and yield the response with its body still streaming.

        Raises HttpFetchError on transport errors and HttpStatusError for any
        status other than 200. The connection is released when the block exits.
        """
        headers = {"User-Agent": self.user_agent}
        try:
            resp = self.http_client(url, headers=headers, timeout=self.timeout, stream=True)
        except (requests.exceptions.RequestException, LocationValueError) as e:
            # urllib3 rejects malformed hosts (e.g. empty labels) before requests can wrap it
            raise HttpFetchError(url, e) from e

        try:
            if resp.status_code != requests.codes.ok:
                raise HttpStatusError(url, resp.status_code)

            ct = resp.headers.get('Content-Type')
            # requests guesses ISO-8859-1 for any text/* without a charset; only trust a declared one
            encoding = resp.encoding if ct and 'charset=' in ct.lower() else None

            yield HttpResponse(resp.status_code, self._iter_body(url, resp), ct, encoding)
        finally:
            resp.close()

    def _iter_body(self, url: str, resp) -> Iterator[bytes]:
        try:
            yield from resp.iter_content(chunk_size=self.chunk_size)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e
