from typing import Iterator, NamedTuple, Optional


class HttpResponse(NamedTuple):
    """Response from an HTTP fetch whose body is still being streamed."""
    status_code: int
    body: Iterator[bytes]
    content_type: Optional[str] = None
    encoding: Optional[str] = None
