import codecs
import logging
from collections import deque
from html.parser import HTMLParser
from typing import Callable, Iterable, Iterator, Optional

from bs4.dammit import EncodingDetector

logger = logging.getLogger(__name__)


class AnchorTokenizer(HTMLParser):
    """Incremental tokenizer that queues href values of <a> tags as they are fed.

    Self-closing anchors reach `handle_starttag` through HTMLParser's default
    `handle_startendtag`.
    """

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.hrefs = deque()

    def handle_starttag(self, tag, attrs):
        if tag != "a":
            return
        for key, value in attrs:
            if key == "href":
                self.hrefs.append(value or "")


class LinkExtractor:
    def __init__(self, tokenizer_factory: Optional[Callable[[], AnchorTokenizer]] = None):
        self._tokenizer_factory = tokenizer_factory or AnchorTokenizer

    def iter_hrefs(self, chunks: Iterable[bytes], encoding: Optional[str] = None) -> Iterator[str]:
        """Yield raw href values from a streamed HTML body in document order.

        Only one chunk is decoded and parsed at a time. A tokenizer error ends
        the sequence after whatever was already found.
        """
        tokenizer = self._tokenizer_factory()
        for text in self._decode(chunks, encoding):
            try:
                tokenizer.feed(text)
            except Exception:
                logger.warning("HTML parse error, truncating link extraction", exc_info=True)
                yield from self._drain(tokenizer)
                return
            yield from self._drain(tokenizer)

        try:
            tokenizer.close()
        except Exception:
            logger.warning("HTML parse error at end of document", exc_info=True)
        yield from self._drain(tokenizer)

    @staticmethod
    def _drain(tokenizer: AnchorTokenizer) -> Iterator[str]:
        while tokenizer.hrefs:
            yield tokenizer.hrefs.popleft()

    def _decode(self, chunks: Iterable[bytes], encoding: Optional[str]) -> Iterator[str]:
        decoder = None
        for chunk in chunks:
            if not chunk:
                continue
            if decoder is None:
                decoder = codecs.getincrementaldecoder(self.detect_encoding(chunk, encoding))(errors="replace")
            yield decoder.decode(chunk)
        if decoder is not None:
            yield decoder.decode(b"", final=True)

    @staticmethod
    def detect_encoding(head: bytes, declared: Optional[str] = None) -> str:
        """Pick a codec from the HTTP charset, else BOM/<meta>/detector sniffing of `head`."""
        known = [declared] if declared else None
        detector = EncodingDetector(head, known_definite_encodings=known, is_html=True)
        for candidate in detector.encodings:
            try:
                return codecs.lookup(candidate).name
            except LookupError:
                logger.debug("Unknown encoding %r, trying next candidate", candidate)
        return "utf-8"
