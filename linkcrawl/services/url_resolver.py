"""Turn hrefs found on a page into absolute URLs."""
import posixpath
import re
from typing import Optional
from urllib.parse import SplitResult, urlsplit

from linkcrawl.exceptions import InvalidURLError

_ABSOLUTE_PREFIXES = ("http://", "https://")
_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")
_REPEATED_SLASHES = re.compile(r"/{2,}")


def clean_path(path: str) -> str:
    """Collapse `.` and `..` segments and duplicate separators of an absolute path."""
    if not path.startswith("/"):
        path = "/" + path
    return posixpath.normpath(_REPEATED_SLASHES.sub("/", path))


def _split_base(href: str, base_url: str) -> SplitResult:
    try:
        base = urlsplit(base_url)
    except ValueError as e:
        raise InvalidURLError(href, base_url, str(e)) from e
    if not base.scheme or not base.netloc:
        raise InvalidURLError(href, base_url, "base URL is not absolute")
    return base


def make_absolute_url(href: str, base_url: str) -> Optional[str]:
    """Resolve `href` against the page it was found on.

    Hrefs that already start with http:// or https:// come back untouched.
    Everything else is rebuilt on the base's scheme and host with a cleaned
    path. Returns None for hrefs with nothing to fetch (empty, fragment-only,
    mailto:, javascript: and other non-HTTP schemes). Raises InvalidURLError
    when the base or the href cannot be parsed.
    """
    href = href.strip()
    if href.startswith(_ABSOLUTE_PREFIXES):
        return href
    if not href or href.startswith("#"):
        return None

    base = _split_base(href, base_url)

    if href.startswith("//"):
        return f"{base.scheme}:{href}"

    scheme = _SCHEME_RE.match(href)
    if scheme:
        if scheme.group(1).lower() in ("http", "https"):
            return href
        return None

    try:
        parts = urlsplit(href)
    except ValueError as e:
        raise InvalidURLError(href, base_url, str(e)) from e

    path = parts.path
    if not path:
        # query-only href
        path = base.path or "/"
    elif not path.startswith("/"):
        path = posixpath.join(posixpath.dirname(base.path or "/"), path)

    absolute = f"{base.scheme}://{base.netloc}{clean_path(path)}"
    if parts.query:
        absolute = f"{absolute}?{parts.query}"
    return absolute


def page_key(url: str) -> str:
    """Comparable form of `url`: empty path becomes `/`, path cleaned, fragment dropped.

    Unparseable URLs are returned as given.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return url
    return parts._replace(path=clean_path(parts.path), fragment="").geturl()
