import logging
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)


def main_domain(host: str) -> str:
    """Last two labels of `host` once a leading "www." is dropped.

    Hosts with fewer than two labels map to the empty string. Multi-label
    public suffixes are not understood: "blog.example.co.uk" -> "co.uk".
    """
    if host.startswith("www."):
        host = host[len("www."):]
    parts = host.split(".")
    if len(parts) < 2:
        return ""
    return parts[-2] + "." + parts[-1]


def _host(url: str) -> str:
    # host[:port] without any userinfo, case preserved
    return urlsplit(url).netloc.rpartition("@")[2]


def same_host(url1: str, url2: str) -> bool:
    """Whether both URLs fall under the same main domain."""
    try:
        host1 = _host(url1)
    except ValueError as e:
        logger.warning("Error parsing URL1 %r: %s", url1, e)
        return False
    try:
        host2 = _host(url2)
    except ValueError as e:
        logger.warning("Error parsing URL2 %r: %s", url2, e)
        return False
    return main_domain(host1) == main_domain(host2)
