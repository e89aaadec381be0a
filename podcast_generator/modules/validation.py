import logging
import re
import socket
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from podcast_generator.modules.errors import ArticleFetchError, InputError

logger = logging.getLogger(__name__)

# Literal hostname check only; DNS rebinding and IPv6 private ranges get through.
PRIVATE_HOST_PATTERN = re.compile(
    r"^(localhost|127\.|10\.|192\.168\.|172\.(1[6-9]|2[0-9]|3[0-1])\.)"
)


@dataclass(frozen=True)
class PodcastRequest:
    topics: Optional[str] = None
    blog_url: Optional[str] = None

    @property
    def is_blog(self) -> bool:
        return self.blog_url is not None


def _present(value) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def parse_request(payload) -> PodcastRequest:
    """Turn a decoded JSON body into a request, or raise InputError.

    When both fields are given the blog URL wins.
    """
    if not isinstance(payload, dict):
        payload = {}
    topics = _present(payload.get("topics"))
    blog_url = _present(payload.get("blogUrl"))
    if blog_url is None and topics is None:
        raise InputError("No topics or blog URL provided.")
    if blog_url is not None:
        return PodcastRequest(blog_url=blog_url)
    return PodcastRequest(topics=topics)


def _canonical_host(hostname: str) -> str:
    """Dotted-quad form of numeric IPv4 hosts (2130706433, 0x7f.0.0.1, 0177.0.0.1).

    Other hostnames are returned unchanged.
    """
    try:
        return socket.inet_ntoa(socket.inet_aton(hostname))
    except (OSError, ValueError):
        return hostname


def validate_blog_url(blog_url: str) -> str:
    """Check scheme and hostname of a blog URL and return it normalized."""
    try:
        parsed = urlparse(blog_url)
    except ValueError as e:
        raise ArticleFetchError(f"Invalid blog URL. {e}")
    if parsed.scheme not in ("http", "https"):
        raise ArticleFetchError("Invalid blog URL. URL must use http or https.")
    hostname = parsed.hostname
    if not hostname:
        raise ArticleFetchError("Invalid blog URL. URL has no hostname.")
    if PRIVATE_HOST_PATTERN.match(_canonical_host(hostname)):
        logger.warning(f"Rejected blog URL pointing at private host: {hostname}")
        raise ArticleFetchError("Invalid blog URL. URL points to a private or local address.")
    if not parsed.path:
        parsed = parsed._replace(path="/")
    return parsed.geturl()
