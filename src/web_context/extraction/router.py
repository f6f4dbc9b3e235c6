"""URL pattern matching and content kind detection."""

import re

from web_context.models.content import ContentKind

# Scheme and www./m. prefix optional; requires a path after the host
YOUTUBE_LINK_PATTERN = re.compile(
    r"^(?:https?://)?(?:(?:www|m)\.)?(?:youtube\.com|youtu\.be)/.+",
    re.IGNORECASE,
)


def is_youtube_link(url: str) -> bool:
    """Check whether a URL points at YouTube (youtube.com or youtu.be host)."""
    return YOUTUBE_LINK_PATTERN.match(url) is not None


def sniff_content_kind(url: str, content_type: str | None) -> ContentKind:
    """Classify a fetched resource from its URL and declared Content-Type header.

    YouTube links win regardless of the header. Otherwise the header is
    substring-matched, so ``text/html; charset=utf-8`` is still HTML.
    """
    if is_youtube_link(url):
        return ContentKind.YOUTUBE

    header = (content_type or "").lower()
    if "text/html" in header:
        return ContentKind.HTML
    if "application/pdf" in header:
        return ContentKind.PDF
    return ContentKind.UNSUPPORTED
