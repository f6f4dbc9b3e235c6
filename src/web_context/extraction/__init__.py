"""Content extraction: YouTube transcripts, HTML pages, and PDF documents.

Public API:
    fetch_content_from_url(url) -> ExtractedContent
        Fetches a URL, sniffs its content kind, and dispatches to exactly one
        extractor.
    extract_pdf_from_buffer(buffer) -> ExtractedContent
        Extracts text from an uploaded PDF without any network access.
"""

from web_context.extraction.normalizer import extract_pdf_from_buffer, fetch_content_from_url
from web_context.extraction.router import is_youtube_link, sniff_content_kind
from web_context.models.content import ContentKind

__all__ = [
    "fetch_content_from_url",
    "extract_pdf_from_buffer",
    "is_youtube_link",
    "sniff_content_kind",
    "ContentKind",
]
