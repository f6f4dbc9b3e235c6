"""Extracted content model, content tags, and sniffing result enum."""

from enum import Enum

from pydantic import BaseModel


class ContentTag(str, Enum):
    """Display/classification label attached to every extraction result."""

    HTML = "text/html"
    PDF = "application/pdf"
    TEXT = "text/plain"


class ContentKind(str, Enum):
    """Closed set of sniffing outcomes. Every member must be handled by the normalizer."""

    YOUTUBE = "youtube"
    HTML = "html"
    PDF = "pdf"
    UNSUPPORTED = "unsupported"


# Short prefixes shown next to the size in a provenance label
_TAG_PREFIXES = {
    ContentTag.HTML: "HTML",
    ContentTag.PDF: "PDF",
    ContentTag.TEXT: "TXT",
}


class ExtractedContent(BaseModel):
    """Normalized content produced by any extraction path."""

    url: str | None = None  # None for direct uploads
    content: str  # Markdown (HTML), plain text (PDF), or SRT text (YouTube)
    size: int  # Length of the pre-normalization payload, not of content
    type: ContentTag

    def provenance_label(self) -> str:
        """Short label for display, e.g. ``PDF • 42 KB``."""
        return f"{_TAG_PREFIXES[self.type]} • {round(self.size / 1024)} KB"
