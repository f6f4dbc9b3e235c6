"""Data models and enums for the web-context pipeline."""

from web_context.models.content import ContentKind, ContentTag, ExtractedContent

__all__ = [
    "ContentKind",
    "ContentTag",
    "ExtractedContent",
]
