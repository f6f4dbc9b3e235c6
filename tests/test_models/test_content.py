"""Tests for the ExtractedContent model, ContentTag enum, and ContentKind enum."""

import pytest
from pydantic import ValidationError

from web_context.models.content import ContentKind, ContentTag, ExtractedContent


def test_extracted_content_from_url():
    content = ExtractedContent(
        url="https://example.com",
        content="Hello\n",
        size=72,
        type=ContentTag.HTML,
    )
    assert content.url == "https://example.com"
    assert content.content == "Hello\n"
    assert content.size == 72
    assert content.type == ContentTag.HTML


def test_extracted_content_upload_has_no_url():
    content = ExtractedContent(content="text", size=4, type=ContentTag.PDF)
    assert content.url is None


def test_type_accepts_tag_string():
    content = ExtractedContent(content="", size=0, type="text/plain")
    assert content.type is ContentTag.TEXT


def test_type_rejects_raw_mime():
    """Only the three fixed tags are valid, never an arbitrary response MIME type."""
    with pytest.raises(ValidationError):
        ExtractedContent(content="{}", size=2, type="application/json")


def test_content_is_required():
    with pytest.raises(ValidationError):
        ExtractedContent(url="https://example.com", size=0, type=ContentTag.HTML)


def test_json_serialization_uses_tag_values():
    content = ExtractedContent(url="https://example.com/a.pdf", content="x", size=1, type=ContentTag.PDF)
    assert content.model_dump(mode="json") == {
        "url": "https://example.com/a.pdf",
        "content": "x",
        "size": 1,
        "type": "application/pdf",
    }


def test_content_tag_enum_values():
    """Assert ContentTag has exactly 3 members with correct string values."""
    assert len(list(ContentTag)) == 3
    assert ContentTag.HTML.value == "text/html"
    assert ContentTag.PDF.value == "application/pdf"
    assert ContentTag.TEXT.value == "text/plain"


def test_content_kind_enum_values():
    assert {kind.value for kind in ContentKind} == {"youtube", "html", "pdf", "unsupported"}


@pytest.mark.parametrize(
    ("tag", "size", "label"),
    [
        (ContentTag.PDF, 43_008, "PDF • 42 KB"),
        (ContentTag.HTML, 2_048, "HTML • 2 KB"),
        (ContentTag.TEXT, 100, "TXT • 0 KB"),
        (ContentTag.TEXT, 1_000, "TXT • 1 KB"),
    ],
)
def test_provenance_label(tag, size, label):
    content = ExtractedContent(content="", size=size, type=tag)
    assert content.provenance_label() == label
