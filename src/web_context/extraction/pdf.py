"""PDF text extraction using pypdf."""

import logging
from io import BytesIO

from pypdf import PdfReader

from web_context.errors import PdfParseFailure

logger = logging.getLogger(__name__)


def extract_pdf_text(buffer: bytes) -> str:
    """Extract the text content of a PDF buffer in document order.

    Pages are read one by one with pypdf's text-run extraction and joined with
    a blank line. No OCR: a scanned PDF without a text layer yields "".

    Raises PdfParseFailure for empty, corrupt, encrypted, or non-PDF buffers.
    """
    if not buffer:
        raise PdfParseFailure("empty PDF buffer")

    try:
        reader = PdfReader(BytesIO(buffer))
        if reader.is_encrypted:
            raise PdfParseFailure("encrypted PDF documents are not supported")
        pages_text = [page.extract_text() or "" for page in reader.pages]
    except PdfParseFailure:
        raise
    except Exception as exc:
        # pypdf raises a wide range of errors on malformed input
        logger.warning("PDF parsing failed: %s", exc)
        raise PdfParseFailure() from exc

    return "\n\n".join(pages_text).strip()
