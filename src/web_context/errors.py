"""Extraction error hierarchy.

Every failure aborts the extraction that raised it and propagates unchanged to
the caller. Library exceptions are translated at the extractor that calls the
library, with the original exception chained as ``__cause__``.
"""


class ExtractionError(Exception):
    """Base class for all extraction failures."""

    kind = "extraction_error"
    default_message = "content extraction failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class FetchFailure(ExtractionError):
    """Non-success HTTP status or transport error while fetching a URL."""

    kind = "fetch_failure"
    default_message = "failure fetching content from provided URL"


class UnsupportedType(ExtractionError):
    """Resource is neither a YouTube link, an HTML page, nor a PDF."""

    kind = "unsupported_type"
    default_message = "URL provided is not a PDF or HTML document"


class InvalidInput(ExtractionError):
    """YouTube URL without a parseable video identifier."""

    kind = "invalid_input"
    default_message = "invalid YouTube URL"


class TranscriptUnavailable(ExtractionError):
    """Captions provider failed or returned nothing for the video."""

    kind = "transcript_unavailable"
    default_message = "transcript unavailable for the provided video"


class ConversionFailure(ExtractionError):
    """HTML parse, prune, or markdown serialization step failed."""

    kind = "conversion_failure"
    default_message = "failure converting HTML content to markdown"


class PdfParseFailure(ExtractionError):
    """PDF buffer is corrupt, encrypted, or not a PDF."""

    kind = "pdf_parse_failure"
    default_message = "failure parsing PDF document"
