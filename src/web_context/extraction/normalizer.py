"""Content normalizer: fetch, sniff, dispatch to one extractor, build the result."""

import asyncio
import logging
from typing import assert_never

import httpx

from web_context.config import get_settings
from web_context.errors import FetchFailure, UnsupportedType
from web_context.extraction.html import html_to_markdown
from web_context.extraction.pdf import extract_pdf_text
from web_context.extraction.router import sniff_content_kind
from web_context.extraction.youtube import extract_transcript
from web_context.models.content import ContentKind, ContentTag, ExtractedContent

logger = logging.getLogger(__name__)


async def _http_get(url: str) -> httpx.Response:
    """GET a URL with a fresh client. Any transport error or non-2xx status is a FetchFailure."""
    settings = get_settings()
    try:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(settings.http_timeout_seconds),
            follow_redirects=True,
            headers={"User-Agent": settings.user_agent},
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Fetch failed: %s (%s)", url, exc)
        raise FetchFailure() from exc
    return response


async def fetch_content_from_url(url: str) -> ExtractedContent:
    """Fetch a URL and normalize it into ExtractedContent.

    The initial GET decides the content kind from its Content-Type header
    (YouTube links are recognized from the URL alone and their response body
    is ignored). PDFs are downloaded again as binary with a separate client.

    Raises:
        FetchFailure: transport error or non-2xx status on either request.
        UnsupportedType: neither a YouTube link, HTML, nor PDF.
        InvalidInput / TranscriptUnavailable: YouTube extraction failures.
        ConversionFailure: HTML could not be converted.
        PdfParseFailure: PDF could not be parsed.
    """
    response = await _http_get(url)
    content_type = response.headers.get("content-type")
    kind = sniff_content_kind(url, content_type)
    logger.info("Dispatching %s as %s", url, kind.value)

    match kind:
        case ContentKind.YOUTUBE:
            srt_content = await extract_transcript(url)
            return ExtractedContent(
                url=url,
                content=srt_content,
                size=len(srt_content),
                type=ContentTag.TEXT,
            )
        case ContentKind.HTML:
            html_content = response.text
            markdown_content = html_to_markdown(html_content)
            return ExtractedContent(
                url=url,
                content=markdown_content,
                size=len(html_content),
                type=ContentTag.HTML,
            )
        case ContentKind.PDF:
            pdf_response = await _http_get(url)
            # pypdf is synchronous -- run in thread
            pdf_text = await asyncio.to_thread(extract_pdf_text, pdf_response.content)
            return ExtractedContent(
                url=url,
                content=pdf_text,
                size=len(pdf_text),
                type=ContentTag.PDF,
            )
        case ContentKind.UNSUPPORTED:
            logger.info("Unsupported content type %r for %s", content_type, url)
            raise UnsupportedType()
        case _:
            assert_never(kind)


async def extract_pdf_from_buffer(buffer: bytes) -> ExtractedContent:
    """Extract text from an uploaded PDF. No network access and no sniffing."""
    pdf_text = await asyncio.to_thread(extract_pdf_text, buffer)
    return ExtractedContent(
        content=pdf_text,
        size=len(pdf_text),
        type=ContentTag.PDF,
    )
