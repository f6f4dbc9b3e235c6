"""FastAPI application exposing the content normalizer over HTTP."""

from contextlib import asynccontextmanager
from urllib.parse import urlsplit

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from web_context.config import get_settings
from web_context.errors import (
    ConversionFailure,
    ExtractionError,
    FetchFailure,
    InvalidInput,
    PdfParseFailure,
    TranscriptUnavailable,
    UnsupportedType,
)
from web_context.extraction import extract_pdf_from_buffer, fetch_content_from_url
from web_context.logging_config import configure_logging
from web_context.models.content import ExtractedContent

# HTTP status returned for each extraction failure kind
ERROR_STATUS_CODES: dict[type[ExtractionError], int] = {
    InvalidInput: 400,
    UnsupportedType: 415,
    FetchFailure: 502,
    TranscriptUnavailable: 404,
    ConversionFailure: 422,
    PdfParseFailure: 422,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and load config on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    yield


app = FastAPI(
    title="Web Context",
    lifespan=lifespan,
)


class FetchRequest(BaseModel):
    """Body of POST /fetch."""

    url: str


def _is_http_url(url: str) -> bool:
    parts = urlsplit(url)
    return parts.scheme in ("http", "https") and bool(parts.netloc)


@app.exception_handler(ExtractionError)
async def extraction_error_handler(request: Request, exc: ExtractionError) -> JSONResponse:
    """Render extraction failures as JSON with a per-kind status code."""
    status_code = ERROR_STATUS_CODES.get(type(exc), 500)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error": exc.kind},
    )


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": "web-context",
        "version": "0.1.0",
    }


@app.post("/fetch", response_model=ExtractedContent)
async def fetch_endpoint(body: FetchRequest) -> ExtractedContent:
    """Fetch a URL and return its normalized content."""
    if not _is_http_url(body.url):
        raise HTTPException(status_code=400, detail="URL must be an absolute http(s) URL")
    return await fetch_content_from_url(body.url)


@app.post("/fetch/pdf", response_model=ExtractedContent)
async def fetch_pdf_endpoint(request: Request) -> ExtractedContent:
    """Extract text from an uploaded PDF sent as the raw request body."""
    limit = get_settings().document_file_size_limit
    buffer = await request.body()
    if len(buffer) > limit:
        raise HTTPException(
            status_code=413,
            detail=f"PDF too large: {len(buffer)} bytes (limit: {limit})",
        )
    return await extract_pdf_from_buffer(buffer)
