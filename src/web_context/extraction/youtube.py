"""YouTube transcript extraction using youtube-transcript-api, serialized as SRT."""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import parse_qs, urlsplit

from youtube_transcript_api import YouTubeTranscriptApi

from web_context.config import get_settings
from web_context.errors import InvalidInput, TranscriptUnavailable

logger = logging.getLogger(__name__)

# youtube.com paths that carry the video id as their second segment
_ID_PATH_PREFIXES = frozenset({"shorts", "embed", "live", "v"})


@dataclass(frozen=True)
class TranscriptSegment:
    """One timed caption cue. Times are in milliseconds."""

    offset_ms: int
    duration_ms: int
    text: str

    @property
    def end_ms(self) -> int:
        return self.offset_ms + self.duration_ms


def extract_video_id(url: str) -> str | None:
    """Extract the video id from a YouTube URL.

    The ``v`` query parameter wins. Without it, short links (youtu.be/<id>)
    and youtube.com/shorts|embed|live|v/<id> paths are accepted.
    Returns None when no id is present (e.g. ``https://youtu.be/``).
    """
    if "://" not in url:
        url = f"https://{url}"
    parts = urlsplit(url)

    video_ids = parse_qs(parts.query).get("v")
    if video_ids and video_ids[0]:
        return video_ids[0]

    host = (parts.hostname or "").lower()
    segments = [s for s in parts.path.split("/") if s]
    if host == "youtu.be" and segments:
        return segments[0]
    is_youtube_host = host == "youtube.com" or host.endswith(".youtube.com")
    if is_youtube_host and len(segments) >= 2 and segments[0] in _ID_PATH_PREFIXES:
        return segments[1]
    return None


def format_timestamp(ms: int) -> str:
    """Format milliseconds as an SRT timestamp: HH:MM:SS,mmm."""
    hours, remainder = divmod(ms, 3_600_000)
    minutes, remainder = divmod(remainder, 60_000)
    seconds, millis = divmod(remainder, 1_000)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{millis:03d}"


def format_srt(segments: Iterable[TranscriptSegment]) -> str:
    """Serialize segments as SRT cues, in the order given."""
    cues = []
    for index, segment in enumerate(segments, start=1):
        start = format_timestamp(segment.offset_ms)
        end = format_timestamp(segment.end_ms)
        cues.append(f"{index}\n{start} --> {end}\n{segment.text}\n\n")
    return "".join(cues)


def _fetch_segments(video_id: str, languages: list[str]) -> list[TranscriptSegment]:
    """Fetch caption snippets from YouTube and convert seconds to milliseconds."""
    transcript = YouTubeTranscriptApi().fetch(video_id, languages=languages)
    return [
        TranscriptSegment(
            offset_ms=round(snippet.start * 1000),
            duration_ms=round(snippet.duration * 1000),
            text=snippet.text,
        )
        for snippet in transcript
    ]


async def extract_transcript(url: str) -> str:
    """Fetch the transcript of a YouTube video and return it as SRT text.

    The transcript API client is synchronous, so the fetch runs in a worker
    thread. Attempted exactly once.

    Raises:
        InvalidInput: the URL carries no video id.
        TranscriptUnavailable: captions disabled, video missing, request
            failure, or an empty transcript.
    """
    video_id = extract_video_id(url)
    if video_id is None:
        raise InvalidInput()

    languages = get_settings().youtube_transcript_languages
    try:
        segments = await asyncio.to_thread(_fetch_segments, video_id, languages)
    except Exception as exc:
        # Catch-all: TranscriptsDisabled, VideoUnavailable, IP blocks, request errors
        logger.warning("Transcript fetch failed for %s (%s)", video_id, type(exc).__name__)
        raise TranscriptUnavailable(f"transcript unavailable for video {video_id}") from exc

    if not segments:
        raise TranscriptUnavailable(f"transcript for video {video_id} is empty")

    logger.info("Fetched %d transcript segments for %s", len(segments), video_id)
    return format_srt(segments)
