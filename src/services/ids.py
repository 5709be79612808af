# src/services/ids.py
import re
from typing import Optional

_YT_RE = re.compile(
    r"(?:youtu\.be/|youtube\.com/(?:watch\?(?:[^#]*&)?v=|embed/|shorts/|live/))([A-Za-z0-9_-]{6,})"
)

YOUTUBE_EMBED_BASE = "https://www.youtube.com/embed/"


def youtube_video_id(url: object) -> Optional[str]:
    """Return the video id from a YouTube link, or None for other links."""
    if url is None:
        return None
    m = _YT_RE.search(str(url))
    return m.group(1) if m else None


def youtube_embed_url(url: object) -> Optional[str]:
    video_id = youtube_video_id(url)
    if video_id is None:
        return None
    return f"{YOUTUBE_EMBED_BASE}{video_id}"
