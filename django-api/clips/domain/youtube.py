"""YouTube link parsing for clip uploads."""

import re

YOUTUBE_ID_LENGTH = 11

_YOUTUBE_URL = re.compile(r"^.*((youtu\.be/)|(v/)|(/u/\w/)|(embed/)|(watch\?))\??v?=?([^#&?]*).*")


def extract_youtube_id(url: str) -> str | None:
    """Return the 11-character video id from a YouTube URL, or None."""
    match = _YOUTUBE_URL.match(url or "")
    if match is None or len(match.group(7)) != YOUTUBE_ID_LENGTH:
        return None
    return match.group(7)


def is_valid_youtube_url(url: str) -> bool:
    return extract_youtube_id(url) is not None
