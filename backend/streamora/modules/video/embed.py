"""Embed URL helpers for YouTube and Rumble links."""

import re
from typing import Optional

from streamora.modules.video.models import EmbedSource

_YOUTUBE_WATCH = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([^&\s]+)")
_RUMBLE_EMBED = re.compile(r"rumble\.com/embed/([^/?]+)")
_RUMBLE_PAGE = re.compile(r"rumble\.com/v([^/?]+)")


def detect_embed_source(url: str) -> Optional[EmbedSource]:
    """Guess the host of a video URL."""
    if "youtube.com" in url or "youtu.be" in url:
        return EmbedSource.YOUTUBE
    if "rumble.com" in url:
        return EmbedSource.RUMBLE
    return None


def to_embed_url(url: str, source: EmbedSource) -> str:
    """Rewrite a watch/page URL into the host's embeddable player URL.

    Unrecognised URLs are returned unchanged.
    """
    if source == EmbedSource.YOUTUBE:
        match = _YOUTUBE_WATCH.search(url)
        if match:
            return f"https://www.youtube.com/embed/{match.group(1)}"
        return url

    match = _RUMBLE_EMBED.search(url)
    if match:
        return f"https://rumble.com/embed/{match.group(1)}/"
    match = _RUMBLE_PAGE.search(url)
    if match:
        return f"https://rumble.com/embed/v{match.group(1)}/"
    return url
