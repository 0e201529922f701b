"""Signal extraction: scan markup and title into a flat mapping of named signals."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Optional
from urllib.parse import urlsplit

from ._markup import MEDIA_MARKERS, count_words, scan_markers, strip_tags
from ._types import SignalValue

SignalExtension = Callable[
    [str, str, Mapping[str, SignalValue]], Optional[Mapping[str, SignalValue]]
]

SHORT_CONTENT_CHARS = 280
MEDIUM_CONTENT_CHARS = 500
LONG_CONTENT_CHARS = 1000

_HEADING_RE = re.compile(r"<h[1-6]\b[^>]*>", re.IGNORECASE)
_ANCHOR_RE = re.compile(r"<a\s[^>]*>", re.IGNORECASE)
_ANCHOR_HREF_RE = re.compile(r"<a\s[^>]*href=", re.IGNORECASE)
_HREF_VALUE_RE = re.compile(
    r"""<a\s[^>]*href=["']([^"']+)["']""", re.IGNORECASE
)
_IMG_RE = re.compile(r"<img\b[^>]*>", re.IGNORECASE)
_PARAGRAPH_OPEN_RE = re.compile(r"<p\b[^>]*>", re.IGNORECASE)
_URL_SCHEME_RE = re.compile(r"https?://", re.IGNORECASE)

_VIDEO_RE = re.compile(
    r"<video\b[^>]*>|wp-block-video|wp-block-embed.*?(?:youtube|vimeo)",
    re.IGNORECASE,
)
_VIDEO_EMBED_RE = re.compile(
    r"wp-block-embed|<iframe[^>]+(?:youtube|vimeo|dailymotion)",
    re.IGNORECASE,
)
_AUDIO_RE = re.compile(
    r"<audio\b[^>]*>|wp-block-audio|wp-block-embed.*?(?:soundcloud|spotify)",
    re.IGNORECASE,
)
_AUDIO_EMBED_RE = re.compile(
    r"wp-block-embed.*?(?:soundcloud|spotify|bandcamp)"
    r"|<iframe[^>]+(?:soundcloud|spotify)",
    re.IGNORECASE,
)

_QUOTE_GLYPH_RE = re.compile(r'["“”„‘’‚「」『』«»‹›]')

# "Alice: hi", "[10:42] Alice: hi", "(9:05) Bob: yo"
_CHAT_RE = re.compile(
    r"^[\[(]?\d{1,2}:\d{2}[\])]?\s*[A-Z][a-z]+:|^[A-Z][a-z]+\s*:",
    re.MULTILINE,
)
_DIALOGUE_RES = (
    re.compile(r"^[-–—]\s", re.MULTILINE),
    re.compile(r":\s*$", re.MULTILINE),
    re.compile(r"^>[^>]", re.MULTILINE),
)
_SPEAKER_RE = re.compile(r"^[A-Z][a-z]+(?:\s+[A-Z][a-z]+)?:", re.MULTILINE)


def _normalize_host(host: str | None) -> str | None:
    if not host:
        return None
    host = host.strip()
    if "//" not in host:
        # Bare "example.com" or "example.com:8080"
        host = "//" + host
    try:
        host = urlsplit(host).hostname or ""
    except ValueError:
        return None
    return host.lower() or None


def _url_host(url: str) -> str | None:
    try:
        return urlsplit(url.strip()).hostname
    except ValueError:
        # Unparseable netloc, e.g. an unterminated IPv6 literal
        return None


class SignalExtractor:
    """Turn raw content and a title into a read-only signal set.

    Args:
        own_host: The site's own host name (or a URL on it). Links to this
            host do not count as external. When None, every absolute link
            with a host is external.
        extensions: Callables ``(content, title, signals) -> mapping``
            applied in order after the built-in signals; their entries are
            added to, or replace, the built-in ones.
    """

    __slots__ = ("_own_host", "_extensions")

    def __init__(
        self,
        own_host: str | None = None,
        extensions: Iterable[SignalExtension] = (),
    ) -> None:
        self._own_host = _normalize_host(own_host)
        self._extensions = tuple(extensions)

    @property
    def own_host(self) -> str | None:
        return self._own_host

    def extract(self, content: str, title: str = "") -> Mapping[str, SignalValue]:
        content = content or ""
        title = title or ""

        plain = strip_tags(content)
        char_count = len(plain)
        word_count = count_words(plain)
        markers = scan_markers(content)

        paragraphs = markers["paragraph_close"]
        n_images = len(_IMG_RE.findall(content))
        has_video = _VIDEO_RE.search(content) is not None
        has_audio = _AUDIO_RE.search(content) is not None
        has_title = bool(title.strip())
        n_media_types = (n_images > 0) + has_video + has_audio

        signals: dict[str, SignalValue] = {
            # Length
            "char_count": char_count,
            "word_count": word_count,
            "short_content": char_count <= SHORT_CONTENT_CHARS,
            "medium_content": SHORT_CONTENT_CHARS < char_count <= MEDIUM_CONTENT_CHARS,
            "long_content": char_count > LONG_CONTENT_CHARS,
            # Title and structure
            "no_title": not has_title,
            "has_title": has_title,
            "link_in_title": _URL_SCHEME_RE.search(title) is not None,
            "single_paragraph": paragraphs <= 1,
            "few_paragraphs": paragraphs <= 3,
            "multiple_sections": paragraphs > 5,
            "has_headings": _HEADING_RE.search(content) is not None,
            # Quote
            "has_blockquote": markers["blockquote"] > 0,
            "has_cite": markers["cite"] > 0,
            "quotation_marks": _QUOTE_GLYPH_RE.search(plain) is not None,
            # Link
            "has_links": _ANCHOR_HREF_RE.search(content) is not None,
            "external_link": self._has_external_link(content),
            "dominant_url": (
                _ANCHOR_RE.search(content) is not None and word_count < 30
            ),
            # Image
            "has_images": n_images > 0,
            "single_image": n_images == 1,
            "multiple_images": n_images > 1,
            "image_dominant": n_images > 0 and word_count < 100,
            "has_figure": markers["figure"] > 0,
            "gallery_block": markers["gallery_block"] > 0,
            # Video
            "has_video": has_video,
            "video_embed": _VIDEO_EMBED_RE.search(content) is not None,
            "youtube_vimeo": markers["youtube_vimeo"] > 0,
            # Audio
            "has_audio": has_audio,
            "audio_embed": _AUDIO_EMBED_RE.search(content) is not None,
            "podcast_link": markers["podcast_host"] > 0,
            # Chat
            "chat_pattern": _CHAT_RE.search(plain) is not None,
            "dialogue_markers": _has_dialogue_markers(plain),
            "speaker_labels": len(_SPEAKER_RE.findall(plain)) >= 3,
            "alternating_lines": (
                len(_PARAGRAPH_OPEN_RE.findall(content)) >= 5
                or markers["line_break"] >= 5
            ),
            # Media in general
            "no_media": not any(markers[m] for m in MEDIA_MARKERS),
            "minimal_text": word_count < 50,
            "mixed_media": n_media_types >= 2,
        }

        for extension in self._extensions:
            extra = extension(content, title, MappingProxyType(signals))
            if extra:
                signals.update(extra)

        return MappingProxyType(signals)

    def _has_external_link(self, content: str) -> bool:
        for url in _HREF_VALUE_RE.findall(content):
            host = _url_host(url)
            if host and host != self._own_host:
                return True
        return False


def _has_dialogue_markers(plain: str) -> bool:
    """Two of three line shapes: dash-led, colon-terminated, '>'-quoted."""
    hits = sum(1 for pattern in _DIALOGUE_RES if pattern.search(plain))
    return hits >= 2
