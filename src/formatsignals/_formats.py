"""The ten post formats and their display metadata."""

from __future__ import annotations

from ._errors import UnknownFormatError
from ._types import FormatMeta

# Canonical declaration order. Ranking ties resolve to the earlier entry.
FORMATS: tuple[str, ...] = (
    "status",
    "aside",
    "quote",
    "link",
    "image",
    "gallery",
    "video",
    "audio",
    "chat",
    "standard",
)

_REGISTRY: dict[str, FormatMeta] = {
    meta.slug: meta
    for meta in (
        FormatMeta(
            "status", "Status",
            "Short status update without title. Limited to 280 characters, "
            "Twitter-style.",
        ),
        FormatMeta(
            "aside", "Aside",
            "Short note or update without a title. Displays in a bubble "
            "style with minimized metadata.",
        ),
        FormatMeta(
            "quote", "Quote",
            "Quotation or citation. Starts with a quote block for "
            "highlighted text.",
        ),
        FormatMeta(
            "link", "Link",
            "Link to external content. Starts with a link paragraph.",
        ),
        FormatMeta(
            "image", "Image",
            "Single image post. Starts with an image block for photo-centric "
            "content.",
        ),
        FormatMeta(
            "gallery", "Gallery",
            "Image gallery post. Starts with a gallery block for multiple "
            "images.",
        ),
        FormatMeta(
            "video", "Video",
            "Video file or embed. Starts with a video block for multimedia "
            "content.",
        ),
        FormatMeta(
            "audio", "Audio",
            "Audio file or embed. Starts with an audio block for podcasts or "
            "music.",
        ),
        FormatMeta(
            "chat", "Chat",
            "Chat transcript or conversation log.",
        ),
        FormatMeta(
            "standard", "Standard",
            "Default post format with full title and content. Best for "
            "traditional blog posts.",
        ),
    )
}


def is_format(slug: str) -> bool:
    return slug in _REGISTRY


def get_format(slug: str) -> FormatMeta:
    """Return display metadata for a format slug.

    Raises:
        UnknownFormatError: If slug is not one of FORMATS.
    """
    try:
        return _REGISTRY[slug]
    except KeyError:
        raise UnknownFormatError(slug) from None


def list_formats() -> list[FormatMeta]:
    return [_REGISTRY[slug] for slug in FORMATS]
