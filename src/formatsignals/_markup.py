"""Markup scanning: tag stripping, word counting, literal marker scan (Aho-Corasick)."""

from __future__ import annotations

import re
from collections import Counter

import ahocorasick

_SCRIPT_STYLE_RE = re.compile(
    r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL
)
_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
# Block ends and line breaks become newlines so line-anchored patterns
# ("Alice: hi") still see one line per paragraph.
_BLOCK_END_RE = re.compile(
    r"</(?:p|div|li|dt|dd|h[1-6]|blockquote|figure|figcaption|pre|tr|"
    r"ul|ol|section|article|header|footer)\s*>|<br\s*/?>",
    re.IGNORECASE,
)
_TAG_RE = re.compile(r"<[^>]*>")

# Letter runs, allowing inner apostrophes and hyphens ("don't", "well-known").
_WORD_RE = re.compile(r"[^\W\d_]+(?:['’\-][^\W\d_]+)*")

# Literal markers matched case-insensitively against lowercased markup.
# Several strings may share a category; counts are per category.
MARKERS: dict[str, str] = {
    "</p>": "paragraph_close",
    "<br": "line_break",
    "<blockquote": "blockquote",
    "<cite": "cite",
    "<figure": "figure",
    "wp-block-gallery": "gallery_block",
    "<img": "img_tag",
    "<video": "video_tag",
    "<audio": "audio_tag",
    "<iframe": "iframe_tag",
    "wp-block-embed": "embed_block",
    "youtube.com": "youtube_vimeo",
    "youtu.be": "youtube_vimeo",
    "vimeo.com": "youtube_vimeo",
    "podcast.apple.com": "podcast_host",
    "podcasts.apple.com": "podcast_host",
    "spotify.com/episode": "podcast_host",
    "anchor.fm": "podcast_host",
    "overcast.fm": "podcast_host",
}

# Any of these means the content carries media of some kind.
MEDIA_MARKERS = frozenset({
    "img_tag", "video_tag", "audio_tag", "iframe_tag",
    "embed_block", "gallery_block",
})


def _build_automaton(markers: dict[str, str]) -> ahocorasick.Automaton:
    ac = ahocorasick.Automaton()
    for needle, category in markers.items():
        ac.add_word(needle, category)
    ac.make_automaton()
    return ac


_AUTOMATON = _build_automaton(MARKERS)


def scan_markers(content: str) -> Counter[str]:
    """Count literal marker occurrences per category in a single pass.

    Matching is case-insensitive and overlapping matches are all counted.
    """
    counts: Counter[str] = Counter()
    if not content:
        return counts
    for _end, category in _AUTOMATON.iter(content.lower()):
        counts[category] += 1
    return counts


def strip_tags(content: str) -> str:
    """Reduce markup to plain text.

    Drops script/style bodies, comments (including block annotations such
    as ``<!-- wp:paragraph -->``) and every remaining tag. Block boundaries
    become line breaks; lines are trimmed and blank lines dropped.
    Entities are left as written.
    """
    text = _SCRIPT_STYLE_RE.sub("", content)
    text = _COMMENT_RE.sub("\n", text)
    text = _BLOCK_END_RE.sub("\n", text)
    text = _TAG_RE.sub("", text)
    return "\n".join(line.strip() for line in text.splitlines() if line.strip())


def count_words(text: str) -> int:
    return sum(1 for _ in _WORD_RE.finditer(text))
