"""Suggestion engine: ranking, normalized confidence, alternatives, reasons."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import TYPE_CHECKING

from ._scorer import rank
from ._types import Alternative, Suggestion

if TYPE_CHECKING:
    from ._types import SignalValue
    from ._weights import WeightTable

MAX_ALTERNATIVES = 2
FALLBACK_FORMAT = "standard"
EMPTY_CONTENT_REASON = "No content provided."
GENERAL_REASON = "general article content"

# format -> ordered (clause, gating signals); a clause applies when any of
# its signals is true.
REASON_CLAUSES: dict[str, tuple[tuple[str, tuple[str, ...]], ...]] = {
    "status": (
        ("short content under 280 characters", ("short_content",)),
        ("no title", ("no_title",)),
        ("single paragraph", ("single_paragraph",)),
    ),
    "aside": (
        ("brief content", ("medium_content", "short_content")),
        ("few paragraphs", ("few_paragraphs",)),
    ),
    "quote": (
        ("contains blockquote", ("has_blockquote",)),
        ("has citation", ("has_cite",)),
    ),
    "link": (
        ("URL is primary content", ("dominant_url",)),
        ("links to external site", ("external_link",)),
    ),
    "image": (
        ("single image", ("single_image",)),
        ("image is primary content", ("image_dominant",)),
    ),
    "gallery": (
        ("multiple images", ("multiple_images",)),
        ("gallery block detected", ("gallery_block",)),
    ),
    "video": (
        ("contains video", ("has_video",)),
        ("YouTube/Vimeo embed", ("youtube_vimeo",)),
    ),
    "audio": (
        ("contains audio", ("has_audio",)),
        ("podcast content", ("podcast_link",)),
    ),
    "chat": (
        ("chat/dialogue pattern", ("chat_pattern",)),
        ("speaker labels detected", ("speaker_labels",)),
    ),
    "standard": (
        ("long-form content", ("long_content",)),
        ("structured with headings", ("has_headings",)),
        ("mixed media types", ("mixed_media",)),
    ),
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def confidence_for(fmt: str, score: int, weights: WeightTable) -> int:
    """Normalize a score to 0-100 against the format's max possible score."""
    total = weights.max_possible_score(fmt)
    if total <= 0:
        return 0
    return max(0, min(100, _round_half_up(score / total * 100)))


def reason_for(fmt: str, signals: Mapping[str, SignalValue]) -> str:
    """Comma-joined clauses explaining why content fits a format."""
    fallback = REASON_CLAUSES[FALLBACK_FORMAT]
    table = REASON_CLAUSES.get(fmt, fallback)
    clauses = [
        clause
        for clause, gates in table
        if any(signals.get(gate) for gate in gates)
    ]
    if not clauses and table is fallback:
        clauses.append(GENERAL_REASON)
    return ", ".join(clauses)


def empty_suggestion(weights: WeightTable | None = None) -> Suggestion:
    """Zero-confidence result for content with nothing to score.

    Suggests ``standard``, or the first declared format of a table that
    has no ``standard`` entry, the same pick an all-zero ranking makes.
    """
    fmt = FALLBACK_FORMAT
    if weights is not None and fmt not in weights:
        fmt = weights.formats[0]
    return Suggestion(
        suggested_format=fmt,
        confidence=0,
        reason=EMPTY_CONTENT_REASON,
    )


def suggest(
    signals: Mapping[str, SignalValue],
    scores: Mapping[str, int],
    weights: WeightTable,
) -> Suggestion:
    """Pick the top-scoring format and up to two runner-up alternatives."""
    ranked = rank(scores)
    if not ranked:
        return empty_suggestion(weights)

    top_format, top_score = ranked[0]

    alternatives: list[Alternative] = []
    for fmt, fmt_score in ranked[1:]:
        if len(alternatives) >= MAX_ALTERNATIVES:
            break
        if fmt_score > 0:
            alternatives.append(Alternative(
                format=fmt,
                confidence=confidence_for(fmt, fmt_score, weights),
                reason=reason_for(fmt, signals),
            ))

    return Suggestion(
        suggested_format=top_format,
        confidence=confidence_for(top_format, top_score, weights),
        reason=reason_for(top_format, signals),
        alternatives=alternatives,
        signals=signals,
        scores=dict(scores),
    )
