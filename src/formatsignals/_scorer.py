"""Weighted scoring of a signal set against every format in a weight table."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from ._weights import CHARACTER_LIMIT_BONUS, LIMITED_FORMATS

if TYPE_CHECKING:
    from ._types import SignalValue
    from ._weights import WeightTable


def score_format(
    fmt: str, signals: Mapping[str, SignalValue], weights: WeightTable
) -> int:
    """Score one format: weights of its true boolean signals, plus the limit bonus.

    Count signals (char_count, word_count) never contribute directly even if
    a table names them; they only drive the character-limit bonus.
    """
    total = 0
    for signal, weight in weights.signal_weights(fmt):
        value = signals.get(signal)
        if isinstance(value, bool) and value:
            total += weight

    if fmt in LIMITED_FORMATS:
        char_count = signals.get("char_count", 0)
        if char_count <= weights.character_limit(fmt):
            total += CHARACTER_LIMIT_BONUS

    return total


def score(
    signals: Mapping[str, SignalValue], weights: WeightTable
) -> dict[str, int]:
    """Score every format, in weight table order."""
    return {fmt: score_format(fmt, signals, weights) for fmt in weights}


def rank(scores: Mapping[str, int]) -> list[tuple[str, int]]:
    """Sort (format, score) pairs by score descending.

    The sort is stable, so equal scores keep table order and the
    first-declared format wins a tie.
    """
    return sorted(scores.items(), key=lambda item: item[1], reverse=True)
