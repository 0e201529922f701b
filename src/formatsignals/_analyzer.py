"""FormatAnalyzer: extraction, scoring, suggestion and validation behind one object."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from ._scorer import score
from ._signals import SignalExtractor
from ._suggest import empty_suggestion, suggest
from ._validator import validate
from ._weights import WeightTable

if TYPE_CHECKING:
    from ._signals import SignalExtension
    from ._types import SignalValue, Suggestion, ValidationResult

logger = logging.getLogger(__name__)


def _is_blank(content: str | None) -> bool:
    return not content or not content.strip()


def _has_nothing_to_score(signals: Mapping[str, SignalValue]) -> bool:
    # Markup such as an empty paragraph block: no text and no media
    return signals["char_count"] == 0 and bool(signals["no_media"])


class FormatAnalyzer:
    """Main analysis engine. Holds the weight table and extractor settings.

    Instances carry no per-call state and can be shared across threads.
    """

    __slots__ = ("_weights", "_extractor")

    def __init__(
        self,
        weights: WeightTable | Mapping[str, Mapping[str, int]] | None = None,
        *,
        own_host: str | None = None,
        extensions: Iterable[SignalExtension] = (),
    ) -> None:
        if weights is None:
            weights = WeightTable.default()
        elif not isinstance(weights, WeightTable):
            weights = WeightTable(weights)
        self._weights = weights
        self._extractor = SignalExtractor(own_host, extensions)

    @property
    def weights(self) -> WeightTable:
        return self._weights

    @property
    def extractor(self) -> SignalExtractor:
        return self._extractor

    # -- Typed API --

    def signals(self, content: str, title: str = "") -> Mapping[str, SignalValue]:
        """Extract the signal set for content and title."""
        return self._extractor.extract(content, title)

    def scores(self, content: str, title: str = "") -> dict[str, int]:
        """Score content against every format in the weight table."""
        return score(self.signals(content, title), self._weights)

    def analyze(self, content: str, title: str = "") -> Suggestion:
        """Run the full pipeline and return the ranked suggestion.

        Blank content, or markup with neither text nor media once tags
        are stripped, short-circuits to a zero-confidence suggestion with
        no signals, scores or alternatives.
        """
        if _is_blank(content):
            return empty_suggestion(self._weights)

        signals = self._extractor.extract(content, title)
        if _has_nothing_to_score(signals):
            logger.debug("No text or media after stripping markup")
            return empty_suggestion(self._weights)
        scores = score(signals, self._weights)
        result = suggest(signals, scores, self._weights)
        logger.debug(
            "Suggested %s (confidence %d, %d alternatives)",
            result.suggested_format, result.confidence,
            len(result.alternatives),
        )
        return result

    def analyze_batch(
        self, items: Iterable[str | tuple[str, str]]
    ) -> list[Suggestion]:
        """Analyze multiple contents, given as strings or (content, title) pairs."""
        results: list[Suggestion] = []
        for item in items:
            if isinstance(item, str):
                results.append(self.analyze(item))
            else:
                content, title = item
                results.append(self.analyze(content, title))
        return results

    def validate(
        self,
        content: str,
        fmt: str,
        title: str = "",
        *,
        strict: bool = False,
    ) -> ValidationResult:
        """Check content against one format's constraints.

        Raises:
            UnknownFormatError: If ``strict`` and fmt is not a known format.
        """
        signals = self._extractor.extract(content, title)
        return validate(signals, fmt, strict=strict)

    # -- Request/response API (JSON-ready dicts) --

    def suggest_format(self, content: str, title: str = "") -> dict[str, Any]:
        result = self.analyze(content, title)
        return {
            "suggested_format": result.suggested_format,
            "confidence": result.confidence,
            "reason": result.reason,
            "alternatives": [alt.to_dict() for alt in result.alternatives],
        }

    def analyze_content(self, content: str, title: str = "") -> dict[str, Any]:
        result = self.analyze(content, title)
        return {
            "suggested_format": result.suggested_format,
            "confidence": result.confidence,
            "signals": dict(result.signals),
            "scores": dict(result.scores),
        }

    def validate_format_content(
        self, content: str, format: str = "standard", title: str = ""
    ) -> dict[str, Any]:
        result = self.validate(content, format, title)
        return {
            "valid": result.valid,
            "format": result.format,
            "messages": list(result.messages),
            "warnings": list(result.warnings),
        }

    def get_format_signal_weights(
        self, format: str | None = None
    ) -> dict[str, dict[str, int]]:
        """Weights for one format, or the whole table if format is unset or unknown."""
        return self._weights.subset(format)
