"""Signal weight table: default configuration and validated read-only wrapper."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from ._errors import WeightTableError
from ._formats import is_format

# Reserved per-format entry; a character count threshold, not a signal.
CHARACTER_LIMIT = "character_limit"
DEFAULT_CHARACTER_LIMIT = 280

# Formats that earn a bonus when the content fits their character limit.
LIMITED_FORMATS = frozenset({"status", "aside"})
CHARACTER_LIMIT_BONUS = 20

DEFAULT_WEIGHTS: dict[str, dict[str, int]] = {
    # status and aside fit any short untitled post, so their totals (bonus
    # included) stay below the defining signals of the markup formats.
    "status": {
        "short_content": 20,
        "no_title": 12,
        "no_media": 4,
        "single_paragraph": 8,
        "character_limit": 280,
    },
    "aside": {
        "short_content": 16,
        "no_title": 8,
        "no_media": 4,
        "few_paragraphs": 6,
        "character_limit": 500,
    },
    "quote": {
        "has_blockquote": 60,
        "has_cite": 30,
        "quotation_marks": 20,
        "short_content": 10,
    },
    "link": {
        "dominant_url": 50,
        "external_link": 30,
        "short_commentary": 20,
        "link_in_title": 25,
    },
    "image": {
        "single_image": 60,
        "image_dominant": 30,
        "minimal_text": 20,
        "has_figure": 15,
    },
    "gallery": {
        "multiple_images": 60,
        "gallery_block": 40,
        "image_grid": 30,
        "minimal_text": 10,
    },
    "video": {
        "has_video": 60,
        "video_embed": 40,
        "youtube_vimeo": 30,
        "minimal_text": 10,
    },
    "audio": {
        "has_audio": 60,
        "audio_embed": 40,
        "podcast_link": 30,
        "minimal_text": 10,
    },
    "chat": {
        "chat_pattern": 60,
        "dialogue_markers": 40,
        "speaker_labels": 30,
        "alternating_lines": 20,
    },
    "standard": {
        "long_content": 20,
        "multiple_sections": 15,
        "has_headings": 10,
        "mixed_media": 10,
    },
}


def _check_positive_int(fmt: str, key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise WeightTableError(
            f"{fmt}.{key} must be an int, got {type(value).__name__}"
        )
    if value <= 0:
        raise WeightTableError(f"{fmt}.{key} must be positive, got {value}")
    return value


class WeightTable:
    """Read-only mapping of format -> {signal -> weight}.

    Declaration order is preserved and doubles as the ranking tie-break
    order. A table is replaced in full, never merged with the defaults.
    """

    __slots__ = ("_table",)

    def __init__(self, weights: Mapping[str, Mapping[str, int]] | None = None) -> None:
        if weights is None:
            weights = DEFAULT_WEIGHTS
        if not isinstance(weights, Mapping) or not weights:
            raise WeightTableError("weight table must be a non-empty mapping")

        table: dict[str, MappingProxyType] = {}
        for fmt, sub in weights.items():
            if not isinstance(fmt, str) or not is_format(fmt):
                raise WeightTableError(f"unknown format {fmt!r} in weight table")
            if not isinstance(sub, Mapping):
                raise WeightTableError(
                    f"weights for {fmt!r} must be a mapping, "
                    f"got {type(sub).__name__}"
                )
            checked: dict[str, int] = {}
            for key, value in sub.items():
                if not isinstance(key, str) or not key:
                    raise WeightTableError(
                        f"signal names for {fmt!r} must be non-empty strings"
                    )
                checked[key] = _check_positive_int(fmt, key, value)
            table[fmt] = MappingProxyType(checked)
        self._table = table

    @classmethod
    def default(cls) -> WeightTable:
        return cls(DEFAULT_WEIGHTS)

    # -- Mapping-like access --

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, fmt: object) -> bool:
        return fmt in self._table

    def __getitem__(self, fmt: str) -> Mapping[str, int]:
        return self._table[fmt]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightTable):
            return NotImplemented
        return self.to_dict() == other.to_dict() and self.formats == other.formats

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"WeightTable({list(self._table)!r})"

    @property
    def formats(self) -> tuple[str, ...]:
        return tuple(self._table)

    def items(self) -> Iterator[tuple[str, Mapping[str, int]]]:
        return iter(self._table.items())

    # -- Scoring support --

    def weights_for(self, fmt: str) -> Mapping[str, int]:
        """A format's full sub-table, reserved keys included."""
        return self._table[fmt]

    def signal_weights(self, fmt: str) -> Iterator[tuple[str, int]]:
        """Yield (signal, weight) pairs for a format, skipping reserved keys."""
        for key, weight in self._table[fmt].items():
            if key != CHARACTER_LIMIT:
                yield key, weight

    def character_limit(self, fmt: str) -> int:
        return self._table[fmt].get(CHARACTER_LIMIT, DEFAULT_CHARACTER_LIMIT)

    def max_possible_score(self, fmt: str) -> int:
        """Sum of a format's signal weights plus its character-limit bonus.

        Formats absent from the table normalize against 100.
        """
        if fmt not in self._table:
            return 100
        total = sum(weight for _, weight in self.signal_weights(fmt))
        if fmt in LIMITED_FORMATS:
            total += CHARACTER_LIMIT_BONUS
        return total

    # -- Introspection --

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {fmt: dict(sub) for fmt, sub in self._table.items()}

    def subset(self, fmt: str | None = None) -> dict[str, dict[str, int]]:
        """Return one format's weights, or the whole table.

        Unknown or missing formats fall back to the whole table.
        """
        if fmt is not None and fmt in self._table:
            return {fmt: dict(self._table[fmt])}
        return self.to_dict()
