"""Check content against one target format's hard and soft constraints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from ._errors import UnknownFormatError
from ._formats import is_format
from ._signals import SHORT_CONTENT_CHARS
from ._types import ValidationResult

if TYPE_CHECKING:
    from ._types import SignalValue

# Formats whose defining signal is mandatory: format -> (signal, message).
REQUIRED_SIGNALS: dict[str, tuple[str, str]] = {
    "link": ("has_links", "Link posts must contain at least one link."),
    "image": ("has_images", "Image posts must contain at least one image."),
    "video": ("has_video", "Video posts must contain video content."),
    "audio": ("has_audio", "Audio posts must contain audio content."),
}

# Soft expectations: format -> (any-of signals, warning).
EXPECTED_SIGNALS: dict[str, tuple[tuple[str, ...], str]] = {
    "quote": (
        ("has_blockquote", "quotation_marks"),
        "Quote posts should contain a blockquote or quoted text.",
    ),
    "gallery": (
        ("multiple_images", "gallery_block"),
        "Gallery posts typically contain multiple images.",
    ),
    "chat": (
        ("chat_pattern", "speaker_labels"),
        "Chat posts should contain dialogue with speaker labels.",
    ),
}


def validate(
    signals: Mapping[str, SignalValue], fmt: str, *, strict: bool = False
) -> ValidationResult:
    """Apply a format's rules to an extracted signal set.

    Formats without rules (aside, standard) are always valid. An unknown
    slug is also treated as valid unless ``strict`` is set.

    Raises:
        UnknownFormatError: If ``strict`` and fmt is not a known format.
    """
    if strict and not is_format(fmt):
        raise UnknownFormatError(fmt)

    messages: list[str] = []
    warnings: list[str] = []

    required = REQUIRED_SIGNALS.get(fmt)
    if required is not None:
        signal, message = required
        if not signals.get(signal):
            messages.append(message)

    expected = EXPECTED_SIGNALS.get(fmt)
    if expected is not None:
        any_of, warning = expected
        if not any(signals.get(s) for s in any_of):
            warnings.append(warning)

    if fmt == "status":
        char_count = signals.get("char_count", 0)
        if char_count > SHORT_CONTENT_CHARS:
            warnings.append(
                "Status posts are typically under 280 characters. "
                f"Current: {char_count}"
            )
        if signals.get("has_title"):
            warnings.append("Status posts typically have no title.")
    elif fmt == "image" and signals.get("multiple_images"):
        warnings.append(
            "Multiple images detected. Consider using Gallery format."
        )

    return ValidationResult(
        valid=not messages,
        format=fmt,
        messages=messages,
        warnings=warnings,
        signals=signals,
    )
