"""formatsignals: rule-based classifier scoring HTML/block markup against ten post formats."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._analyzer import FormatAnalyzer
from ._errors import (
    FormatSignalsChecksumError,
    FormatSignalsError,
    FormatSignalsVersionError,
    UnknownFormatError,
    WeightTableError,
)
from ._formats import FORMATS, get_format, is_format, list_formats
from ._loader import load_weights, write_weights
from ._signals import SignalExtractor
from ._types import Alternative, FormatMeta, Suggestion, ValidationResult
from ._weights import DEFAULT_WEIGHTS, WeightTable

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from ._signals import SignalExtension

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "Alternative",
    "DEFAULT_WEIGHTS",
    "FORMATS",
    "FormatAnalyzer",
    "FormatMeta",
    "FormatSignalsChecksumError",
    "FormatSignalsError",
    "FormatSignalsVersionError",
    "SignalExtractor",
    "Suggestion",
    "UnknownFormatError",
    "ValidationResult",
    "WeightTable",
    "WeightTableError",
    "get_format",
    "is_format",
    "list_formats",
    "load_weights",
    "write_weights",
]


def load(
    data_dir: Path | str | None = None,
    *,
    own_host: str | None = None,
    extensions: Iterable[SignalExtension] = (),
) -> FormatAnalyzer:
    """Return a ready-to-use FormatAnalyzer.

    Args:
        data_dir: Weight table data directory. If None, uses the built-in
            default weights.
        own_host: The site's own host; links to it are not external.
        extensions: Extra signal callables, see SignalExtractor.
    """
    weights = WeightTable.default() if data_dir is None else load_weights(data_dir)
    return FormatAnalyzer(weights, own_host=own_host, extensions=extensions)
