"""formatsignals error types."""


class FormatSignalsError(Exception):
    """Base error for all formatsignals failures."""


class FormatSignalsVersionError(FormatSignalsError):
    """Manifest version mismatch."""


class FormatSignalsChecksumError(FormatSignalsError):
    """File checksum verification failed."""


class WeightTableError(FormatSignalsError, ValueError):
    """Weight table has the wrong shape or values."""


class UnknownFormatError(FormatSignalsError, ValueError):
    """Format slug is not one of the ten known formats."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"unknown format {slug!r}")
        self.slug = slug
