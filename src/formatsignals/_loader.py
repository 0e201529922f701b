"""Weight table loading, manifest validation, and SHA-256 checksum verification."""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import Any

import msgpack

from ._errors import (
    FormatSignalsChecksumError,
    FormatSignalsError,
    FormatSignalsVersionError,
    WeightTableError,
)
from ._weights import WeightTable

logger = logging.getLogger(__name__)

_EXPECTED_VERSION = "1.0"

WEIGHTS_FILE = "weights.bin"

_DATA_FILES = (WEIGHTS_FILE,)


def _sha256(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


def _read_manifest(data_dir: Path) -> dict[str, Any]:
    manifest_path = data_dir / "manifest.json"
    if not manifest_path.exists():
        raise FormatSignalsError(f"manifest.json not found in {data_dir}")
    with open(manifest_path) as f:
        return json.load(f)


def _validate_manifest(manifest: dict[str, Any], data_dir: Path) -> None:
    version = manifest.get("version")
    if version != _EXPECTED_VERSION:
        raise FormatSignalsVersionError(
            f"Expected data version {_EXPECTED_VERSION!r}, got {version!r}"
        )
    checksums = manifest.get("files", {})
    for filename in _DATA_FILES:
        filepath = data_dir / filename
        if not filepath.exists():
            raise FormatSignalsError(f"Missing data file: {filepath}")
        expected = checksums.get(filename)
        if expected is None:
            raise FormatSignalsError(f"No checksum in manifest for {filename}")
        actual = _sha256(filepath)
        if actual != expected:
            raise FormatSignalsChecksumError(
                f"Checksum mismatch for {filename}: "
                f"expected {expected[:16]}..., got {actual[:16]}..."
            )


def _load_msgpack(path: Path, **kwargs: Any) -> Any:
    with open(path, "rb") as f:
        return msgpack.unpackb(f.read(), raw=False, **kwargs)


def load_weights(data_dir: Path | str) -> WeightTable:
    """Load and validate a weight table data directory.

    The directory holds ``manifest.json`` and ``weights.bin``, a msgpack
    map of format -> {signal -> weight}. Map order is declaration order.
    """
    data_dir = Path(data_dir)

    manifest = _read_manifest(data_dir)
    _validate_manifest(manifest, data_dir)

    raw = _load_msgpack(data_dir / WEIGHTS_FILE)
    if not isinstance(raw, dict):
        raise WeightTableError(
            f"{WEIGHTS_FILE} must hold a map, got {type(raw).__name__}"
        )
    table = WeightTable(raw)
    logger.debug(
        "Loaded weight table from %s (%d formats)", data_dir, len(table)
    )
    return table


def write_weights(data_dir: Path | str, table: WeightTable) -> Path:
    """Write a weight table as a data directory readable by load_weights."""
    data_dir = Path(data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)

    weights_path = data_dir / WEIGHTS_FILE
    with open(weights_path, "wb") as f:
        f.write(msgpack.packb(table.to_dict(), use_bin_type=True))

    manifest = {
        "version": _EXPECTED_VERSION,
        "files": {WEIGHTS_FILE: _sha256(weights_path)},
    }
    with open(data_dir / "manifest.json", "w") as f:
        json.dump(manifest, f, indent=2)

    logger.debug("Wrote weight table to %s", data_dir)
    return data_dir
