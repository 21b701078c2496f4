"""Project metadata from the `[meta]` table of a TOML file."""

from __future__ import annotations

import tomllib
from typing import Any
from pathlib import Path

from live_relay.errors import MetadataError
from live_relay.config.server import METADATA_SECTION


def load_metadata(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            doc = tomllib.load(f)
    except FileNotFoundError as exc:
        raise MetadataError(f"failed to read {path}: file not found") from exc
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise MetadataError(f"failed to read {path}: {exc}") from exc

    meta = doc.get(METADATA_SECTION)
    if not isinstance(meta, dict):
        raise MetadataError(f"missing [{METADATA_SECTION}] section in {path}")
    return meta


__all__ = ["load_metadata"]
