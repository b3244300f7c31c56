"""JSON metadata index keyed by file stem (NSynth ``examples.json`` layout)."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from .errors import MetadataLoadError

logger = logging.getLogger("wavscan.metadata")

UNKNOWN = "unknown"


@dataclass(frozen=True)
class InstrumentInfo:
    family: str = UNKNOWN
    source: str = UNKNOWN


def _str_field(record: Any, key: str) -> str:
    if isinstance(record, Mapping):
        value = record.get(key)
        if isinstance(value, str):
            return value
    return UNKNOWN


class MetadataIndex:
    def __init__(self, entries: Mapping[str, Any]):
        self._entries = entries

    @classmethod
    def load(cls, path: Path) -> "MetadataIndex":
        """Read the index from ``path``; a missing or unparseable file is fatal."""

        try:
            with open(path, "r", encoding="utf-8") as f:
                entries = json.load(f)
        except (OSError, ValueError) as exc:
            raise MetadataLoadError(f"Failed to load metadata from {path}: {exc}") from exc

        if not isinstance(entries, dict):
            # stems are only looked up in a top-level object; anything else matches nothing
            logger.warning(
                "[METADATA] %s holds a JSON %s, not an object; no file will match",
                path,
                type(entries).__name__,
            )
            entries = {}

        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, stem: str) -> Optional[InstrumentInfo]:
        if stem not in self._entries:
            return None
        record = self._entries[stem]
        return InstrumentInfo(
            family=_str_field(record, "instrument_family_str"),
            source=_str_field(record, "instrument_source_str"),
        )
