"""Runtime configuration for dataset scans.

Analysis constants live here as named values so callers (and tests) can
vary them without touching the DSP code. The dataset location is read from
the environment with a fallback to the standard NSynth test layout.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

DEFAULT_DATASET_PATH = "/workspace/nsynth_data/nsynth-test"
METADATA_FILENAME = "examples.json"
AUDIO_DIRNAME = "audio"

WINDOW_SIZE = 1024
ANALYSIS_OFFSET_SECONDS = 1
MAX_REPORTS = 5
LOG_MAGNITUDE_FLOOR = -10.0
PCM16_MAX = 32767


@dataclass(frozen=True)
class ScanConfig:
    dataset_path: Path
    window_size: int = WINDOW_SIZE
    offset_seconds: int = ANALYSIS_OFFSET_SECONDS
    max_reports: int = MAX_REPORTS

    @property
    def metadata_path(self) -> Path:
        return self.dataset_path / METADATA_FILENAME

    @property
    def audio_dir(self) -> Path:
        return self.dataset_path / AUDIO_DIRNAME

    @classmethod
    def from_env(cls) -> "ScanConfig":
        """Build a config from ``WAVSCAN_DATASET_PATH`` (or the default path)."""

        dataset = os.getenv("WAVSCAN_DATASET_PATH") or DEFAULT_DATASET_PATH
        return cls(dataset_path=Path(dataset))

    def with_overrides(
        self,
        *,
        dataset_path: Optional[Path] = None,
        max_reports: Optional[int] = None,
    ) -> "ScanConfig":
        changes = {}
        if dataset_path is not None:
            changes["dataset_path"] = Path(dataset_path)
        if max_reports is not None:
            changes["max_reports"] = int(max_reports)
        return replace(self, **changes)
