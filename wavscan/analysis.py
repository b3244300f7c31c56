"""Per-file analysis: statistics plus a spectral snapshot at a fixed offset."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np

from .config import ANALYSIS_OFFSET_SECONDS, WINDOW_SIZE
from .decoder import AudioSignal
from .dsp import compute_amplitude_stats, compute_log_spectrum
from .errors import WindowOutOfRangeError
from .metadata import InstrumentInfo

logger = logging.getLogger("wavscan.analysis")


@dataclass
class SignalAnalysis:
    max_amplitude: float
    mean: float
    std_dev: float
    spectrum: np.ndarray = field(repr=False)


@dataclass
class AnalysisReport:
    file_stem: str
    instrument_family: str
    source: str
    sample_rate: int
    duration: float
    max_amplitude: float
    mean: float
    std_dev: float
    spectrum: np.ndarray = field(repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_stem": self.file_stem,
            "instrument_family": self.instrument_family,
            "source": self.source,
            "sample_rate": self.sample_rate,
            "duration": self.duration,
            "max_amplitude": self.max_amplitude,
            "mean": self.mean,
            "std_dev": self.std_dev,
            "spectrum": self.spectrum.tolist(),
        }


@dataclass
class FileOutcome:
    """Result of examining one candidate file: a report or a skip reason."""

    path: Path
    report: Optional[AnalysisReport] = None
    skip_reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.report is not None


def analyze_audio(
    samples: np.ndarray,
    sample_rate: int,
    window_size: int = WINDOW_SIZE,
    offset_seconds: int = ANALYSIS_OFFSET_SECONDS,
) -> SignalAnalysis:
    """Compute amplitude statistics and the spectrum of one analysis frame.

    The frame is ``window_size`` samples starting at ``sample_rate *
    offset_seconds``. Signals that end before the frame does raise
    :class:`WindowOutOfRangeError` instead of reading past the buffer.
    """

    samples = np.asarray(samples, dtype=np.float32)
    start = int(sample_rate) * int(offset_seconds)
    end = start + window_size
    if samples.shape[0] < end:
        raise WindowOutOfRangeError(
            f"Signal has {samples.shape[0]} samples, analysis window needs [{start}, {end})"
        )

    stats = compute_amplitude_stats(samples)
    spectrum = compute_log_spectrum(samples[start:end], window_size)

    logger.debug(
        "[ANALYSIS] peak=%.3f mean=%.3f std=%.3f window=[%d, %d)",
        stats.max_amplitude,
        stats.mean,
        stats.std_dev,
        start,
        end,
    )

    return SignalAnalysis(
        max_amplitude=stats.max_amplitude,
        mean=stats.mean,
        std_dev=stats.std_dev,
        spectrum=spectrum,
    )


def build_report(
    file_stem: str,
    info: InstrumentInfo,
    signal: AudioSignal,
    analysis: SignalAnalysis,
) -> AnalysisReport:
    return AnalysisReport(
        file_stem=file_stem,
        instrument_family=info.family,
        source=info.source,
        sample_rate=signal.sample_rate,
        duration=signal.duration,
        max_amplitude=analysis.max_amplitude,
        mean=analysis.mean,
        std_dev=analysis.std_dev,
        spectrum=analysis.spectrum,
    )
