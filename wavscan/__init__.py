"""wavscan: amplitude and spectral snapshots for WAV sample datasets.

The package decodes 16-bit PCM WAV files, computes basic amplitude
statistics plus a single Hann-windowed log-magnitude spectrum, and
reports the results for files listed in a JSON metadata index.
"""
from .analysis import AnalysisReport, SignalAnalysis, analyze_audio
from .config import ScanConfig
from .scan import scan_dataset

__all__ = [
    "AnalysisReport",
    "SignalAnalysis",
    "ScanConfig",
    "analyze_audio",
    "scan_dataset",
]
