"""Numerical core: windowed spectrum and amplitude statistics."""
from .spectrum import compute_log_spectrum, hann_window
from .stats import AmplitudeStats, compute_amplitude_stats

__all__ = [
    "compute_log_spectrum",
    "hann_window",
    "AmplitudeStats",
    "compute_amplitude_stats",
]
