"""Single-frame log-magnitude spectrum.

A diagnostic snapshot rather than a spectrogram: one Hann-windowed frame,
one forward FFT, the non-redundant half of the bins in log10 magnitude.
"""
from __future__ import annotations

from functools import lru_cache

import numpy as np
from scipy import signal

from ..config import LOG_MAGNITUDE_FLOOR, WINDOW_SIZE
from ..errors import WindowOutOfRangeError


@lru_cache(maxsize=8)
def hann_window(window_size: int) -> np.ndarray:
    """Periodic Hann window, ``0.5 * (1 - cos(2*pi*i / N))`` for i in [0, N)."""

    window = signal.get_window("hann", window_size, fftbins=True).astype(np.float32)
    window.setflags(write=False)
    return window


def compute_log_spectrum(samples: np.ndarray, window_size: int = WINDOW_SIZE) -> np.ndarray:
    """Return ``window_size // 2`` log10 magnitudes of the first frame of ``samples``.

    Each bin is ``log10(|X[k]| / window_size)`` floored at -10.0, so silent
    bins never become -inf. Raises :class:`WindowOutOfRangeError` when
    fewer than ``window_size`` samples are available.
    """

    if window_size <= 0:
        raise WindowOutOfRangeError(f"Window size must be positive, got {window_size}")

    x = np.asarray(samples, dtype=np.float32)
    if x.shape[0] < window_size:
        raise WindowOutOfRangeError(
            f"Need {window_size} samples for the analysis window, got {x.shape[0]}"
        )

    frame = x[:window_size] * hann_window(window_size)
    bins = np.fft.rfft(frame)[: window_size // 2]

    with np.errstate(divide="ignore"):
        log_mag = np.log10(np.abs(bins) / window_size)
    return np.maximum(log_mag, LOG_MAGNITUDE_FLOOR).astype(np.float32)
