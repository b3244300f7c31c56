from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class AmplitudeStats:
    max_amplitude: float
    mean: float
    std_dev: float


def compute_amplitude_stats(samples: np.ndarray) -> AmplitudeStats:
    """Return peak magnitude, mean and population standard deviation.

    An empty input gives ``max_amplitude == 0.0`` and NaN for the other two.
    """

    x = np.asarray(samples, dtype=np.float32).reshape(-1)
    n = np.float32(x.shape[0])

    peak = np.max(np.abs(x), initial=np.float32(0.0))
    with np.errstate(invalid="ignore", divide="ignore"):
        mean = np.float32(np.sum(x, dtype=np.float32) / n)
        variance = np.float32(np.sum((x - mean) ** 2, dtype=np.float32) / n)
    std_dev = np.sqrt(variance)

    return AmplitudeStats(
        max_amplitude=float(peak),
        mean=float(mean),
        std_dev=float(std_dev),
    )
