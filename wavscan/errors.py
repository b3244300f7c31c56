"""Exception types raised by the wavscan pipeline.

Only :class:`MetadataLoadError` is meant to abort a scan. Decode and window
errors are per-file and are turned into skipped outcomes by ``wavscan.scan``.
"""


class WavScanError(Exception):
    """Base class for all wavscan errors."""


class MetadataLoadError(WavScanError):
    """The metadata index could not be read or parsed."""


class DecodeError(WavScanError):
    """A WAV container could not be opened or is not 16-bit PCM."""


class WindowOutOfRangeError(WavScanError, ValueError):
    """The signal is too short for the requested analysis window."""
