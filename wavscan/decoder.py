"""16-bit PCM WAV decoding.

Samples are normalised by ``PCM16_MAX`` (32767) rather than 32768, so the
positive full-scale value maps to exactly 1.0 and -32768 lands slightly
below -1.0. Output must stay bit-compatible with that divisor.
"""
from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Union

import numpy as np
import soundfile as sf

from .config import PCM16_MAX
from .errors import DecodeError

logger = logging.getLogger("wavscan.decoder")

WavSource = Union[str, Path, BinaryIO]

_SUPPORTED_FORMATS = {"WAV", "WAVEX"}
_UNKNOWN_CHUNK_SIZE = 0xFFFFFFFF


@dataclass
class AudioSignal:
    samples: np.ndarray
    sample_rate: int
    channels: int = 1

    @property
    def duration(self) -> float:
        return float(self.samples.shape[0]) / float(self.sample_rate)


def _data_chunk_samples(stream: BinaryIO) -> Optional[int]:
    """Return the 16-bit sample count the RIFF ``data`` chunk header declares.

    libsndfile trims its frame count to the bytes actually present, so a
    truncated file would otherwise lose the samples its header promises.
    Returns None when the header cannot be walked.
    """

    riff = stream.read(12)
    if len(riff) < 12 or riff[:4] != b"RIFF" or riff[8:12] != b"WAVE":
        return None
    while True:
        header = stream.read(8)
        if len(header) < 8:
            return None
        chunk_id, size = struct.unpack("<4sI", header)
        if chunk_id == b"data":
            if size in (0, _UNKNOWN_CHUNK_SIZE):
                return None
            return size // 2
        stream.seek(size + (size & 1), 1)


def _declared_samples(source: WavSource) -> Optional[int]:
    if isinstance(source, (str, Path)):
        try:
            with open(source, "rb") as stream:
                return _data_chunk_samples(stream)
        except OSError:
            return None

    start = source.tell()
    try:
        return _data_chunk_samples(source)
    finally:
        source.seek(start)


def _fill_missing(raw: np.ndarray, expected: int) -> np.ndarray:
    """Pad samples the header declared but the data chunk did not deliver."""

    if raw.shape[0] >= expected:
        return raw
    logger.info("[DECODE] %d unreadable samples replaced with silence", expected - raw.shape[0])
    return np.concatenate([raw, np.zeros(expected - raw.shape[0], dtype=raw.dtype)])


def decode_wav(source: WavSource) -> AudioSignal:
    """Decode a WAV container into normalised float32 samples.

    Multi-channel data is returned as the flat interleaved sequence.
    Raises :class:`DecodeError` when the container cannot be opened,
    parsed, or does not hold 16-bit PCM.
    """

    target = str(source) if isinstance(source, Path) else source
    try:
        header_samples = _declared_samples(source)
        with sf.SoundFile(target) as f:
            if f.format not in _SUPPORTED_FORMATS or f.subtype != "PCM_16":
                raise DecodeError(f"Unsupported audio format: {f.format}/{f.subtype}")
            sample_rate = int(f.samplerate)
            channels = int(f.channels)
            declared = int(f.frames) * channels
            if header_samples is not None:
                declared = max(declared, header_samples)
            raw = f.read(dtype="int16", always_2d=True)
    except (RuntimeError, OSError) as exc:
        raise DecodeError(f"Failed to read audio: {exc}") from exc

    if sample_rate <= 0:
        raise DecodeError(f"Invalid sample rate: {sample_rate}")

    flat = _fill_missing(raw.reshape(-1), declared)
    samples = flat.astype(np.float32) / np.float32(PCM16_MAX)
    return AudioSignal(samples=samples, sample_rate=sample_rate, channels=channels)
