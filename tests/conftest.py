import json

import numpy as np
import pytest
import soundfile as sf


def write_pcm16(path, data, sr):
    """Write int16 samples (1-D mono or [frames, channels]) as a PCM_16 WAV."""
    sf.write(str(path), np.asarray(data, dtype=np.int16), sr, subtype="PCM_16", format="WAV")
    return path


def sine_pcm16(freq=440.0, sr=44100, duration=3.0, amplitude=0.5):
    t = np.arange(int(sr * duration)) / sr
    return np.round(amplitude * 32767 * np.sin(2 * np.pi * freq * t)).astype(np.int16)


@pytest.fixture
def sine_wav(tmp_path):
    """3 s, 44.1 kHz, 440 Hz sine at half of full scale."""
    return write_pcm16(tmp_path / "sine.wav", sine_pcm16(), 44100)


@pytest.fixture
def silent_wav(tmp_path):
    """2 s of digital silence at 16 kHz."""
    return write_pcm16(tmp_path / "silence.wav", np.zeros(32000, dtype=np.int16), 16000)


@pytest.fixture
def make_dataset(tmp_path):
    """Build a dataset root with ``examples.json`` and ``audio/``.

    ``files`` maps stem -> int16 samples; ``metadata`` maps stem -> record.
    """

    def _make(files, metadata, sr=16000):
        root = tmp_path / "dataset"
        audio = root / "audio"
        audio.mkdir(parents=True)
        for stem, data in files.items():
            write_pcm16(audio / f"{stem}.wav", data, sr)
        (root / "examples.json").write_text(json.dumps(metadata), encoding="utf-8")
        return root

    return _make
