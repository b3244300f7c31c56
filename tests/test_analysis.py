import numpy as np
import pytest

from wavscan.analysis import analyze_audio, build_report
from wavscan.decoder import AudioSignal, decode_wav
from wavscan.errors import WindowOutOfRangeError
from wavscan.metadata import InstrumentInfo


def test_sine_scenario(sine_wav):
    signal = decode_wav(sine_wav)

    analysis = analyze_audio(signal.samples, signal.sample_rate)

    assert analysis.max_amplitude == pytest.approx(0.5, abs=0.01)
    assert analysis.mean == pytest.approx(0.0, abs=0.01)
    assert analysis.std_dev == pytest.approx(0.5 / np.sqrt(2), abs=0.01)
    assert analysis.spectrum.shape == (512,)
    assert int(np.argmax(analysis.spectrum)) == round(440 * 1024 / 44100)


def test_silence_scenario(silent_wav):
    signal = decode_wav(silent_wav)

    analysis = analyze_audio(signal.samples, signal.sample_rate)

    assert analysis.max_amplitude == 0.0
    assert analysis.mean == 0.0
    assert analysis.std_dev == 0.0
    assert np.all(analysis.spectrum == -10.0)


def test_window_starts_at_one_second():
    sr = 2000
    samples = np.zeros(sr + 1024, dtype=np.float32)
    samples[sr:] = np.sin(2 * np.pi * 16 * np.arange(1024) / 1024)

    analysis = analyze_audio(samples, sr)

    assert int(np.argmax(analysis.spectrum)) == 16


def test_window_and_offset_are_configurable():
    sr = 1000
    samples = np.zeros(3 * sr, dtype=np.float32)
    samples[2 * sr : 2 * sr + 64] = np.sin(2 * np.pi * 4 * np.arange(64) / 64)

    analysis = analyze_audio(samples, sr, window_size=64, offset_seconds=2)

    assert analysis.spectrum.shape == (32,)
    assert int(np.argmax(analysis.spectrum)) == 4


def test_exact_length_is_accepted():
    analysis = analyze_audio(np.zeros(1000 + 1024, dtype=np.float32), 1000)

    assert analysis.spectrum.shape == (512,)


def test_short_signal_raises():
    with pytest.raises(WindowOutOfRangeError):
        analyze_audio(np.zeros(1000 + 1023, dtype=np.float32), 1000)


def test_empty_signal_raises_instead_of_indexing():
    with pytest.raises(WindowOutOfRangeError):
        analyze_audio(np.array([], dtype=np.float32), 16000)


def test_build_report_keeps_spectrum_and_metadata():
    samples = np.zeros(3000, dtype=np.float32)
    signal = AudioSignal(samples=samples, sample_rate=1000)
    analysis = analyze_audio(samples, 1000)

    report = build_report("bass_001", InstrumentInfo("bass", "acoustic"), signal, analysis)

    assert report.file_stem == "bass_001"
    assert report.instrument_family == "bass"
    assert report.source == "acoustic"
    assert report.sample_rate == 1000
    assert report.duration == pytest.approx(3.0)
    assert report.spectrum is analysis.spectrum
    assert len(report.to_dict()["spectrum"]) == 512
