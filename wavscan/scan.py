"""Dataset walking and the per-file scan loop.

Every candidate produces a :class:`FileOutcome`. Per-file problems (no
metadata, undecodable container, signal too short for the analysis window)
become skipped outcomes; only the metadata load can abort a scan.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, Optional

from .analysis import AnalysisReport, FileOutcome, analyze_audio, build_report
from .config import ScanConfig
from .decoder import decode_wav
from .errors import DecodeError, WindowOutOfRangeError
from .metadata import InstrumentInfo, MetadataIndex

logger = logging.getLogger("wavscan.scan")


def iter_wav_files(audio_dir: Path) -> Iterator[Path]:
    """Yield ``*.wav`` files under ``audio_dir`` recursively, in sorted order."""

    for root, dirs, files in os.walk(audio_dir):
        dirs.sort()
        for name in sorted(files):
            path = Path(root) / name
            if path.suffix == ".wav":
                yield path


def analyze_file(path: Path, info: InstrumentInfo, config: ScanConfig) -> FileOutcome:
    try:
        signal = decode_wav(path)
        analysis = analyze_audio(
            signal.samples,
            signal.sample_rate,
            window_size=config.window_size,
            offset_seconds=config.offset_seconds,
        )
    except (DecodeError, WindowOutOfRangeError) as exc:
        logger.info("[SCAN] Skipping %s: %s", path.name, exc)
        return FileOutcome(path=path, skip_reason=str(exc))

    report = build_report(path.stem, info, signal, analysis)
    return FileOutcome(path=path, report=report)


def iter_outcomes(
    audio_dir: Path,
    index: MetadataIndex,
    config: ScanConfig,
) -> Iterator[FileOutcome]:
    """Examine candidates in walk order until ``config.max_reports`` succeed.

    Files without a metadata entry are skipped before decoding. Candidates
    after the last successful report are never touched.
    """

    if config.max_reports <= 0:
        return

    processed = 0
    for path in iter_wav_files(audio_dir):
        info = index.lookup(path.stem)
        if info is None:
            logger.info("[SCAN] Skipping %s: no metadata entry", path.name)
            yield FileOutcome(path=path, skip_reason="no metadata entry")
            continue

        outcome = analyze_file(path, info, config)
        yield outcome

        if outcome.ok:
            processed += 1
            if processed >= config.max_reports:
                logger.info("[SCAN] Reached report limit (%d)", config.max_reports)
                return


def scan_dataset(
    config: ScanConfig,
    index: Optional[MetadataIndex] = None,
) -> Iterator[AnalysisReport]:
    """Yield successful reports for the configured dataset, in walk order.

    Loads the metadata index unless one is passed in. The load happens
    eagerly, so a :class:`~wavscan.errors.MetadataLoadError` surfaces from
    this call rather than from the first iteration.
    """

    if index is None:
        index = MetadataIndex.load(config.metadata_path)

    logger.info("[SCAN] Scanning %s", config.audio_dir)
    return (
        outcome.report
        for outcome in iter_outcomes(config.audio_dir, index, config)
        if outcome.report is not None
    )
