"""Console formatting for analysis reports.

The spectrum is deliberately left out of the text block; it stays available
on :class:`~wavscan.analysis.AnalysisReport` for callers that need it.
"""
from __future__ import annotations

from typing import Iterable, TextIO

from .analysis import AnalysisReport


def format_report(report: AnalysisReport) -> str:
    lines = [
        f"File: {report.file_stem}",
        f"Instrument Family: {report.instrument_family}",
        f"Source: {report.source}",
        f"Sample Rate: {report.sample_rate} Hz",
        f"Duration: {report.duration:.2f} seconds",
        f"Max Amplitude: {report.max_amplitude:.3f}",
        f"Mean: {report.mean:.3f}",
        f"Standard Deviation: {report.std_dev:.3f}",
    ]
    return "\n".join(lines)


def print_reports(reports: Iterable[AnalysisReport], stream: TextIO) -> int:
    """Write each report preceded by a blank line; return how many were written."""

    count = 0
    for report in reports:
        stream.write("\n" + format_report(report) + "\n")
        count += 1
    return count
