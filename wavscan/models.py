"""Pydantic response models for the HTTP surface."""

from typing import List, Optional

from pydantic import BaseModel


class AnalysisResponse(BaseModel):
    file_stem: Optional[str] = None
    instrument_family: Optional[str] = None
    source: Optional[str] = None
    sample_rate: int
    duration: float
    max_amplitude: float
    mean: float
    std_dev: float
    spectrum: List[float]


class ScanResponse(BaseModel):
    dataset: str
    count: int
    reports: List[AnalysisResponse]
