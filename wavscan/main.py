import logging
from pathlib import Path
from typing import Any, Dict

from fastapi import FastAPI, File, HTTPException, Query, UploadFile

from wavscan.analysis import analyze_audio
from wavscan.config import MAX_REPORTS, ScanConfig
from wavscan.decoder import decode_wav
from wavscan.errors import DecodeError, MetadataLoadError, WindowOutOfRangeError
from wavscan.models import AnalysisResponse, ScanResponse
from wavscan.scan import scan_dataset

logger = logging.getLogger("wavscan.api")

app = FastAPI(title="wavscan")


def _error_detail(error: str, exc: Exception) -> Dict[str, Any]:
    return {"error": error, "message": str(exc)}


@app.get("/health")
async def health():
    """Static liveness payload; does not touch the dataset."""
    return {"status": "ok"}


@app.post("/analyze", response_model=AnalysisResponse)
def analyze(file: UploadFile = File(...)):
    """Analyse one uploaded WAV and return its statistics and spectrum."""

    try:
        signal = decode_wav(file.file)
        config = ScanConfig.from_env()
        analysis = analyze_audio(
            signal.samples,
            signal.sample_rate,
            window_size=config.window_size,
            offset_seconds=config.offset_seconds,
        )
    except DecodeError as exc:
        logger.info("[API] Rejected upload %s: %s", file.filename, exc)
        raise HTTPException(status_code=400, detail=_error_detail("DECODE_FAILED", exc)) from exc
    except WindowOutOfRangeError as exc:
        logger.info("[API] Rejected upload %s: %s", file.filename, exc)
        raise HTTPException(status_code=422, detail=_error_detail("SIGNAL_TOO_SHORT", exc)) from exc
    finally:
        file.file.close()

    return AnalysisResponse(
        file_stem=Path(file.filename).stem if file.filename else None,
        sample_rate=signal.sample_rate,
        duration=signal.duration,
        max_amplitude=analysis.max_amplitude,
        mean=analysis.mean,
        std_dev=analysis.std_dev,
        spectrum=analysis.spectrum.tolist(),
    )


@app.get("/scan", response_model=ScanResponse)
def scan(limit: int = Query(default=MAX_REPORTS, ge=1)):
    """Scan the configured dataset and return up to ``limit`` reports."""

    config = ScanConfig.from_env().with_overrides(max_reports=limit)
    try:
        reports = list(scan_dataset(config))
    except MetadataLoadError as exc:
        logger.exception("[API] Metadata load failed for %s", config.dataset_path)
        raise HTTPException(status_code=500, detail=_error_detail("METADATA_LOAD_FAILED", exc)) from exc

    return ScanResponse(
        dataset=str(config.dataset_path),
        count=len(reports),
        reports=[AnalysisResponse(**r.to_dict()) for r in reports],
    )
