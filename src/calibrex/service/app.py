from __future__ import annotations

from typing import List, Literal, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from .._version import __version__
from ..config import get_settings
from ..extraction import NoDigitFound, ScanMode, calibrate_lines

app = FastAPI(title="calibrex API", version=__version__)


class CalibrateIn(BaseModel):
    lines: List[str] = Field(..., description="Lines already split by the caller")
    mode: Optional[ScanMode] = None
    on_error: Optional[Literal["raise", "skip"]] = None


class LineOut(BaseModel):
    line_number: int
    first: int
    second: int
    value: int


class SkippedOut(BaseModel):
    line_number: int
    line: str
    error: str


class CalibrateOut(BaseModel):
    mode: ScanMode
    total: int
    lines: int
    skipped: List[SkippedOut]
    details: List[LineOut]


@app.get("/health")
def health():
    return {
        "status": "ok",
        "version": __version__,
        "settings": get_settings().as_dict(),
    }


@app.post("/calibrate", response_model=CalibrateOut)
def calibrate(payload: CalibrateIn):
    settings = get_settings()
    try:
        report = calibrate_lines(
            payload.lines,
            mode=payload.mode or settings.mode,
            on_error=payload.on_error or settings.on_error,
        )
    except NoDigitFound as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return CalibrateOut(**report.to_dict(details=True))
