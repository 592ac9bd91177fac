"""Combine first and last digits into calibration values and total them."""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Literal

from .scanner import NoDigitFound, ScanMode, first_digit, last_digit

__all__ = [
    "ON_ERROR_POLICIES",
    "CalibrationReport",
    "LineCalibration",
    "SkippedLine",
    "calibrate_lines",
    "calibration_value",
    "sum_calibration_values",
]

LOGGER = logging.getLogger(__name__)

OnError = Literal["raise", "skip"]
ON_ERROR_POLICIES = ("raise", "skip")


@dataclass(frozen=True)
class LineCalibration:
    """Calibration value of a single line (``line_number`` is 1-based)."""

    line_number: int
    first: int
    second: int

    @property
    def value(self) -> int:
        return self.first * 10 + self.second

    def to_dict(self) -> Dict[str, int]:
        return {**asdict(self), "value": self.value}


@dataclass(frozen=True)
class SkippedLine:
    line_number: int
    line: str
    error: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CalibrationReport:
    """Outcome of calibrating a batch of lines."""

    mode: ScanMode
    calibrations: List[LineCalibration] = field(default_factory=list)
    skipped: List[SkippedLine] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(item.value for item in self.calibrations)

    def to_dict(self, *, details: bool = False) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "mode": self.mode.value,
            "total": self.total,
            "lines": len(self.calibrations),
            "skipped": [item.to_dict() for item in self.skipped],
        }
        if details:
            payload["details"] = [item.to_dict() for item in self.calibrations]
        return payload


def calibration_value(line: str, *, mode: ScanMode = ScanMode.WORDS) -> int:
    """Return ``first * 10 + last`` for ``line``."""

    return first_digit(line, mode=mode) * 10 + last_digit(line, mode=mode)


def sum_calibration_values(lines: Iterable[str], *, mode: ScanMode = ScanMode.WORDS) -> int:
    """Sum the calibration values of ``lines``, failing on the first bad line."""

    total = 0
    for line in lines:
        total += calibration_value(line, mode=mode)
    return total


def calibrate_lines(
    lines: Iterable[str],
    *,
    mode: ScanMode = ScanMode.WORDS,
    on_error: OnError = "raise",
) -> CalibrationReport:
    """Calibrate every line and collect per-line results.

    With ``on_error="raise"`` a :class:`NoDigitFound` aborts the batch. With
    ``on_error="skip"`` the offending line is recorded in
    :attr:`CalibrationReport.skipped` and left out of the total.
    """

    if on_error not in ON_ERROR_POLICIES:
        raise ValueError(f"Unknown error policy {on_error!r}; expected one of {ON_ERROR_POLICIES}")
    mode = ScanMode(mode)

    report = CalibrationReport(mode=mode)
    for line_number, line in enumerate(lines, start=1):
        try:
            first = first_digit(line, mode=mode)
            second = last_digit(line, mode=mode)
        except NoDigitFound as exc:
            if on_error == "raise":
                raise
            LOGGER.warning("line_skipped", extra={"line_number": line_number, "error": str(exc)})
            report.skipped.append(SkippedLine(line_number=line_number, line=line, error=str(exc)))
            continue
        report.calibrations.append(LineCalibration(line_number=line_number, first=first, second=second))
    return report
