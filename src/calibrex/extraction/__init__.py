"""Digit scanning primitives and calibration aggregation.

The building blocks are layered bottom-up: :mod:`.words` holds the digit word
table with its letter indexes, :mod:`.matcher` confirms a word at a position,
:mod:`.scanner` walks a line in either direction and :mod:`.calibration`
turns lines into calibration values.
"""

from .calibration import (
    ON_ERROR_POLICIES,
    CalibrationReport,
    LineCalibration,
    SkippedLine,
    calibrate_lines,
    calibration_value,
    sum_calibration_values,
)
from .matcher import ScanDirection, confirm_word
from .scanner import NoDigitFound, ScanMode, first_digit, last_digit, scan_digit
from .words import NUMBER_WORDS, WORDS_BY_FIRST_LETTER, WORDS_BY_LAST_LETTER, NumberWord, candidates_for

__all__ = [
    "ON_ERROR_POLICIES",
    "CalibrationReport",
    "LineCalibration",
    "NUMBER_WORDS",
    "NoDigitFound",
    "NumberWord",
    "ScanDirection",
    "ScanMode",
    "SkippedLine",
    "WORDS_BY_FIRST_LETTER",
    "WORDS_BY_LAST_LETTER",
    "calibrate_lines",
    "calibration_value",
    "candidates_for",
    "confirm_word",
    "first_digit",
    "last_digit",
    "scan_digit",
    "sum_calibration_values",
]
