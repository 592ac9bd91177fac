import pytest

from calibrex.extraction import (
    CalibrationReport,
    LineCalibration,
    NoDigitFound,
    ScanMode,
    calibrate_lines,
    calibration_value,
    sum_calibration_values,
)

DIGIT_SAMPLE = ["1abc2", "pqr3stu8vwx", "a1b2c3d4e5f", "treb7uchet"]
WORD_SAMPLE = [
    "two1nine",
    "eightwothree",
    "abcone2threexyz",
    "xtwone3four",
    "4nineeightseven2",
    "zoneight234",
    "7pqrstsixteen",
]


@pytest.mark.parametrize(
    "line, expected",
    [
        ("1abc2", 12),
        ("two1nine", 29),
        ("eightwothree", 83),
        ("abcone2threexyz", 13),
        ("oneight", 18),
        ("7", 77),
    ],
)
def test_calibration_value(line: str, expected: int) -> None:
    assert calibration_value(line) == expected


def test_sum_calibration_values() -> None:
    assert sum_calibration_values(["two1nine", "eightwothree", "abcone2threexyz"]) == 125
    assert sum_calibration_values(WORD_SAMPLE) == 281
    assert sum_calibration_values(DIGIT_SAMPLE, mode=ScanMode.DIGITS) == 142
    assert sum_calibration_values([]) == 0


def test_sum_is_repeatable() -> None:
    first = sum_calibration_values(WORD_SAMPLE)
    second = sum_calibration_values(iter(WORD_SAMPLE))
    assert first == second == 281


def test_sum_fails_on_line_without_digits() -> None:
    with pytest.raises(NoDigitFound):
        sum_calibration_values(["12", "no digits here", "34"])


def test_calibrate_lines_keeps_input_order() -> None:
    report = calibrate_lines(["two1nine", "eightwothree", "abcone2threexyz"])
    assert isinstance(report, CalibrationReport)
    assert report.total == 125
    assert [item.value for item in report.calibrations] == [29, 83, 13]
    assert [item.line_number for item in report.calibrations] == [1, 2, 3]
    assert report.skipped == []


def test_calibrate_lines_skip_policy() -> None:
    report = calibrate_lines(["12", "abc", "x3"], on_error="skip")
    assert report.total == 45
    assert [item.line_number for item in report.calibrations] == [1, 3]
    assert len(report.skipped) == 1
    skipped = report.skipped[0]
    assert skipped.line_number == 2
    assert skipped.line == "abc"
    assert "No digit found" in skipped.error


def test_calibrate_lines_raise_policy() -> None:
    with pytest.raises(NoDigitFound):
        calibrate_lines(["12", "abc"], on_error="raise")


def test_calibrate_lines_rejects_unknown_policy() -> None:
    with pytest.raises(ValueError, match="error policy"):
        calibrate_lines(["12"], on_error="ignore")  # type: ignore[arg-type]


def test_calibrate_lines_digits_mode() -> None:
    report = calibrate_lines(["two1nine", "onetwo"], mode="digits", on_error="skip")
    assert report.mode is ScanMode.DIGITS
    assert report.total == 11
    assert [item.line_number for item in report.skipped] == [2]


def test_report_to_dict() -> None:
    report = calibrate_lines(["two1nine", "zzz"], on_error="skip")
    payload = report.to_dict(details=True)
    assert payload["mode"] == "words"
    assert payload["total"] == 29
    assert payload["lines"] == 1
    assert payload["skipped"][0]["line_number"] == 2
    assert payload["details"] == [{"line_number": 1, "first": 2, "second": 9, "value": 29}]
    assert "details" not in report.to_dict()


def test_line_calibration_value() -> None:
    assert LineCalibration(line_number=1, first=0, second=7).value == 7
