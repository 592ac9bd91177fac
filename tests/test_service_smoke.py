import pytest
from fastapi import HTTPException


def test_import_app():
    from calibrex.service.app import app
    assert app is not None


def test_health():
    from calibrex.service.app import health

    payload = health()
    assert payload["status"] == "ok"
    assert payload["settings"]["mode"] == "words"


def test_calibrate_endpoint():
    from calibrex.service.app import CalibrateIn, calibrate

    response = calibrate(CalibrateIn(lines=["two1nine", "eightwothree", "abcone2threexyz"]))
    assert response.total == 125
    assert response.lines == 3
    assert [row.value for row in response.details] == [29, 83, 13]
    assert response.skipped == []


def test_calibrate_endpoint_skip_policy():
    from calibrex.service.app import CalibrateIn, calibrate

    response = calibrate(CalibrateIn(lines=["two1nine", "xyz"], mode="digits", on_error="skip"))
    assert response.total == 11
    assert response.skipped[0].line_number == 2


def test_calibrate_endpoint_rejects_bad_line():
    from calibrex.service.app import CalibrateIn, calibrate

    with pytest.raises(HTTPException) as excinfo:
        calibrate(CalibrateIn(lines=["xyz"]))
    assert excinfo.value.status_code == 422
