import pytest

from calibrex.config import reset_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    for name in ("CALIBREX_CONFIG_FILE", "CALIBREX_MODE", "CALIBREX_ON_ERROR", "CALIBREX_LOG_FILE", "CALIBREX_ENCODING"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
