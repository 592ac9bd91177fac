"""Centralized configuration for calibrex.

This module exposes :func:`get_settings` returning the defaults applied by the
CLI and the service: scan mode, error policy, log destination and input
encoding. Values can be customized via environment variables or by pointing
``CALIBREX_CONFIG_FILE`` to a TOML/YAML document with a ``[calibration]``
section.
"""
from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .extraction.calibration import ON_ERROR_POLICIES
from .extraction.scanner import ScanMode

__all__ = ["CalibrexSettings", "get_settings", "reset_settings"]

_CONFIG_CACHE: Optional["CalibrexSettings"] = None
_CONFIG_SOURCE: Optional[Path] = None

_DEFAULT_MODE = ScanMode.WORDS
_DEFAULT_ON_ERROR = "raise"
_DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class CalibrexSettings:
    """Resolved runtime defaults."""

    mode: ScanMode
    on_error: str
    log_file: Optional[Path]
    encoding: str
    config_source: Optional[Path] = None

    def as_dict(self) -> Dict[str, Optional[str]]:
        """Expose the settings as plain strings (useful for logging)."""

        return {
            "mode": self.mode.value,
            "on_error": self.on_error,
            "log_file": str(self.log_file) if self.log_file else None,
            "encoding": self.encoding,
            "config_source": str(self.config_source) if self.config_source else "environment",
        }


def _normalize_path(value: Optional[str | Path], *, base: Optional[Path]) -> Optional[Path]:
    if value is None or value == "":
        return None
    candidate = Path(value).expanduser()
    if not candidate.is_absolute() and base is not None:
        candidate = base / candidate
    return candidate.resolve()


def _load_config_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file '{path}' does not exist")
    suffix = path.suffix.lower()
    if suffix == ".toml":
        with path.open("rb") as handle:
            return tomllib.load(handle)
    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
            return loaded or {}
    raise ValueError(f"Unsupported config file format: '{suffix}'")


def _coalesce_mapping(source: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if not isinstance(source, Mapping):
        return {}
    return source


def _parse_mode(value: Any) -> ScanMode:
    try:
        return ScanMode(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(mode.value for mode in ScanMode)
        raise ValueError(f"Invalid scan mode {value!r}; expected one of: {allowed}") from None


def _parse_on_error(value: Any) -> str:
    policy = str(value).strip().lower()
    if policy not in ON_ERROR_POLICIES:
        raise ValueError(f"Invalid error policy {value!r}; expected one of: {', '.join(ON_ERROR_POLICIES)}")
    return policy


def _build_settings(config_file: Optional[Path]) -> CalibrexSettings:
    config_data: Mapping[str, Any] = {}
    config_dir: Optional[Path] = None
    if config_file is not None:
        config_file = _normalize_path(config_file, base=Path.cwd())
        if config_file is not None:
            config_data = _load_config_file(config_file)
            config_dir = config_file.parent

    section = _coalesce_mapping(config_data.get("calibration"))
    env = os.environ

    mode = _parse_mode(env.get("CALIBREX_MODE") or section.get("mode") or _DEFAULT_MODE.value)
    on_error = _parse_on_error(env.get("CALIBREX_ON_ERROR") or section.get("on_error") or _DEFAULT_ON_ERROR)
    log_file = _normalize_path(
        env.get("CALIBREX_LOG_FILE") or section.get("log_file"),
        base=config_dir or Path.cwd(),
    )
    encoding = env.get("CALIBREX_ENCODING") or section.get("encoding") or _DEFAULT_ENCODING

    return CalibrexSettings(
        mode=mode,
        on_error=on_error,
        log_file=log_file,
        encoding=str(encoding),
        config_source=config_file,
    )


def get_settings(*, refresh: bool = False, config_file: str | Path | None = None) -> CalibrexSettings:
    """Return the cached :class:`CalibrexSettings` configuration.

    Parameters
    ----------
    refresh:
        When ``True`` the cached configuration is discarded and recomputed.
    config_file:
        Optional explicit path to the configuration document. When provided the
        returned instance is not cached globally, allowing callers (e.g. tests)
        to override settings temporarily.
    """

    global _CONFIG_CACHE, _CONFIG_SOURCE

    if config_file is not None:
        return _build_settings(Path(config_file).expanduser())

    env_path = os.getenv("CALIBREX_CONFIG_FILE")
    source_path = Path(env_path).expanduser() if env_path else None

    if refresh or _CONFIG_CACHE is None or _CONFIG_SOURCE != source_path:
        _CONFIG_CACHE = _build_settings(source_path)
        _CONFIG_SOURCE = source_path

    return _CONFIG_CACHE


def reset_settings() -> None:
    """Clear the cached configuration (mainly useful for tests)."""

    global _CONFIG_CACHE, _CONFIG_SOURCE
    _CONFIG_CACHE = None
    _CONFIG_SOURCE = None
