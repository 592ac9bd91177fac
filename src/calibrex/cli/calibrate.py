"""CLI entrypoints computing calibration values."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from tqdm import tqdm

from ..config import CalibrexSettings, get_settings
from ..extraction import ON_ERROR_POLICIES, NoDigitFound, ScanMode, calibrate_lines, first_digit, last_digit
from ..utils.io_utils import read_lines
from ..utils.logging import configure_json_logger, flush_handlers, generate_trace_id, log_event

__all__ = ["calibrate_command", "scan_command"]


def _load_settings(config_file: Optional[Path] = None) -> CalibrexSettings:
    try:
        return get_settings(config_file=config_file)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _resolve_on_error(value: Optional[str], default: str) -> str:
    policy = (value or default).lower()
    if policy not in ON_ERROR_POLICIES:
        raise typer.BadParameter(
            f"'{value}' is not one of {', '.join(ON_ERROR_POLICIES)}", param_hint="--on-error"
        )
    return policy


def calibrate_command(
    input_path: Path = typer.Option(
        ..., "--input", exists=True, dir_okay=False, readable=True, help="Text file with one entry per line"
    ),
    mode: Optional[ScanMode] = typer.Option(
        None, "--mode", case_sensitive=False, help="Digits recognized: 'words' (default) or 'digits' only"
    ),
    on_error: Optional[str] = typer.Option(
        None, "--on-error", help="What to do with a line without digits: 'raise' (default) or 'skip'"
    ),
    details: bool = typer.Option(False, "--details", help="Include the per-line values in the output"),
    progress: bool = typer.Option(False, "--progress/--no-progress", help="Show a progress bar on stderr"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", dir_okay=False, help="Optional JSONL log path"),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config-file",
        exists=True,
        dir_okay=False,
        readable=True,
        help="TOML/YAML configuration used instead of the environment",
    ),
) -> None:
    """Sum the calibration values of every line in INPUT."""

    settings = _load_settings(config_file)
    scan_mode = mode or settings.mode
    policy = _resolve_on_error(on_error, settings.on_error)

    logger = configure_json_logger(log_file or settings.log_file)
    trace_id = generate_trace_id()
    log_event(
        logger,
        "calibrate.start",
        trace_id=trace_id,
        input=str(input_path),
        mode=scan_mode.value,
        on_error=policy,
    )

    lines = read_lines(input_path, encoding=settings.encoding)
    try:
        report = calibrate_lines(
            tqdm(lines, desc="Calibrating", unit="line", disable=not progress),
            mode=scan_mode,
            on_error=policy,
        )
    except NoDigitFound as exc:
        typer.echo(f"Error: {exc}", err=True)
        log_event(logger, "calibrate.failed", trace_id=trace_id, level=logging.ERROR, error=str(exc))
        flush_handlers(logger)
        raise typer.Exit(code=1) from exc

    for skipped in report.skipped:
        log_event(
            logger,
            "calibrate.line_skipped",
            trace_id=trace_id,
            level=logging.WARNING,
            line_number=skipped.line_number,
            error=skipped.error,
        )

    typer.echo(json.dumps(report.to_dict(details=details), indent=2, ensure_ascii=False))
    log_event(
        logger,
        "calibrate.completed",
        trace_id=trace_id,
        total=report.total,
        lines=len(report.calibrations),
        skipped=len(report.skipped),
    )
    flush_handlers(logger)


def scan_command(
    text: str = typer.Argument(..., help="Single line of text to scan"),
    mode: Optional[ScanMode] = typer.Option(None, "--mode", case_sensitive=False, help="'words' or 'digits'"),
) -> None:
    """Show the first and last digit found in TEXT."""

    scan_mode = mode or _load_settings().mode
    try:
        first = first_digit(text, mode=scan_mode)
        second = last_digit(text, mode=scan_mode)
    except NoDigitFound as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    payload = {"line": text, "first": first, "second": second, "value": first * 10 + second}
    typer.echo(json.dumps(payload, ensure_ascii=False))
