"""Command line interface for calibrex."""

from .main import app, run

__all__ = ["app", "run"]
