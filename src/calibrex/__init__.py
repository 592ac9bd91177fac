"""calibrex – calibration value extraction from free text."""

from ._version import __version__

__all__ = [
    "__version__",
    "cli",
    "config",
    "extraction",
    "service",
    "utils",
]
