"""Line input helpers used by the CLI and the service."""
from __future__ import annotations

import os
from pathlib import Path
from typing import List

__all__ = ["read_lines", "split_lines"]


def split_lines(text: str) -> List[str]:
    """Split ``text`` on line terminators, dropping blank lines."""

    return [line for line in text.splitlines() if line.strip()]


def read_lines(path: str | os.PathLike[str], encoding: str = "utf-8") -> List[str]:
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file {path} does not exist")
    return split_lines(path.read_text(encoding=encoding))
