"""Locate the first and last digit of a line, literal or spelled out."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from .matcher import ScanDirection, confirm_word
from .words import candidates_for

__all__ = ["NoDigitFound", "ScanMode", "first_digit", "last_digit", "scan_digit"]


class ScanMode(str, Enum):
    """Which tokens count as digits while scanning."""

    WORDS = "words"
    DIGITS = "digits"


class NoDigitFound(ValueError):
    """Raised when a line holds neither a literal digit nor a digit word."""

    def __init__(self, line: str, direction: ScanDirection):
        self.line = line
        self.direction = direction
        super().__init__(f"No digit found in line {line!r} (scanning {direction.name.lower()})")


def _literal_digit(char: str) -> Optional[int]:
    # ASCII only: str.isdigit() would also accept superscripts and other scripts
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    return None


def _spelled_digit(line: str, position: int, direction: ScanDirection) -> Optional[int]:
    for candidate in candidates_for(line[position], direction):
        if confirm_word(candidate.word, line, position, direction):
            return candidate.value
    return None


def scan_digit(
    line: str,
    direction: ScanDirection,
    *,
    mode: ScanMode = ScanMode.WORDS,
) -> int:
    """Return the value of the first digit met while walking ``line``.

    The walk advances one character at a time and never skips over a matched
    word, so words sharing letters (``"oneight"``) are each visible from their
    own end of the line. Literal digits are checked before words at every
    position.
    """

    mode = ScanMode(mode)
    if direction is ScanDirection.FORWARD:
        positions = range(len(line))
    else:
        positions = range(len(line) - 1, -1, -1)

    for position in positions:
        value = _literal_digit(line[position])
        if value is not None:
            return value
        if mode is ScanMode.WORDS:
            value = _spelled_digit(line, position, direction)
            if value is not None:
                return value

    raise NoDigitFound(line, direction)


def first_digit(line: str, *, mode: ScanMode = ScanMode.WORDS) -> int:
    """Leftmost digit of ``line``."""

    return scan_digit(line, ScanDirection.FORWARD, mode=mode)


def last_digit(line: str, *, mode: ScanMode = ScanMode.WORDS) -> int:
    """Rightmost digit of ``line``."""

    return scan_digit(line, ScanDirection.BACKWARD, mode=mode)
