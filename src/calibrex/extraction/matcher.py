"""Confirm that a digit word is spelled out at a given position of a line."""
from __future__ import annotations

from enum import Enum

__all__ = ["ScanDirection", "confirm_word"]


class ScanDirection(Enum):
    """Direction in which a line is walked."""

    FORWARD = 1
    BACKWARD = -1


def confirm_word(word: str, line: str, position: int, direction: ScanDirection) -> bool:
    """Check whether ``word`` is found in ``line`` anchored at ``position``.

    Walking forward the word must start at ``position``; walking backward its
    letters are compared in reverse order, so the word must end at
    ``position``. Words running past either end of the line never match.
    """

    length = len(word)
    if direction is ScanDirection.FORWARD:
        if position < 0 or position + length > len(line):
            return False
        return all(line[position + offset] == word[offset] for offset in range(length))

    if position >= len(line) or position - length + 1 < 0:
        return False
    return all(line[position - offset] == word[length - 1 - offset] for offset in range(length))
