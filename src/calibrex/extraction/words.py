"""Spelled-out digit words and the letter indexes used to dispatch them."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from .matcher import ScanDirection

__all__ = [
    "NumberWord",
    "NUMBER_WORDS",
    "WORDS_BY_FIRST_LETTER",
    "WORDS_BY_LAST_LETTER",
    "candidates_for",
]


@dataclass(frozen=True)
class NumberWord:
    """English spelling of a single digit."""

    word: str
    value: int


NUMBER_WORDS: Tuple[NumberWord, ...] = tuple(
    NumberWord(word=word, value=value)
    for value, word in enumerate(
        ("zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
    )
)


def _index_by(position: int) -> Mapping[str, Tuple[NumberWord, ...]]:
    buckets: Dict[str, List[NumberWord]] = {}
    # NUMBER_WORDS is ordered by value, so every bucket stays ascending
    for entry in NUMBER_WORDS:
        buckets.setdefault(entry.word[position], []).append(entry)
    return MappingProxyType({letter: tuple(words) for letter, words in buckets.items()})


WORDS_BY_FIRST_LETTER = _index_by(0)
WORDS_BY_LAST_LETTER = _index_by(-1)


def candidates_for(char: str, direction: ScanDirection) -> Tuple[NumberWord, ...]:
    """Return the words that may start (forward) or end (backward) with ``char``."""

    index = WORDS_BY_FIRST_LETTER if direction is ScanDirection.FORWARD else WORDS_BY_LAST_LETTER
    return index.get(char, ())
