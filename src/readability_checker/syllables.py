from __future__ import annotations

import re
from typing import Iterable

VOWEL_GROUP_RE = re.compile(r"[aeiouy]+")


def estimate_syllables(word: str) -> int:
    """
    Approximate the syllable count of a single word by counting vowel groups.

    A trailing silent ``e`` is discounted for words longer than three characters
    and every word counts as at least one syllable. Numerals, acronyms and
    non-English words are not handled specially.
    """
    lowered = word.lower()
    count = len(VOWEL_GROUP_RE.findall(lowered)) or 1
    if len(lowered) > 3 and lowered.endswith("e"):
        count -= 1
    return max(1, count)


def count_syllables(words: Iterable[str]) -> int:
    """Sum the estimated syllables over an iterable of words."""
    return sum(estimate_syllables(word) for word in words)
