from __future__ import annotations

import re
from typing import List

WHITESPACE_RE = re.compile(r"\s+")
SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")


def split_words(text: str) -> List[str]:
    """Split text on whitespace runs, keeping attached punctuation."""
    return [word for word in WHITESPACE_RE.split(text.strip()) if word]


def split_sentences(text: str) -> List[str]:
    """Split text on runs of terminal punctuation, dropping blank fragments."""
    return [s for s in SENTENCE_SPLIT_RE.split(text.strip()) if s.strip()]


def split_paragraphs(text: str) -> List[str]:
    """Split text on blank lines, dropping blank fragments."""
    return [p for p in PARAGRAPH_SPLIT_RE.split(text.strip()) if p.strip()]


def count_visible_characters(text: str) -> int:
    """Return the length of text with all whitespace removed."""
    return len(WHITESPACE_RE.sub("", text))
