from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Literal

IssueType = Literal[
    "sentence_length",
    "paragraph_length",
    "passive_voice",
    "complex_word",
    "jargon",
]


@dataclass(frozen=True, slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(frozen=True, slots=True)
class TextStatistics:
    """Structural counts and averages for a piece of text."""

    word_count: int
    sentence_count: int
    paragraph_count: int
    character_count: int
    syllable_count: int
    average_word_length: float
    average_sentence_length: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ReadabilityScore:
    """Readability formula results; every grade-level field is clamped at zero."""

    flesch_reading_ease: float
    flesch_kincaid_grade: float
    smog_index: float
    coleman_liau_index: float
    automated_readability_index: float
    average_grade_level: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ReadabilityIssue:
    """A flagged prose problem with a suggested fix."""

    type: IssueType
    description: str
    suggestion: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ReadabilityReport:
    """Combined statistics, scores and issues for one text."""

    statistics: TextStatistics
    scores: ReadabilityScore
    issues: tuple[ReadabilityIssue, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "statistics": self.statistics.to_dict(),
            "scores": self.scores.to_dict(),
            "issues": [issue.to_dict() for issue in self.issues],
        }
