from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List

from .config import IssueThresholds
from .models import IssueType, ReadabilityIssue, TextStatistics

# Word patterns use ASCII word characters so accented words never count as long
# or passive constructions. The gap between be-verb and participle is any
# Unicode whitespace, including non-breaking spaces.
PASSIVE_VOICE_RE = re.compile(
    r"(?a:\b(?:am|is|are|was|were|be|being|been))"
    r"\s+"
    r"(?a:(?:\w+ed|built|done|grown|known|worn)\b)",
    re.IGNORECASE,
)
COMPLEX_WORD_RE = re.compile(r"\b\w{13,}\b", re.ASCII)
JARGON_RE = re.compile(
    r"\b(paradigm|leverage|synergy|optimize|utilize|implementation"
    r"|functionality|interface)\b",
    re.IGNORECASE | re.ASCII,
)

IssuePredicate = Callable[[str, TextStatistics, IssueThresholds], bool]


@dataclass(frozen=True, slots=True)
class IssueRule:
    """A single readability heuristic and the message it emits when it fires."""

    issue_type: IssueType
    description: str
    suggestion: str
    predicate: IssuePredicate

    def to_issue(self) -> ReadabilityIssue:
        return ReadabilityIssue(
            type=self.issue_type,
            description=self.description,
            suggestion=self.suggestion,
        )


def count_matches(pattern: re.Pattern[str], text: str) -> int:
    """Count non-overlapping matches of pattern in text."""
    return sum(1 for _ in pattern.finditer(text))


def _long_sentences(text: str, stats: TextStatistics, limits: IssueThresholds) -> bool:
    return stats.average_sentence_length > limits.max_average_sentence_length


def _long_paragraphs(text: str, stats: TextStatistics, limits: IssueThresholds) -> bool:
    return stats.word_count / stats.paragraph_count > limits.max_words_per_paragraph


def _passive_voice(text: str, stats: TextStatistics, limits: IssueThresholds) -> bool:
    return count_matches(PASSIVE_VOICE_RE, text) > limits.max_passive_voice_matches


def _complex_words(text: str, stats: TextStatistics, limits: IssueThresholds) -> bool:
    return count_matches(COMPLEX_WORD_RE, text) > limits.max_complex_words


def _jargon(text: str, stats: TextStatistics, limits: IssueThresholds) -> bool:
    return count_matches(JARGON_RE, text) > limits.max_jargon_matches


# Evaluation order is presentation order.
RULES: tuple[IssueRule, ...] = (
    IssueRule(
        issue_type="sentence_length",
        description="Your sentences are too long on average.",
        suggestion="Try to keep sentences under 20 words for better readability.",
        predicate=_long_sentences,
    ),
    IssueRule(
        issue_type="paragraph_length",
        description="Your paragraphs contain too many words on average.",
        suggestion="Break up long paragraphs into smaller chunks of 3-5 sentences.",
        predicate=_long_paragraphs,
    ),
    IssueRule(
        issue_type="passive_voice",
        description="Your text contains multiple instances of passive voice.",
        suggestion="Use active voice for clearer, more engaging writing.",
        predicate=_passive_voice,
    ),
    IssueRule(
        issue_type="complex_word",
        description="Your text contains several long, complex words.",
        suggestion="Use simpler alternatives for complex words where possible.",
        predicate=_complex_words,
    ),
    IssueRule(
        issue_type="jargon",
        description="Your text contains technical jargon or business buzzwords.",
        suggestion=(
            "Replace jargon with plain language that your audience will understand."
        ),
        predicate=_jargon,
    ),
)


def detect_issues(
    text: str,
    stats: TextStatistics,
    thresholds: IssueThresholds | None = None,
) -> List[ReadabilityIssue]:
    """Run every rule against the text and return the issues that fired, in order."""
    limits = thresholds or IssueThresholds()
    return [rule.to_issue() for rule in RULES if rule.predicate(text, stats, limits)]
