from __future__ import annotations

import logging
from typing import Dict, Iterable

from .config import ReadabilityConfig
from .issues import detect_issues
from .models import Document, ReadabilityReport
from .scoring import score_readability
from .text_statistics import analyze_text_statistics

LOGGER = logging.getLogger(__name__)


class EmptyTextError(ValueError):
    """Raised when text is too short to be analyzed."""


def validate_text(text: str, min_characters: int = 1) -> None:
    """Reject blank text or text shorter than min_characters once stripped."""
    stripped = text.strip()
    if not stripped:
        raise EmptyTextError("Please enter some text to analyze.")
    if len(stripped) < min_characters:
        raise EmptyTextError(
            f"Please enter at least {min_characters} characters to analyze."
        )


def analyze_readability(
    text: str, config: ReadabilityConfig | None = None
) -> ReadabilityReport:
    """Compute statistics, readability scores and issues for a single text."""
    cfg = config or ReadabilityConfig()
    stats = analyze_text_statistics(text)
    if stats.word_count == 0:
        raise EmptyTextError("Please enter some text to analyze.")
    scores = score_readability(stats)
    issues = detect_issues(text, stats, cfg.thresholds)
    return ReadabilityReport(statistics=stats, scores=scores, issues=tuple(issues))


def analyze_corpus(
    documents: Iterable[Document], config: ReadabilityConfig | None = None
) -> Dict[str, ReadabilityReport]:
    """Analyze every document, skipping those too short to score."""
    cfg = config or ReadabilityConfig()
    results: Dict[str, ReadabilityReport] = {}
    for document in documents:
        try:
            validate_text(document.text, cfg.min_characters)
            report = analyze_readability(document.text, cfg)
        except EmptyTextError as exc:
            LOGGER.warning("Skipping %s: %s", document.doc_id, exc)
            continue
        LOGGER.debug(
            "Analyzed %s: words=%d grade=%.1f issues=%d",
            document.doc_id,
            report.statistics.word_count,
            report.scores.average_grade_level,
            len(report.issues),
        )
        results[document.doc_id] = report
    return results
