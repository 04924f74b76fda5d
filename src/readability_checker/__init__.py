"""
readability_checker package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import ReadabilityConfig, config_from_dict, config_from_yaml, load_config
from .issues import detect_issues
from .models import ReadabilityIssue, ReadabilityReport, ReadabilityScore, TextStatistics
from .pipeline import EmptyTextError, analyze_corpus, analyze_readability
from .scoring import score_readability
from .syllables import estimate_syllables
from .text_statistics import analyze_text_statistics

__all__ = [
    "ReadabilityConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "TextStatistics",
    "ReadabilityScore",
    "ReadabilityIssue",
    "ReadabilityReport",
    "EmptyTextError",
    "analyze_text_statistics",
    "estimate_syllables",
    "score_readability",
    "detect_issues",
    "analyze_readability",
    "analyze_corpus",
]

__version__ = "0.1.0"
