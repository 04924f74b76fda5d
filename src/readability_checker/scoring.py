from __future__ import annotations

import math
from statistics import mean

from .models import ReadabilityScore, TextStatistics

# Flesch Reading Ease bands, highest first.
READING_EASE_BANDS = [
    (90.0, "Very Easy - 5th Grade"),
    (80.0, "Easy - 6th Grade"),
    (70.0, "Fairly Easy - 7th Grade"),
    (60.0, "Standard - 8th & 9th Grade"),
    (50.0, "Fairly Difficult - 10th to 12th Grade"),
    (30.0, "Difficult - College Level"),
]
HARDEST_READING_EASE = "Very Difficult - College Graduate"

# Upper grade bound (inclusive) for each band, lowest first.
GRADE_BANDS = [
    (8.0, "easy"),
    (12.0, "standard"),
    (16.0, "difficult"),
]
HARDEST_GRADE_BAND = "very difficult"


def score_readability(stats: TextStatistics) -> ReadabilityScore:
    """
    Apply the five readability formulas to precomputed text statistics.

    Statistics with no words are rejected: every formula divides by the word
    count and the published coefficients are kept exact rather than padded.
    """
    if stats.word_count < 1:
        raise ValueError(
            "score_readability requires statistics with at least one word."
        )

    words = stats.word_count
    sentences = stats.sentence_count
    syllables = stats.syllable_count
    characters = stats.character_count

    words_per_sentence = words / sentences
    syllables_per_word = syllables / words
    characters_per_word = characters / words

    reading_ease = 206.835 - 1.015 * words_per_sentence - 84.6 * syllables_per_word
    flesch_kincaid = 0.39 * words_per_sentence + 11.8 * syllables_per_word - 15.59
    smog = 1.043 * math.sqrt(syllables * (30 / sentences)) + 3.1291
    coleman_liau = 5.89 * characters_per_word - 0.3 * (sentences / words) - 15.8
    ari = 4.71 * characters_per_word + 0.5 * words_per_sentence - 21.43

    grades = [max(0.0, value) for value in (flesch_kincaid, smog, coleman_liau, ari)]

    return ReadabilityScore(
        flesch_reading_ease=min(100.0, max(0.0, reading_ease)),
        flesch_kincaid_grade=grades[0],
        smog_index=grades[1],
        coleman_liau_index=grades[2],
        automated_readability_index=grades[3],
        average_grade_level=float(mean(grades)),
    )


def describe_reading_ease(score: float) -> str:
    """Return the audience label for a Flesch Reading Ease score."""
    for floor, label in READING_EASE_BANDS:
        if score >= floor:
            return label
    return HARDEST_READING_EASE


def grade_band(grade: float) -> str:
    """Bucket a grade-level score into a coarse difficulty band."""
    for ceiling, label in GRADE_BANDS:
        if grade <= ceiling:
            return label
    return HARDEST_GRADE_BAND
