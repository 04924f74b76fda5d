from __future__ import annotations

from .models import TextStatistics
from .syllables import count_syllables
from .tokenization import (
    count_visible_characters,
    split_paragraphs,
    split_sentences,
    split_words,
)


def analyze_text_statistics(text: str) -> TextStatistics:
    """Compute word, sentence, paragraph, character and syllable statistics."""
    words = split_words(text)
    word_count = len(words)
    # Sentence and paragraph counts are floored at one so later ratios stay defined.
    sentence_count = max(1, len(split_sentences(text)))
    paragraph_count = max(1, len(split_paragraphs(text)))
    character_count = count_visible_characters(text)
    syllable_count = count_syllables(words)

    return TextStatistics(
        word_count=word_count,
        sentence_count=sentence_count,
        paragraph_count=paragraph_count,
        character_count=character_count,
        syllable_count=syllable_count,
        average_word_length=character_count / max(1, word_count),
        average_sentence_length=word_count / max(1, sentence_count),
    )
