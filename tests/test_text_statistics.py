import pytest

from readability_checker.text_statistics import analyze_text_statistics


def test_run_fast_statistics():
    """Two-word sentence produces the expected counts and averages."""
    stats = analyze_text_statistics("Run fast.")

    assert stats.word_count == 2
    assert stats.sentence_count == 1
    assert stats.paragraph_count == 1
    assert stats.character_count == 8
    assert stats.syllable_count == 2
    assert stats.average_word_length == 4
    assert stats.average_sentence_length == 2


def test_empty_text_floors_counts():
    """Empty input never raises and keeps sentence/paragraph counts at one."""
    stats = analyze_text_statistics("")

    assert stats.word_count == 0
    assert stats.sentence_count == 1
    assert stats.paragraph_count == 1
    assert stats.character_count == 0
    assert stats.syllable_count == 0
    assert stats.average_word_length == 0
    assert stats.average_sentence_length == 0


def test_single_word_without_punctuation():
    """A bare word still counts as one sentence."""
    stats = analyze_text_statistics("Hello")

    assert stats.sentence_count == 1
    assert stats.syllable_count >= 1


@pytest.mark.parametrize("text", ["   \n\n  ", "...!?", "\n", "a\n \nb"])
def test_counts_never_drop_below_one(text: str):
    """Sentence and paragraph counts are floored at one."""
    stats = analyze_text_statistics(text)
    assert stats.sentence_count >= 1
    assert stats.paragraph_count >= 1


def test_sentences_and_paragraphs_are_counted():
    """Mixed punctuation and blank lines are counted separately."""
    text = "First one. Second one!\n\nThird one?  Fourth...\n   \nFifth"
    stats = analyze_text_statistics(text)

    assert stats.sentence_count == 5
    assert stats.paragraph_count == 3
    assert stats.word_count == 8
    assert stats.average_sentence_length == pytest.approx(8 / 5)
