"""Readability metrics based on the Flesch-Kincaid grade level."""

import re

from writepy.core.types import (
    GRADE_LEVELS,
    Issue,
    IssueCategory,
    IssueSeverity,
    ReadabilityMetrics,
    make_issue_id,
)
from writepy.utils.constants import Constants
from writepy.utils.helpers import get_sentences, get_words, is_blank

_VOWELS = "aeiouy"
_NON_ALPHA_RE = re.compile(r"[^a-z]")
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")


def count_syllables(word: str) -> int:
    """Approximate the number of syllables in an English word.

    Counts vowel groups, drops a silent trailing 'e' and adds one back for a
    consonant + 'le' ending. Words of three letters or fewer count as one.
    """
    clean = _NON_ALPHA_RE.sub("", word.lower()) if word else ""
    if not clean:
        return 0
    if len(clean) <= 3:
        return 1

    count = 0
    previous_was_vowel = False
    for char in clean:
        is_vowel = char in _VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel

    if clean.endswith("e") and count > 1:
        count -= 1
    if clean.endswith("le") and clean[-3] not in _VOWELS:
        count += 1

    return max(1, count)


def count_total_syllables(text: str) -> int:
    """Sum syllables over every whitespace-separated word."""
    return sum(count_syllables(word) for word in get_words(text))


def calculate_flesch_kincaid_grade(text: str) -> float:
    """Flesch-Kincaid grade: 0.39*(W/S) + 11.8*(Syl/W) - 15.59, one decimal."""
    total_words = len(get_words(text))
    total_sentences = len(get_sentences(text))
    if total_words == 0 or total_sentences == 0:
        return 0.0

    grade = (
        0.39 * (total_words / total_sentences)
        + 11.8 * (count_total_syllables(text) / total_words)
        - 15.59
    )
    return round(grade, 1)


def get_education_level(grade: float) -> str:
    """Map a grade to an education level, clamping to the known grade range."""
    clamped = max(Constants.MIN_GRADE, min(Constants.MAX_GRADE, round(grade)))
    return GRADE_LEVELS.get(clamped, GRADE_LEVELS[Constants.MIN_GRADE])


def calculate_average_word_length(text: str) -> float:
    """Average word length in letters and digits, ignoring punctuation."""
    words = get_words(text)
    if not words:
        return 0.0
    total_chars = sum(len(_NON_ALNUM_RE.sub("", word)) for word in words)
    return total_chars / len(words)


def find_difficult_sentences(text: str) -> list[int]:
    """Return indices of sentences longer than the difficult-sentence threshold."""
    return [
        index
        for index, sentence in enumerate(get_sentences(text))
        if len(get_words(sentence)) > Constants.DIFFICULT_SENTENCE_THRESHOLD
    ]


def calculate_readability(text: str) -> ReadabilityMetrics:
    """Calculate complete readability metrics for text."""
    words = get_words(text)
    sentences = get_sentences(text)
    grade = calculate_flesch_kincaid_grade(text)

    return ReadabilityMetrics(
        flesch_kincaid_grade=grade,
        education_level=get_education_level(grade),
        average_sentence_length=len(words) / len(sentences) if sentences else 0.0,
        average_word_length=calculate_average_word_length(text),
        difficult_sentences=tuple(find_difficult_sentences(text)),
    )


def generate_readability_issues(text: str) -> list[Issue]:
    """Flag long sentences and, when words average too long, complex vocabulary."""
    issues: list[Issue] = []
    if is_blank(text):
        return issues

    current_index = 0
    for sentence in get_sentences(text):
        start = text.find(sentence, current_index)
        end = start + len(sentence)
        word_count = len(get_words(sentence))

        if word_count > Constants.DIFFICULT_SENTENCE_THRESHOLD:
            issues.append(
                Issue(
                    id=make_issue_id("long-sentence", start, end),
                    rule="long-sentence",
                    category=IssueCategory.CLARITY,
                    severity=IssueSeverity.WARNING,
                    message="Long sentence detected",
                    description=(
                        f"This sentence has {word_count} words. Consider breaking it into "
                        "shorter sentences for better readability."
                    ),
                    start_index=start,
                    end_index=end,
                    original_text=sentence,
                )
            )
        current_index = end

    average_word_length = calculate_average_word_length(text)
    if average_word_length > Constants.COMPLEX_WORD_LENGTH_THRESHOLD:
        issues.append(
            Issue(
                id=make_issue_id("complex-vocabulary", 0, len(text)),
                rule="complex-vocabulary",
                category=IssueCategory.CLARITY,
                severity=IssueSeverity.SUGGESTION,
                message="Complex vocabulary detected",
                description=(
                    f"The average word length is {average_word_length:.1f} characters. "
                    "Consider using simpler words for better readability."
                ),
                start_index=0,
                end_index=len(text),
                original_text=text,
            )
        )

    return issues
