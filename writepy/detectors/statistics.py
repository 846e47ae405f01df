"""Raw text statistics."""

import math
import re

from writepy.core.types import TextStatistics
from writepy.utils.constants import Constants
from writepy.utils.helpers import get_words, is_blank

_SENTENCE_END_RE = re.compile(r"[.!?]+")
_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")
_WHITESPACE_RE = re.compile(r"\s")


def count_words(text: str) -> int:
    return len(get_words(text))


def count_characters(text: str) -> int:
    return len(text)


def count_characters_no_spaces(text: str) -> int:
    return len(_WHITESPACE_RE.sub("", text))


def count_sentences(text: str) -> int:
    """Count runs of sentence-ending punctuation."""
    if is_blank(text):
        return 0
    return len(_SENTENCE_END_RE.findall(text))


def count_paragraphs(text: str) -> int:
    """Count blank-line separated paragraphs; non-empty text has at least one."""
    if is_blank(text):
        return 0
    paragraphs = [p for p in _PARAGRAPH_SPLIT_RE.split(text) if p.strip()]
    return max(1, len(paragraphs))


def calculate_reading_time(word_count: int) -> int:
    """Reading time in whole minutes, rounded up."""
    if word_count == 0:
        return 0
    return math.ceil(word_count / Constants.AVERAGE_READING_SPEED_WPM)


def calculate_statistics(text: str) -> TextStatistics:
    """Calculate complete text statistics."""
    word_count = count_words(text)
    sentence_count = count_sentences(text)

    return TextStatistics(
        word_count=word_count,
        character_count=count_characters(text),
        character_count_no_spaces=count_characters_no_spaces(text),
        sentence_count=sentence_count,
        paragraph_count=count_paragraphs(text),
        average_sentence_length=word_count / sentence_count if sentence_count else 0.0,
        reading_time_minutes=calculate_reading_time(word_count),
    )
