"""Shared text helpers for the detectors."""

import functools
import os
import re
from re import Pattern

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_END_RE = re.compile(r"[.!?]+")
_SENTENCE_SPAN_RE = re.compile(r"[^.!?]+[.!?]*")


def is_blank(text: str | None) -> bool:
    """Return True for None, empty or whitespace-only text."""
    return not text or not text.strip()


def get_words(text: str) -> list[str]:
    """Split text into whitespace-separated tokens."""
    if is_blank(text):
        return []
    return _WHITESPACE_RE.split(text.strip())


def get_sentences(text: str) -> list[str]:
    """Split text on runs of sentence-ending punctuation.

    Punctuation is dropped and each sentence is stripped; empty fragments are
    discarded.
    """
    if is_blank(text):
        return []
    parts = (part.strip() for part in _SENTENCE_END_RE.split(text))
    return [part for part in parts if part]


def get_sentence_spans(text: str) -> list[tuple[str, int, int]]:
    """Split text into sentences that keep their terminal punctuation.

    Returns:
        List of (sentence, start_index, end_index) with surrounding whitespace
        excluded from the span
    """
    spans: list[tuple[str, int, int]] = []
    for match in _SENTENCE_SPAN_RE.finditer(text):
        raw = match.group(0)
        stripped = raw.strip()
        if not stripped:
            continue
        start = match.start() + (len(raw) - len(raw.lstrip()))
        spans.append((stripped, start, start + len(stripped)))
    return spans


def truncate(text: str, length: int) -> str:
    """Truncate text to ``length`` characters, appending '...' when cut."""
    if len(text) <= length:
        return text
    return text[:length] + "..."


def slugify_phrase(phrase: str) -> str:
    """Turn a phrase into a rule-id fragment ('in order to' -> 'in-order-to')."""
    return _WHITESPACE_RE.sub("-", phrase.strip())


@functools.lru_cache(maxsize=None)
def compile_word_regex(word: str) -> Pattern:
    """Compile a case-insensitive whole-word pattern for a literal word or phrase."""
    return re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE)


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)
