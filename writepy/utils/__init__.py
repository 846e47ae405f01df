"""Utility functions for WritePy."""

from writepy.utils.constants import Constants
from writepy.utils.helpers import (
    compile_word_regex,
    expand_file_path,
    get_sentence_spans,
    get_sentences,
    get_words,
    is_blank,
    slugify_phrase,
    truncate,
)
from writepy.utils.logging import setup_logger

__all__ = [
    "Constants",
    "compile_word_regex",
    "expand_file_path",
    "get_sentence_spans",
    "get_sentences",
    "get_words",
    "is_blank",
    "setup_logger",
    "slugify_phrase",
    "truncate",
]
