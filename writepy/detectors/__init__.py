"""Pure detector and metric functions called by the analysis orchestrator."""

from .advanced import detect_long_sentences, run_advanced_checks
from .readability import calculate_readability, generate_readability_issues
from .rules import ALL_RULES, analyze_with_rules
from .score import calculate_writing_score, create_empty_score
from .statistics import calculate_statistics
from .tone import analyze_tone, generate_tone_issues

__all__ = [
    "ALL_RULES",
    "analyze_tone",
    "analyze_with_rules",
    "calculate_readability",
    "calculate_statistics",
    "calculate_writing_score",
    "create_empty_score",
    "detect_long_sentences",
    "generate_readability_issues",
    "generate_tone_issues",
    "run_advanced_checks",
]
