"""Analysis orchestration: run every detector and compose one result.

``analyze_text`` is a pure function of its text and dismissed-pattern set, so
two calls with the same arguments give equal results.
"""

from collections.abc import Iterable

from loguru import logger

from writepy.analysis.dismissals import DismissedPatternKey, is_issue_dismissed
from writepy.core.types import (
    AnalysisResult,
    Issue,
    ReadabilityMetrics,
    TextStatistics,
)
from writepy.detectors.advanced import run_advanced_checks
from writepy.detectors.readability import (
    calculate_readability,
    generate_readability_issues,
    get_education_level,
)
from writepy.detectors.rules import analyze_with_rules
from writepy.detectors.score import calculate_writing_score, create_empty_score
from writepy.detectors.statistics import calculate_statistics
from writepy.detectors.tone import analyze_tone, generate_tone_issues
from writepy.utils.helpers import is_blank


def deduplicate_issues(issues: Iterable[Issue]) -> list[Issue]:
    """Collapse issues sharing start, end and rule, keeping the first seen.

    Different rules flagging the same span are kept.
    """
    seen: set[tuple[int, int, str]] = set()
    unique: list[Issue] = []
    for issue in issues:
        key = (issue.start_index, issue.end_index, issue.rule)
        if key in seen:
            continue
        seen.add(key)
        unique.append(issue)
    return unique


def filter_dismissed_issues(
    issues: Iterable[Issue], dismissed_patterns: frozenset[DismissedPatternKey]
) -> list[Issue]:
    if not dismissed_patterns:
        return list(issues)
    return [issue for issue in issues if not is_issue_dismissed(issue, dismissed_patterns)]


def collect_issues(text: str) -> list[Issue]:
    """Run every issue detector in a fixed order: rules, advanced, readability, tone."""
    return [
        *analyze_with_rules(text),
        *run_advanced_checks(text),
        *generate_readability_issues(text),
        *generate_tone_issues(text),
    ]


def create_empty_analysis_result() -> AnalysisResult:
    """Canonical result for empty or whitespace-only text."""
    return AnalysisResult(
        issues=(),
        score=create_empty_score(),
        readability=ReadabilityMetrics(
            flesch_kincaid_grade=0.0,
            education_level=get_education_level(0),
            average_sentence_length=0.0,
            average_word_length=0.0,
            difficult_sentences=(),
        ),
        tone=analyze_tone(""),
        statistics=TextStatistics(
            word_count=0,
            character_count=0,
            character_count_no_spaces=0,
            sentence_count=0,
            paragraph_count=0,
            average_sentence_length=0.0,
            reading_time_minutes=0,
        ),
    )


def analyze_text(
    text: str, dismissed_patterns: frozenset[DismissedPatternKey] = frozenset()
) -> AnalysisResult:
    """Analyze text and compose issues, score and metrics into one result.

    Args:
        text: Text to analyze
        dismissed_patterns: Rule + lowercase text pairs to suppress

    Returns:
        AnalysisResult with issues ordered by ascending start index. Readability,
        tone and statistics describe the text as written, independent of which
        issues were dismissed.
    """
    if is_blank(text):
        return create_empty_analysis_result()

    collected = collect_issues(text)
    unique = deduplicate_issues(collected)
    issues = filter_dismissed_issues(unique, dismissed_patterns)
    # list.sort is stable: equal starts keep detector order
    issues.sort(key=lambda issue: issue.start_index)

    logger.debug(
        f"Analyzed {len(text)} chars: {len(collected)} raw issues, "
        f"{len(collected) - len(unique)} duplicates, "
        f"{len(unique) - len(issues)} dismissed, {len(issues)} reported"
    )

    return AnalysisResult(
        issues=tuple(issues),
        score=calculate_writing_score(issues),
        readability=calculate_readability(text),
        tone=analyze_tone(text),
        statistics=calculate_statistics(text),
    )
