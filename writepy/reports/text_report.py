"""Human-readable text report for one analysis result."""

import io
from collections.abc import Iterable
from typing import TextIO

from writepy.core.types import AnalysisResult, Issue, IssueCategory
from writepy.detectors.score import get_score_description
from writepy.reports.helpers import (
    format_percentage_bar,
    write_report_header,
    write_section_header,
)
from writepy.utils.constants import Constants
from writepy.utils.helpers import truncate


def _write_score_section(result: AnalysisResult, f: TextIO) -> None:
    score = result.score
    write_section_header(f, "Writing Score")
    f.write(f"  Overall:     {score.overall:3d}  ({get_score_description(score.overall)})\n")
    f.write(f"  Correctness: {score.correctness:3d}\n")
    f.write(f"  Clarity:     {score.clarity:3d}\n")
    f.write(f"  Engagement:  {score.engagement:3d}\n")
    f.write(f"  Delivery:    {score.delivery:3d}\n\n")


def _write_statistics_section(result: AnalysisResult, f: TextIO) -> None:
    stats = result.statistics
    write_section_header(f, "Statistics")
    f.write(f"  Words:            {stats.word_count}\n")
    f.write(
        f"  Characters:       {stats.character_count} "
        f"({stats.character_count_no_spaces} without spaces)\n"
    )
    f.write(f"  Sentences:        {stats.sentence_count}\n")
    f.write(f"  Paragraphs:       {stats.paragraph_count}\n")
    f.write(f"  Avg sentence:     {stats.average_sentence_length:.1f} words\n")
    f.write(f"  Reading time:     {stats.reading_time_minutes} min\n\n")


def _write_readability_section(result: AnalysisResult, f: TextIO) -> None:
    readability = result.readability
    write_section_header(f, "Readability")
    f.write(
        f"  Flesch-Kincaid grade: {readability.flesch_kincaid_grade:.1f} "
        f"({readability.education_level})\n"
    )
    f.write(f"  Avg word length:      {readability.average_word_length:.1f} characters\n")
    if readability.difficult_sentences:
        indices = ", ".join(str(i + 1) for i in readability.difficult_sentences)
        f.write(f"  Difficult sentences:  {indices}\n")
    f.write("\n")


def _write_tone_section(result: AnalysisResult, f: TextIO) -> None:
    tone = result.tone
    write_section_header(f, "Tone")
    consistency = "consistent" if tone.is_consistent else "inconsistent"
    f.write(f"  Dominant: {tone.dominant.value} ({consistency})\n")
    for entry in tone.breakdown:
        f.write(
            f"    {entry.tone.value:<10} {format_percentage_bar(entry.percentage)} "
            f"{entry.percentage:3d}%\n"
        )
    f.write("\n")


def _write_issue(issue: Issue, f: TextIO) -> None:
    quoted = truncate(issue.original_text, Constants.TRUNCATE_LENGTH)
    f.write(
        f"  [{issue.severity.value}] {issue.start_index}-{issue.end_index} "
        f"'{quoted}': {issue.message} ({issue.rule})\n"
    )
    if issue.suggestions:
        suggestions = ", ".join(f"'{s.text}'" for s in issue.suggestions)
        f.write(f"      Suggestions: {suggestions}\n")


def _write_issues_section(
    result: AnalysisResult, categories: Iterable[IssueCategory], f: TextIO
) -> None:
    write_section_header(f, f"Issues ({len(result.issues)})")
    if not result.issues:
        f.write("  No issues found.\n\n")
        return

    for category in categories:
        issues = [issue for issue in result.issues if issue.category == category]
        if not issues:
            continue
        f.write(f"{category.value.capitalize()} ({len(issues)}):\n")
        for issue in issues:
            _write_issue(issue, f)
        f.write("\n")


def write_text_report(
    result: AnalysisResult,
    f: TextIO,
    source: str | None = None,
    categories: Iterable[IssueCategory] | None = None,
) -> None:
    """Write a full text report.

    Args:
        result: Analysis result to describe
        f: File object to write to
        source: Name of the analyzed input, shown in the title
        categories: Issue categories to list; all when empty or None
    """
    title = f"WritePy Report: {source}" if source else "WritePy Report"
    write_report_header(f, title)
    _write_score_section(result, f)
    _write_statistics_section(result, f)
    _write_readability_section(result, f)
    _write_tone_section(result, f)
    _write_issues_section(result, list(categories or IssueCategory), f)


def render_text_report(
    result: AnalysisResult,
    source: str | None = None,
    categories: Iterable[IssueCategory] | None = None,
) -> str:
    buffer = io.StringIO()
    write_text_report(result, buffer, source, categories)
    return buffer.getvalue()
