"""JSON report for one analysis result."""

from collections.abc import Iterable
from datetime import datetime

from pydantic import BaseModel

from writepy.core.types import AnalysisResult, IssueCategory


class JsonReport(BaseModel):
    """Serialized form of a report: the analysis result plus where it came from."""

    source: str | None = None
    generated: datetime
    result: AnalysisResult


def filter_result_categories(
    result: AnalysisResult, categories: Iterable[IssueCategory] | None
) -> AnalysisResult:
    """Keep only issues in ``categories``; the score is left as computed."""
    wanted = set(categories or ())
    if not wanted:
        return result
    return result.model_copy(
        update={"issues": tuple(issue for issue in result.issues if issue.category in wanted)}
    )


def render_json_report(
    result: AnalysisResult,
    source: str | None = None,
    categories: Iterable[IssueCategory] | None = None,
) -> str:
    report = JsonReport(
        source=source,
        generated=datetime.now(),
        result=filter_result_categories(result, categories),
    )
    return report.model_dump_json(indent=2)
