"""Writing score calculation.

Each category starts at 100 and loses a fixed number of points per weighted
issue; the overall score is a weighted average of the category scores with
correctness counting most.
"""

import math
from collections.abc import Iterable

from writepy.core.types import Issue, IssueCategory, IssueSeverity, WritingScore
from writepy.utils.constants import Constants

SEVERITY_WEIGHTS: dict[IssueSeverity, int] = {
    IssueSeverity.ERROR: 3,
    IssueSeverity.WARNING: 2,
    IssueSeverity.SUGGESTION: 1,
}

CATEGORY_WEIGHTS: dict[IssueCategory, float] = {
    IssueCategory.CORRECTNESS: 0.4,
    IssueCategory.CLARITY: 0.25,
    IssueCategory.ENGAGEMENT: 0.2,
    IssueCategory.DELIVERY: 0.15,
}


def clamp_score(score: float) -> int:
    """Round and clamp a score to [0, 100]; non-finite values become 0."""
    if not math.isfinite(score):
        return Constants.MIN_SCORE
    # Half up, not banker's rounding
    rounded = math.floor(score + 0.5)
    return max(Constants.MIN_SCORE, min(Constants.MAX_SCORE, rounded))


def calculate_weighted_issue_count(issues: Iterable[Issue]) -> int:
    return sum(SEVERITY_WEIGHTS[issue.severity] for issue in issues)


def calculate_score_from_issues(issues: Iterable[Issue]) -> int:
    deduction = calculate_weighted_issue_count(issues) * Constants.POINTS_PER_WEIGHTED_ISSUE
    return clamp_score(Constants.BASE_SCORE - deduction)


def calculate_category_score(issues: Iterable[Issue], category: IssueCategory) -> int:
    return calculate_score_from_issues(issue for issue in issues if issue.category == category)


def calculate_overall_score(category_scores: dict[IssueCategory, int]) -> int:
    weighted = sum(
        category_scores[category] * weight for category, weight in CATEGORY_WEIGHTS.items()
    )
    return clamp_score(weighted)


def calculate_writing_score(issues: Iterable[Issue]) -> WritingScore:
    """Calculate the complete score breakdown for a final issue list."""
    issue_list = list(issues)
    scores = {
        category: calculate_category_score(issue_list, category) for category in IssueCategory
    }

    return WritingScore(
        overall=calculate_overall_score(scores),
        correctness=scores[IssueCategory.CORRECTNESS],
        clarity=scores[IssueCategory.CLARITY],
        engagement=scores[IssueCategory.ENGAGEMENT],
        delivery=scores[IssueCategory.DELIVERY],
    )


def calculate_score_after_fix(issues: Iterable[Issue], fixed_issue_id: str) -> WritingScore:
    """Score the issue list as if the issue with ``fixed_issue_id`` were gone."""
    return calculate_writing_score(issue for issue in issues if issue.id != fixed_issue_id)


def create_empty_score() -> WritingScore:
    """Perfect score for text without issues."""
    return WritingScore(
        overall=Constants.MAX_SCORE,
        correctness=Constants.MAX_SCORE,
        clarity=Constants.MAX_SCORE,
        engagement=Constants.MAX_SCORE,
        delivery=Constants.MAX_SCORE,
    )


def is_perfect_score(score: WritingScore) -> bool:
    return score == create_empty_score()


def get_score_description(score: int) -> str:
    """Describe a 0-100 score in words."""
    for threshold, description in (
        (90, "Excellent"),
        (80, "Very Good"),
        (70, "Good"),
        (60, "Fair"),
        (50, "Needs Improvement"),
        (40, "Poor"),
    ):
        if score >= threshold:
            return description
    return "Very Poor"
