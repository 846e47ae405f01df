"""Shared fixtures for WritePy tests."""

import pytest

from writepy.core.types import Correction, Issue, IssueCategory, IssueSeverity, make_issue_id


def build_issue(
    rule: str,
    start: int,
    end: int,
    original_text: str,
    category: IssueCategory = IssueCategory.CORRECTNESS,
    severity: IssueSeverity = IssueSeverity.ERROR,
    suggestions: tuple[str, ...] = (),
) -> Issue:
    return Issue(
        id=make_issue_id(rule, start, end),
        rule=rule,
        category=category,
        severity=severity,
        message=f"{rule} message",
        start_index=start,
        end_index=end,
        original_text=original_text,
        suggestions=tuple(Correction(text=s) for s in suggestions),
    )


@pytest.fixture
def make_issue():
    """Factory for hand-built issues."""
    return build_issue
