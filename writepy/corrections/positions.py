"""Position adjustment for issues after a correction.

This is a fast path for keeping displayed issues roughly in place before the
re-analysis result arrives. The re-analysis stays the system of record.
"""

from collections.abc import Iterable

from writepy.core.types import Issue


def calculate_position_delta(original_length: int, correction_length: int) -> int:
    """Shift applied to everything after a correction; negative when text shrinks."""
    return correction_length - original_length


def adjust_issue_positions(
    issues: Iterable[Issue], correction_start: int, correction_end: int, delta: int
) -> list[Issue]:
    """Re-position issues around a correction of ``[correction_start, correction_end)``.

    Args:
        issues: Issues computed against the text before the correction
        correction_start: Start of the replaced span
        correction_end: End of the replaced span in the old text
        delta: Length change caused by the correction

    Returns:
        Issues overlapping the span are dropped as resolved. Issues ending at
        or before ``correction_start`` are unchanged and later ones shift by
        ``delta``.
    """
    adjusted: list[Issue] = []
    for issue in issues:
        if issue.start_index < correction_end and issue.end_index > correction_start:
            continue
        if issue.end_index <= correction_start:
            adjusted.append(issue)
            continue
        adjusted.append(
            issue.model_copy(
                update={
                    "start_index": issue.start_index + delta,
                    "end_index": issue.end_index + delta,
                }
            )
        )
    return adjusted


def adjust_positions_for_batch(
    issues: Iterable[Issue], corrections: Iterable[tuple[int, int, int]]
) -> list[Issue]:
    """Fold ``adjust_issue_positions`` over ``(start, end, delta)`` triples.

    The triples are folded right to left by start, the order a batch is applied in.
    """
    adjusted = list(issues)
    for start, end, delta in sorted(corrections, key=lambda c: c[0], reverse=True):
        adjusted = adjust_issue_positions(adjusted, start, end, delta)
    return adjusted
