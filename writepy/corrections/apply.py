"""Applying corrections to text.

A correction is only spliced in after the live text at the issue's span is
confirmed to still match the issue's snapshot. Every successful correction is
followed by a full re-analysis of the new text.
"""

from collections.abc import Iterable

from loguru import logger
from pydantic import BaseModel, ConfigDict

from writepy.analysis.dismissals import DismissedPatternKey
from writepy.analysis.orchestrator import analyze_text
from writepy.core.exceptions import OverlappingCorrectionsError
from writepy.core.types import AnalysisResult, Correction, Issue


class CorrectionResult(BaseModel):
    """Outcome of applying one or more corrections.

    On failure ``text`` is the unmodified input and ``result`` a fresh analysis
    of it.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    result: AnalysisResult
    success: bool
    error: str | None = None


class SpanCorrection(BaseModel):
    """Replacement text for the half-open span ``[start_index, end_index)``."""

    model_config = ConfigDict(frozen=True)

    start_index: int
    end_index: int
    text: str

    @property
    def delta(self) -> int:
        return len(self.text) - (self.end_index - self.start_index)


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    error: str | None = None


def is_valid_range(text: str, start_index: int, end_index: int) -> bool:
    return 0 <= start_index <= end_index <= len(text)


def apply_text_correction(text: str, start_index: int, end_index: int, replacement: str) -> str:
    """Replace ``text[start_index:end_index]`` with ``replacement``.

    An out-of-range or inverted span leaves the text unchanged.
    """
    if not is_valid_range(text, start_index, end_index):
        logger.warning(
            f"Ignoring correction with invalid range [{start_index}, {end_index}) "
            f"for text of length {len(text)}"
        )
        return text
    return text[:start_index] + replacement + text[end_index:]


def validate_correction(
    text: str, start_index: int, end_index: int, expected_original: str | None = None
) -> ValidationResult:
    """Check that a span is in range and, optionally, still holds the expected text."""
    if start_index < 0:
        return ValidationResult(is_valid=False, error="Start index cannot be negative")
    if end_index > len(text):
        return ValidationResult(is_valid=False, error="End index exceeds text length")
    if start_index > end_index:
        return ValidationResult(
            is_valid=False, error="Start index cannot be greater than end index"
        )

    if expected_original is not None:
        actual = text[start_index:end_index]
        if actual != expected_original:
            return ValidationResult(
                is_valid=False,
                error=f'Text mismatch: expected "{expected_original}" but found "{actual}"',
            )

    return ValidationResult(is_valid=True)


def apply_correction_from_issue(
    text: str,
    issue: Issue,
    correction: Correction,
    dismissed_patterns: frozenset[DismissedPatternKey] = frozenset(),
) -> CorrectionResult:
    """Apply ``correction`` at ``issue``'s span and re-analyze.

    A stale issue (its span no longer holds ``original_text``) or an invalid
    span is not applied. The returned result then has ``success=False``, the
    error message and a fresh analysis of the unmodified text.

    Args:
        text: Current text
        issue: Issue whose span is replaced
        correction: Replacement to splice in
        dismissed_patterns: Patterns suppressed in the re-analysis

    Returns:
        CorrectionResult with the new (or unchanged) text and its analysis
    """
    validation = validate_correction(text, issue.start_index, issue.end_index, issue.original_text)
    if not validation.is_valid:
        logger.warning(f"Correction for {issue.id} not applied: {validation.error}")
        return CorrectionResult(
            text=text,
            result=analyze_text(text, dismissed_patterns),
            success=False,
            error=validation.error,
        )

    new_text = apply_text_correction(text, issue.start_index, issue.end_index, correction.text)
    logger.debug(
        f"Applied correction for {issue.id}: {issue.original_text!r} -> {correction.text!r}"
    )
    return CorrectionResult(
        text=new_text,
        result=analyze_text(new_text, dismissed_patterns),
        success=True,
    )


def check_no_overlaps(corrections: Iterable[SpanCorrection]) -> None:
    """Raise if any two spans overlap or start at the same position.

    Adjacent spans (one ending where the next starts) are allowed.

    Raises:
        OverlappingCorrectionsError: On the first overlapping pair found
    """
    ordered = sorted(corrections, key=lambda c: (c.start_index, c.end_index))
    for previous, current in zip(ordered, ordered[1:]):
        if previous.end_index > current.start_index or previous.start_index == current.start_index:
            raise OverlappingCorrectionsError(
                (previous.start_index, previous.end_index),
                (current.start_index, current.end_index),
            )


def apply_multiple_corrections(
    text: str,
    corrections: Iterable[SpanCorrection],
    dismissed_patterns: frozenset[DismissedPatternKey] = frozenset(),
) -> CorrectionResult:
    """Apply a batch of non-overlapping corrections with a single re-analysis.

    Corrections are applied right to left, so a later splice never shifts the
    offsets of an earlier, not yet applied one. Corrections with an invalid
    range are skipped.

    Raises:
        OverlappingCorrectionsError: If two valid corrections overlap; nothing is
            applied in that case
    """
    batch = list(corrections)
    valid = [c for c in batch if is_valid_range(text, c.start_index, c.end_index)]
    if len(valid) < len(batch):
        logger.warning(f"Skipping {len(batch) - len(valid)} corrections with invalid ranges")
    check_no_overlaps(valid)

    new_text = text
    for correction in sorted(valid, key=lambda c: c.start_index, reverse=True):
        new_text = apply_text_correction(
            new_text, correction.start_index, correction.end_index, correction.text
        )

    if valid:
        logger.debug(f"Applied {len(valid)} corrections in one batch")
    return CorrectionResult(
        text=new_text,
        result=analyze_text(new_text, dismissed_patterns),
        success=True,
    )
