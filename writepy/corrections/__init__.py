"""Correction application, position adjustment and undo history."""

from .apply import (
    CorrectionResult,
    SpanCorrection,
    ValidationResult,
    apply_correction_from_issue,
    apply_multiple_corrections,
    apply_text_correction,
    validate_correction,
)
from .history import CorrectionHandler, CorrectionHistory, HistoryEntry
from .positions import adjust_issue_positions, adjust_positions_for_batch, calculate_position_delta

__all__ = [
    "CorrectionHandler",
    "CorrectionHistory",
    "CorrectionResult",
    "HistoryEntry",
    "SpanCorrection",
    "ValidationResult",
    "adjust_issue_positions",
    "adjust_positions_for_batch",
    "apply_correction_from_issue",
    "apply_multiple_corrections",
    "apply_text_correction",
    "calculate_position_delta",
    "validate_correction",
]
