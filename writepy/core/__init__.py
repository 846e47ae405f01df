"""Core types, configuration and errors for WritePy."""

from .config import Config, load_config
from .exceptions import OverlappingCorrectionsError, WritePyError
from .types import (
    ALL_ISSUE_CATEGORIES,
    GRADE_LEVELS,
    TONE_TYPES,
    AnalysisResult,
    Correction,
    Issue,
    IssueCategory,
    IssueSeverity,
    ReadabilityMetrics,
    TextStatistics,
    ToneAnalysis,
    ToneBreakdown,
    ToneInconsistency,
    ToneType,
    WritingScore,
    make_issue_id,
)

__all__ = [
    "ALL_ISSUE_CATEGORIES",
    "GRADE_LEVELS",
    "TONE_TYPES",
    "AnalysisResult",
    "Config",
    "Correction",
    "Issue",
    "IssueCategory",
    "IssueSeverity",
    "OverlappingCorrectionsError",
    "ReadabilityMetrics",
    "TextStatistics",
    "ToneAnalysis",
    "ToneBreakdown",
    "ToneInconsistency",
    "ToneType",
    "WritePyError",
    "WritingScore",
    "load_config",
    "make_issue_id",
]
