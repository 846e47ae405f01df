"""Type definitions for WritePy.

Every analysis value is a frozen pydantic model: a new text always produces a
newly constructed result, never a mutated one.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class IssueCategory(str, Enum):
    """Scoring category an issue belongs to."""

    CORRECTNESS = "correctness"
    CLARITY = "clarity"
    ENGAGEMENT = "engagement"
    DELIVERY = "delivery"


class IssueSeverity(str, Enum):
    """Severity of an issue, used to weight score deductions."""

    ERROR = "error"
    WARNING = "warning"
    SUGGESTION = "suggestion"


class ToneType(str, Enum):
    """Tones recognised by the tone classifier."""

    FORMAL = "formal"
    INFORMAL = "informal"
    CONFIDENT = "confident"
    NEUTRAL = "neutral"
    FRIENDLY = "friendly"


ALL_ISSUE_CATEGORIES: tuple[IssueCategory, ...] = tuple(IssueCategory)
TONE_TYPES: tuple[ToneType, ...] = tuple(ToneType)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Correction(_Frozen):
    """A proposed replacement string for an issue's span."""

    text: str
    confidence: float = 1.0
    description: str | None = None


class Issue(_Frozen):
    """A flagged half-open span ``[start_index, end_index)`` into the current text.

    ``original_text`` is a snapshot taken at detection time; corrections compare
    it against the live text before splicing.
    """

    id: str
    rule: str
    category: IssueCategory
    severity: IssueSeverity
    message: str
    description: str = ""
    start_index: int
    end_index: int
    original_text: str
    suggestions: tuple[Correction, ...] = ()


class WritingScore(_Frozen):
    """Writing quality score breakdown, each value in [0, 100]."""

    overall: int
    correctness: int
    clarity: int
    engagement: int
    delivery: int


class ReadabilityMetrics(_Frozen):
    """Readability metrics based on the Flesch-Kincaid formula."""

    flesch_kincaid_grade: float
    education_level: str
    average_sentence_length: float
    average_word_length: float
    difficult_sentences: tuple[int, ...] = ()


class ToneBreakdown(_Frozen):
    """Tone percentage breakdown entry."""

    tone: ToneType
    percentage: int


class ToneInconsistency(_Frozen):
    """A sentence whose tone disagrees with the dominant tone."""

    start_index: int
    end_index: int
    detected_tone: ToneType
    expected_tone: ToneType


class ToneAnalysis(_Frozen):
    """Tone analysis result."""

    dominant: ToneType
    breakdown: tuple[ToneBreakdown, ...]
    is_consistent: bool
    inconsistencies: tuple[ToneInconsistency, ...] = ()


class TextStatistics(_Frozen):
    """Raw text statistics."""

    word_count: int
    character_count: int
    character_count_no_spaces: int
    sentence_count: int
    paragraph_count: int
    average_sentence_length: float
    reading_time_minutes: int


class AnalysisResult(_Frozen):
    """Complete result of one analysis pass, issues ordered by ascending start."""

    issues: tuple[Issue, ...] = Field(default_factory=tuple)
    score: WritingScore
    readability: ReadabilityMetrics
    tone: ToneAnalysis
    statistics: TextStatistics


# Grade level mapping for readability scores
GRADE_LEVELS: dict[int, str] = {
    1: "Grade 1",
    2: "Grade 2",
    3: "Grade 3",
    4: "Grade 4",
    5: "Grade 5",
    6: "Grade 6",
    7: "Grade 7",
    8: "Grade 8",
    9: "High School Freshman",
    10: "High School Sophomore",
    11: "High School Junior",
    12: "High School Senior",
    13: "College Freshman",
    14: "College Sophomore",
    15: "College Junior",
    16: "College Senior",
    17: "Graduate Level",
}


def make_issue_id(rule: str, start_index: int, end_index: int) -> str:
    """Build a deterministic issue id from its rule and span."""
    return f"{rule}-{start_index}-{end_index}"
