"""Undo history for corrections."""

from collections import deque

from loguru import logger
from pydantic import BaseModel, ConfigDict

from writepy.analysis.dismissals import DismissedPatternKey
from writepy.analysis.orchestrator import analyze_text
from writepy.core.types import AnalysisResult, Correction, Issue
from writepy.corrections.apply import CorrectionResult, apply_correction_from_issue
from writepy.utils.constants import Constants


class HistoryEntry(BaseModel):
    """Text and result snapshot taken before a correction was applied."""

    model_config = ConfigDict(frozen=True)

    text: str
    result: AnalysisResult


class CorrectionHistory:
    """Bounded undo stack; pushing past capacity evicts the oldest entry."""

    def __init__(self, max_size: int = Constants.MAX_HISTORY_SIZE) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self._entries: deque[HistoryEntry] = deque(maxlen=max_size)

    @property
    def max_size(self) -> int:
        return self._entries.maxlen or 0

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, entry: HistoryEntry) -> None:
        if len(self._entries) == self.max_size:
            logger.debug(f"History full ({self.max_size}), evicting oldest entry")
        self._entries.append(entry)

    def pop(self) -> HistoryEntry | None:
        """Remove and return the newest entry, or None when empty."""
        if not self._entries:
            return None
        return self._entries.pop()

    def can_undo(self) -> bool:
        return bool(self._entries)

    def clear(self) -> None:
        self._entries.clear()


class CorrectionHandler:
    """Standalone text holder with correction and undo support.

    Unlike the engine it does not keep a current analysis result; snapshots are
    analyzed when pushed.
    """

    def __init__(
        self,
        initial_text: str = "",
        dismissed_patterns: frozenset[DismissedPatternKey] = frozenset(),
        max_history_size: int = Constants.MAX_HISTORY_SIZE,
    ) -> None:
        self._text = initial_text
        self._dismissed_patterns = dismissed_patterns
        self._history = CorrectionHistory(max_history_size)

    @property
    def text(self) -> str:
        return self._text

    @property
    def history_size(self) -> int:
        return len(self._history)

    def set_text(self, text: str) -> None:
        """Replace the text; the history no longer applies and is cleared."""
        self._text = text
        self._history.clear()

    def set_dismissed_patterns(self, patterns: frozenset[DismissedPatternKey]) -> None:
        self._dismissed_patterns = patterns

    def apply_correction(self, issue: Issue, correction: Correction) -> CorrectionResult:
        """Apply a correction; the prior state is saved only if it succeeds."""
        result = apply_correction_from_issue(
            self._text, issue, correction, self._dismissed_patterns
        )
        if result.success:
            self._history.push(
                HistoryEntry(
                    text=self._text, result=analyze_text(self._text, self._dismissed_patterns)
                )
            )
            self._text = result.text
        return result

    def undo(self) -> HistoryEntry | None:
        entry = self._history.pop()
        if entry is not None:
            self._text = entry.text
        return entry

    def can_undo(self) -> bool:
        return self._history.can_undo()

    def clear_history(self) -> None:
        self._history.clear()
